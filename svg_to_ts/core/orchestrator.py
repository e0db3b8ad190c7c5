"""Conversion orchestrator: from icon definitions to a tree-shakable library."""

from __future__ import annotations

import asyncio
import glob
import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

from svg_to_ts.generators import (
    COMPLETE_ICON_SET_FILE_NAME,
    generate_complete_icon_set_content,
    generate_export_statement,
    generate_interface_definition,
    generate_svg_constant,
    generate_type_definition,
    generate_type_helper_with_import,
)
from svg_to_ts.models.definitions import IconDefinition
from svg_to_ts.models.options import ConversionOptions

from .exceptions import (
    CompilationError,
    ConversionError,
    DiscoveryError,
    FilesystemError,
    GenerationError,
    SvgToTsError,
)
from .protocols import DefinitionProvider, FilesystemGateway, SourceCompiler
from .state import ArtifactKind, ConversionResult, GeneratedArtifact, PipelineState

logger = logging.getLogger(__name__)


@contextmanager
def _failures_as(error_cls: type[SvgToTsError], message: str) -> Iterator[None]:
    """Re-raise foreign exceptions as ``error_cls``; project errors pass through."""
    try:
        yield
    except SvgToTsError:
        raise
    except Exception as e:
        raise error_cls(f"{message}: {e}") from e


class ConversionOrchestrator:
    """
    Drives a single conversion run.

    The run is a fixed sequence: clean the icons folder, collect the
    definitions, write one module per icon concurrently, then the optional
    complete icon set, the barrel file, the optional model files and finally
    the optional compile-and-prune step. The first failure stops the run;
    nothing written so far is rolled back.
    """

    def __init__(
        self,
        provider: DefinitionProvider,
        filesystem: FilesystemGateway,
        compiler: SourceCompiler | None = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            provider: Source of the icon definitions
            filesystem: Gateway for every read/write/delete of the run
            compiler: Compiler used when ``compile_sources`` is set
        """
        self._logger = logger.getChild(self.__class__.__name__)
        self._provider = provider
        self._filesystem = filesystem
        self._compiler = compiler
        self.state = PipelineState.IDLE

    async def convert(self, options: ConversionOptions) -> ConversionResult:
        """
        Run the whole pipeline for ``options``.

        Returns:
            Summary of the generated files

        Raises:
            ConversionError: Whatever failed, tagged with the failing stage
        """
        self.state = PipelineState.IDLE
        output_directory = Path(options.output_directory)
        result = ConversionResult(output_directory=output_directory)

        try:
            await self._run(options, result)
        except Exception as e:
            failed_stage = self.state
            self.state = PipelineState.FAILED
            self._logger.error(f"Something went wrong: {e}")
            raise ConversionError(failed_stage, e) from e

        self.state = PipelineState.DONE
        self._report(output_directory)
        return result

    async def _run(self, options: ConversionOptions, result: ConversionResult) -> None:
        icons_directory = result.output_directory / options.icons_folder_name

        self._enter(PipelineState.CLEANING)
        await self._clean(icons_directory)

        self._enter(PipelineState.PROCESSING)
        self._logger.info("--- File optimization ---")
        definitions = self._acquire_definitions(options)
        await self._emit_icon_modules(definitions, icons_directory, result)

        self._enter(PipelineState.EMITTING)
        if options.export_complete_icon_set:
            await self._emit_complete_icon_set(definitions, icons_directory, result)
        await self._emit_barrel(options, result)
        if options.model_file_name:
            await self._emit_models(
                options, options.model_file_name, definitions, icons_directory, result
            )

        if options.compile_sources:
            self._enter(PipelineState.COMPILING)
            extension = self._filesystem.extension
            barrel = result.output_directory / options.barrel_file_name
            await self._compile_and_prune(
                [
                    f"{glob.escape(str(icons_directory))}/*{extension}",
                    f"{glob.escape(str(barrel))}{extension}",
                ],
                result,
            )

    def _enter(self, state: PipelineState) -> None:
        self._logger.debug(f"Pipeline state: {self.state.value} -> {state.value}")
        self.state = state

    async def _clean(self, icons_directory: Path) -> None:
        with _failures_as(FilesystemError, f"Cannot delete {icons_directory}"):
            await self._filesystem.delete_folder(icons_directory)
        self._logger.info(f"deleting output directory: {icons_directory}")

    def _acquire_definitions(self, options: ConversionOptions) -> list[IconDefinition]:
        with _failures_as(DiscoveryError, "Cannot collect icon definitions"):
            definitions = list(self._provider.provide_definitions(options))
        self._logger.info(f"Collected {len(definitions)} icon definitions")
        return definitions

    async def _emit_icon_modules(
        self,
        definitions: Sequence[IconDefinition],
        icons_directory: Path,
        result: ConversionResult,
    ) -> None:
        """
        Write one constant module per definition, all writes in flight at once.

        Names go into ``result.generated_file_names`` before the writes are
        scheduled, so export order follows the definitions and not the order
        in which the writes complete.
        """
        writes = []
        try:
            for position, definition in enumerate(definitions, start=1):
                with _failures_as(
                    GenerationError, f"Cannot render icon definition #{position}"
                ):
                    generated_file_name = definition.generated_file_name
                    svg_constant = generate_svg_constant(
                        definition.variable_name, definition.type_name, definition.data
                    )
                result.generated_file_names.append(generated_file_name)
                writes.append(
                    self._write(icons_directory, generated_file_name, svg_constant)
                )
        except BaseException:
            # never scheduled, nothing to await
            for write in writes:
                write.close()
            raise

        outcomes = await asyncio.gather(*writes, return_exceptions=True)

        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome
        result.artifacts.extend(
            GeneratedArtifact(path, ArtifactKind.ICON) for path in outcomes
        )

    async def _emit_complete_icon_set(
        self,
        definitions: Sequence[IconDefinition],
        icons_directory: Path,
        result: ConversionResult,
    ) -> None:
        with _failures_as(GenerationError, "Cannot render the complete icon set"):
            content = generate_complete_icon_set_content(definitions)
        path = await self._write(icons_directory, COMPLETE_ICON_SET_FILE_NAME, content)
        result.generated_file_names.append(COMPLETE_ICON_SET_FILE_NAME)
        result.artifacts.append(GeneratedArtifact(path, ArtifactKind.COMPLETE_SET))

    async def _emit_barrel(
        self, options: ConversionOptions, result: ConversionResult
    ) -> None:
        with _failures_as(GenerationError, "Cannot render the barrel file"):
            content = generate_type_helper_with_import(
                options.interface_name,
                options.icons_folder_name,
                options.model_file_name,
            )
            content += "".join(
                generate_export_statement(name, options.icons_folder_name)
                for name in result.generated_file_names
            )
            if options.model_file_name:
                content += generate_export_statement(
                    options.model_file_name, options.icons_folder_name
                )

        path = await self._write(
            result.output_directory, options.barrel_file_name, content
        )
        result.artifacts.append(GeneratedArtifact(path, ArtifactKind.BARREL))
        self._logger.info(f"write {path.name}")

    async def _emit_models(
        self,
        options: ConversionOptions,
        model_file_name: str,
        definitions: Sequence[IconDefinition],
        icons_directory: Path,
        result: ConversionResult,
    ) -> None:
        with _failures_as(GenerationError, "Cannot render the model file"):
            model_file = generate_type_definition(
                options, definitions
            ) + generate_interface_definition(options)

        path = await self._write(icons_directory, model_file_name, model_file)
        result.artifacts.append(GeneratedArtifact(path, ArtifactKind.MODEL))
        self._logger.info(f"model-file successfully generated under {path}")

        if options.additional_model_output_path:
            path = await self._write(
                Path(options.additional_model_output_path), model_file_name, model_file
            )
            result.artifacts.append(
                GeneratedArtifact(path, ArtifactKind.ADDITIONAL_MODEL)
            )
            self._logger.info(f"additional model-file successfully generated under {path}")

    async def _compile_and_prune(
        self, patterns: Sequence[str], result: ConversionResult
    ) -> None:
        """
        Compile every generated source, then delete the sources.

        Sources are deleted only once the compiler returned without error.

        Args:
            patterns: Glob patterns of the generated sources, with every
                literal path component already escaped
            result: Result of the current run
        """
        if self._compiler is None:
            raise CompilationError("compile_sources is set but no compiler is configured")

        with _failures_as(FilesystemError, "Cannot resolve generated sources"):
            source_paths = await self._filesystem.resolve_paths(patterns)
        if not source_paths:
            raise CompilationError(
                f"No generated sources matched {', '.join(patterns)}"
            )

        with _failures_as(CompilationError, "Compilation failed"):
            self._compiler.compile(source_paths)
        self._logger.info("compile Typescript - generate JS and d.ts")

        with _failures_as(FilesystemError, "Cannot delete generated sources"):
            await self._filesystem.delete_files(source_paths)
        result.compiled_paths.extend(source_paths)
        self._logger.info("delete Typescript files")

    async def _write(self, directory: Path, base_name: str, content: str) -> Path:
        with _failures_as(FilesystemError, f"Cannot write {directory}/{base_name}"):
            path = await self._filesystem.write_file(directory, base_name, content)
        self._logger.debug(f"write file: {path}")
        return path

    def _report(self, output_directory: Path) -> None:
        self._logger.info("=" * 56)
        self._logger.info(f"your files were successfully created under: {output_directory}")
        self._logger.info(
            "don't forget to copy this folder to your dist in a post build script "
            "- enjoy your tree-shakable icon library"
        )
        self._logger.info("=" * 56)
