"""Conversion of every icon into one TypeScript module."""

from __future__ import annotations

import glob

from svg_to_ts.generators import generate_single_file_content
from svg_to_ts.models.options import ConversionOptions

from .exceptions import GenerationError
from .orchestrator import ConversionOrchestrator, _failures_as
from .state import ArtifactKind, ConversionResult, GeneratedArtifact, PipelineState


class SingleFileConverter(ConversionOrchestrator):
    """
    Writes the key union, the interface and every icon constant into
    ``<output_directory>/<file_name>``.

    Used for configurations that turn ``optimize_for_lazy_loading`` off. There
    is no icons folder, barrel file or model file, and nothing is cleaned
    before the run; the module is overwritten in place. Failure handling and
    the optional compile-and-prune step are those of the multi-file pipeline.
    """

    async def _run(self, options: ConversionOptions, result: ConversionResult) -> None:
        self._enter(PipelineState.PROCESSING)
        self._logger.info("--- File optimization ---")
        definitions = self._acquire_definitions(options)
        with _failures_as(GenerationError, f"Cannot render {options.file_name}"):
            content = generate_single_file_content(options, definitions)

        self._enter(PipelineState.EMITTING)
        path = await self._write(result.output_directory, options.file_name, content)
        result.generated_file_names.append(options.file_name)
        result.artifacts.append(GeneratedArtifact(path, ArtifactKind.SINGLE_FILE))
        self._logger.info(f"write {path.name} with {len(definitions)} icons")

        if options.compile_sources:
            self._enter(PipelineState.COMPILING)
            module = result.output_directory / options.file_name
            await self._compile_and_prune(
                [f"{glob.escape(str(module))}{self._filesystem.extension}"], result
            )
