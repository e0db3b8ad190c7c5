"""
Command-line interface converting SVG icons into a tree-shakable TypeScript library.

Configurations come either from a YAML/JSON file (``--config``) or from the
inline options; each configuration is converted in turn.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

from pydantic import ValidationError

from svg_to_ts.compiler import TypeScriptCompiler
from svg_to_ts.core.exceptions import ConfigurationError, ConversionError
from svg_to_ts.core.orchestrator import ConversionOrchestrator
from svg_to_ts.core.pipeline_runner import PipelineRunner
from svg_to_ts.core.single_file import SingleFileConverter
from svg_to_ts.io import LocalFilesystem, load_config
from svg_to_ts.models.options import ConversionOptions, Delimiter
from svg_to_ts.plugins.svg import SvgDefinitionProvider

logger = logging.getLogger(__name__)

# argparse destinations, named after the ConversionOptions fields
_INLINE_OPTIONS = (
    "optimize_for_lazy_loading",
    "file_name",
    "src_files",
    "output_directory",
    "icons_folder_name",
    "barrel_file_name",
    "prefix",
    "delimiter",
    "interface_name",
    "type_name",
    "model_file_name",
    "additional_model_output_path",
    "export_complete_icon_set",
    "compile_sources",
)


def show_banner() -> None:
    """Display the svg-to-ts banner."""
    banner = r"""                          _              _
 _____   ____ _      | |_ ___     | |_ ___
/ __\ \ / / _` |_____| __/ _ \ ___| __/ __|
\__ \ V / (_| |_____| || (_) |___| |_\__ \
|___/ \_/ \__, |      \__\___/     \__|___/
          |___/"""
    print(banner)
    print()


def configure_logging(debug: bool = False, verbose: bool = False) -> None:
    """Configure application logging.

    Args:
        debug: Enable debug-level logging if True.
        verbose: Enable timestamped, per-module logging if True.
    """
    if debug:
        level = logging.DEBUG
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    elif verbose:
        level = logging.INFO
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    else:
        level = logging.INFO
        format_str = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        stream=sys.stdout,
        force=True,  # Override existing configuration
    )


def build_inline_options(args: argparse.Namespace) -> ConversionOptions:
    """
    Build a configuration from the inline command line options.

    Options left unset fall back to the model defaults.

    Raises:
        ConfigurationError: If the options do not validate
    """
    values: dict[str, Any] = {}
    for dest in _INLINE_OPTIONS:
        value = getattr(args, dest, None)
        if value is not None:
            values[dest] = value

    try:
        return ConversionOptions.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid options: {e}") from e


def resolve_options(args: argparse.Namespace) -> list[ConversionOptions]:
    if args.config:
        return load_config(args.config)
    return [build_inline_options(args)]


def create_orchestrator_factory(
    tsc: str = "tsc",
    orchestrator_cls: type[ConversionOrchestrator] = ConversionOrchestrator,
):
    """Return a factory wiring ``orchestrator_cls`` to the default collaborators."""

    def factory() -> ConversionOrchestrator:
        return orchestrator_cls(
            provider=SvgDefinitionProvider(),
            filesystem=LocalFilesystem(),
            compiler=TypeScriptCompiler(executable=tsc),
        )

    return factory


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed command line arguments.
    """
    parser = argparse.ArgumentParser(
        description=(
            "Convert SVG icons into a tree-shakable TypeScript icon library"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert every SVG below ./icons into ./dist
  svg-to-ts-py --src "icons/**/*.svg" --out dist --prefix md --model model

  # Run the conversions described in a config file
  svg-to-ts-py --config svg-to-ts.yaml

  # Compile the generated library with the local TypeScript install
  svg-to-ts-py --config svg-to-ts.yaml --tsc node_modules/.bin/tsc
        """,
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="YAML or JSON file with one or more conversions",
    )

    inline = parser.add_argument_group("inline conversion options")
    inline.add_argument(
        "--single-file",
        dest="optimize_for_lazy_loading",
        action="store_false",
        default=None,
        help="Put every icon into one module instead of one module per icon",
    )
    inline.add_argument(
        "--file-name",
        dest="file_name",
        help="Module name used with --single-file (default: my-icons)",
    )
    inline.add_argument(
        "-s",
        "--src",
        action="append",
        dest="src_files",
        metavar="GLOB",
        help="Glob pattern of source SVG files (repeatable)",
    )
    inline.add_argument("-o", "--out", dest="output_directory", help="Output directory")
    inline.add_argument(
        "--icons-folder", dest="icons_folder_name", help="Folder holding icon modules"
    )
    inline.add_argument("--barrel", dest="barrel_file_name", help="Barrel file name")
    inline.add_argument("-p", "--prefix", help="Prefix of file and constant names")
    inline.add_argument(
        "-d",
        "--delimiter",
        choices=[d.value for d in Delimiter],
        help="Casing of icon keys in the generated type",
    )
    inline.add_argument("-i", "--interface", dest="interface_name", help="Interface name")
    inline.add_argument("-t", "--type", dest="type_name", help="Name of the key union")
    inline.add_argument("-m", "--model", dest="model_file_name", help="Model file name")
    inline.add_argument(
        "--additional-model-path",
        dest="additional_model_output_path",
        help="Directory receiving a copy of the model file",
    )
    inline.add_argument(
        "--export-complete-icon-set",
        action="store_true",
        default=None,
        help="Generate a module exporting all icons as one array",
    )
    inline.add_argument(
        "--compile",
        dest="compile_sources",
        action="store_true",
        default=None,
        help="Compile the generated sources and delete them afterwards",
    )

    parser.add_argument(
        "--tsc", default="tsc", help="TypeScript compiler executable (default: tsc)"
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging for detailed output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if args.config:
        inline_given = [
            dest for dest in _INLINE_OPTIONS if getattr(args, dest, None) is not None
        ]
        if inline_given:
            parser.error("--config cannot be combined with inline conversion options")

    return args


def run_conversions(
    options_list: list[ConversionOptions],
    debug: bool = False,
    verbose: bool = False,
    tsc: str = "tsc",
) -> NoReturn:
    """Execute every conversion and exit.

    Args:
        options_list: Resolved configurations, converted in order.
        debug: Enable debug logging for detailed output.
        verbose: Enable verbose logging.
        tsc: TypeScript compiler executable.

    Raises:
        SystemExit: Always; 0 on success, 1 on the first failure.
    """
    if any(options.verbose for options in options_list) and not (debug or verbose):
        configure_logging(debug, verbose=True)

    runner = PipelineRunner(
        create_orchestrator_factory(tsc),
        create_orchestrator_factory(tsc, SingleFileConverter),
    )

    try:
        runner.execute(options_list)
    except ConversionError as e:
        if debug:
            logger.exception(f"Conversion failed during {e.stage.value}:")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        if debug:
            logger.exception("Full traceback:")
        sys.exit(1)

    sys.exit(0)


def main(argv: list[str] | None = None) -> NoReturn:
    args = parse_arguments(argv)
    show_banner()
    configure_logging(args.debug, args.verbose)

    try:
        options_list = resolve_options(args)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    run_conversions(options_list, args.debug, args.verbose, args.tsc)


if __name__ == "__main__":
    main()
