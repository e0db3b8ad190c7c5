"""Icon definition provider reading SVG files from disk."""

import glob
import logging
from pathlib import Path

from svg_to_ts.core.exceptions import DiscoveryError
from svg_to_ts.generators.naming import get_type_name, get_variable_name
from svg_to_ts.models.definitions import IconDefinition
from svg_to_ts.models.options import ConversionOptions

from .optimizer import optimize_svg

logger = logging.getLogger(__name__)

SVG_EXTENSION = ".svg"


class SvgDefinitionProvider:
    """
    Turns the SVG files selected by ``src_files`` into icon definitions.

    Files are visited pattern by pattern; the matches of each pattern are
    sorted so that the resulting order is stable between runs.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding
        self._logger = logger.getChild(self.__class__.__name__)

    def provide_definitions(self, options: ConversionOptions) -> list[IconDefinition]:
        source_files = self.find_source_files(options.src_files)
        if not source_files:
            self._logger.warning(
                f"No SVG files matched {', '.join(options.src_files)}"
            )
            return []

        self._logger.info(f"Found {len(source_files)} SVG files")
        return [self.create_definition(path, options) for path in source_files]

    def find_source_files(self, patterns: list[str]) -> list[Path]:
        """
        Expand the glob patterns into SVG file paths.

        Args:
            patterns: Glob patterns, ``**`` matches nested directories

        Returns:
            Matching .svg files in pattern order, without duplicates
        """
        source_files: list[Path] = []
        seen: set[Path] = set()
        for pattern in patterns:
            for match in sorted(glob.glob(pattern, recursive=True)):
                path = Path(match)
                if path.suffix.lower() != SVG_EXTENSION or not path.is_file():
                    continue
                key = path.resolve()
                if key not in seen:
                    seen.add(key)
                    source_files.append(path)
        return source_files

    def create_definition(self, path: Path, options: ConversionOptions) -> IconDefinition:
        """
        Read, optimize and name a single SVG file.

        Raises:
            DiscoveryError: If the file cannot be read or is not SVG markup
        """
        self._logger.debug(f"Processing file: {path}")
        try:
            markup = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise DiscoveryError(f"Cannot read {path}: {e}") from e

        try:
            data = optimize_svg(markup)
        except ValueError as e:
            raise DiscoveryError(f"Invalid SVG in {path}: {e}") from e

        filename_without_ending = path.stem
        return IconDefinition(
            prefix=options.prefix,
            filename_without_ending=filename_without_ending,
            variable_name=get_variable_name(options.prefix, filename_without_ending),
            type_name=get_type_name(
                options.prefix, filename_without_ending, options.delimiter
            ),
            data=data,
        )
