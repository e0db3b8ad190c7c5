from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from svg_to_ts.models.definitions import IconDefinition
    from svg_to_ts.models.options import ConversionOptions


class DefinitionProvider(Protocol):
    """Defines the contract for turning source icons into icon definitions."""

    def provide_definitions(self, options: "ConversionOptions") -> list["IconDefinition"]:
        """
        Collect the icon definitions selected by the options.

        The order of the returned list is the order of every export generated
        from it.

        Args:
            options: Configuration of the current run

        Returns:
            Ordered list of icon definitions, possibly empty
        """
        ...


class FilesystemGateway(Protocol):
    """Defines the contract for the filesystem operations of a conversion run."""

    extension: str
    """Extension appended to every written file (e.g. ``.ts``)."""

    async def delete_folder(self, path: Path) -> None:
        """Recursively delete ``path``; a missing folder is not an error."""
        ...

    async def write_file(self, directory: Path, base_name: str, content: str) -> Path:
        """
        Persist ``content`` as ``directory/base_name`` plus the source extension.

        Args:
            directory: Target directory, created if missing
            base_name: File name without extension
            content: Text to write

        Returns:
            Path of the written file
        """
        ...

    async def delete_files(self, paths: Sequence[Path]) -> None:
        """Delete every path in ``paths``."""
        ...

    async def resolve_paths(self, patterns: Sequence[str]) -> list[Path]:
        """
        Expand glob patterns into absolute, de-duplicated paths.

        Args:
            patterns: Glob patterns

        Returns:
            Matching paths
        """
        ...


class SourceCompiler(Protocol):
    """Defines the contract for compiling generated sources."""

    def compile(self, paths: Sequence[Path]) -> None:
        """
        Compile the given source files.

        Raises on failure; output format and location belong to the compiler.
        """
        ...
