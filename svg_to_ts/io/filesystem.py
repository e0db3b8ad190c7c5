"""Local filesystem gateway used by the conversion orchestrator."""

from __future__ import annotations

import asyncio
import glob
import logging
import shutil
from collections.abc import Sequence
from pathlib import Path
from typing import Final

from svg_to_ts.core.exceptions import FilesystemError

logger = logging.getLogger(__name__)

SOURCE_EXTENSION: Final[str] = ".ts"


class LocalFilesystem:
    """
    Filesystem operations backed by the local disk.

    Each operation is a coroutine; the blocking call runs in a worker thread
    so that several writes can be in flight at once.
    """

    def __init__(self, extension: str = SOURCE_EXTENSION, encoding: str = "utf-8"):
        self.extension = extension
        self.encoding = encoding
        self._logger = logger.getChild(self.__class__.__name__)

    async def delete_folder(self, path: Path) -> None:
        await asyncio.to_thread(self._delete_folder, Path(path))

    async def write_file(self, directory: Path, base_name: str, content: str) -> Path:
        target = Path(directory) / f"{base_name}{self.extension}"
        await asyncio.to_thread(self._write_file, target, content)
        return target

    async def delete_files(self, paths: Sequence[Path]) -> None:
        await asyncio.to_thread(self._delete_files, [Path(p) for p in paths])

    async def resolve_paths(self, patterns: Sequence[str]) -> list[Path]:
        return await asyncio.to_thread(self._resolve_paths, list(patterns))

    def _delete_folder(self, path: Path) -> None:
        if not path.exists():
            self._logger.debug(f"Nothing to delete at {path}")
            return
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise FilesystemError(f"Cannot delete folder {path}: {e}") from e

    def _write_file(self, target: Path, content: str) -> None:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding=self.encoding)
        except OSError as e:
            raise FilesystemError(f"Cannot write {target}: {e}") from e
        self._logger.debug(f"Wrote {target}")

    def _delete_files(self, paths: list[Path]) -> None:
        for path in paths:
            try:
                path.unlink()
            except OSError as e:
                raise FilesystemError(f"Cannot delete {path}: {e}") from e

    @staticmethod
    def _resolve_paths(patterns: list[str]) -> list[Path]:
        resolved: list[Path] = []
        seen: set[Path] = set()
        for pattern in patterns:
            for match in sorted(glob.glob(pattern, recursive=True)):
                path = Path(match).resolve()
                if path not in seen and path.is_file():
                    seen.add(path)
                    resolved.append(path)
        return resolved
