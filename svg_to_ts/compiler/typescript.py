"""TypeScript compiler invoked through the ``tsc`` command line."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from svg_to_ts.core.exceptions import CompilationError

logger = logging.getLogger(__name__)

DEFAULT_COMPILER_OPTIONS = (
    "--declaration",
    "--module",
    "esnext",
    "--target",
    "es2017",
    "--moduleResolution",
    "node",
    "--skipLibCheck",
)


class TypeScriptCompiler:
    """
    Compiles generated sources to JavaScript plus ``.d.ts`` declarations.

    The output files are written next to their sources, which is what lets
    the orchestrator delete the ``.ts`` files afterwards and keep a
    ready-to-publish library.
    """

    def __init__(
        self,
        executable: str = "tsc",
        compiler_options: Sequence[str] = DEFAULT_COMPILER_OPTIONS,
    ):
        """
        Initialize the compiler.

        Args:
            executable: Command used to run the TypeScript compiler
                (e.g. ``tsc`` or ``node_modules/.bin/tsc``)
            compiler_options: Flags passed before the source paths
        """
        self.executable = executable
        self.compiler_options = list(compiler_options)
        self._logger = logger.getChild(self.__class__.__name__)

    def build_command(self, paths: Sequence[Path]) -> list[str]:
        return [self.executable, *self.compiler_options, *(str(p) for p in paths)]

    def compile(self, paths: Sequence[Path]) -> None:
        """
        Compile ``paths`` in a single ``tsc`` invocation.

        Raises:
            CompilationError: If the executable is missing or reports errors
        """
        if not paths:
            self._logger.warning("No TypeScript sources to compile")
            return

        cmd = self.build_command(paths)
        self._logger.debug(f"Running command: {' '.join(cmd)}")

        try:
            subprocess.run(cmd, check=True, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise CompilationError(
                f"TypeScript compiler '{self.executable}' not found"
            ) from e
        except subprocess.CalledProcessError as e:
            self._logger.error(
                f"Command failed with exit code {e.returncode}: {self.executable}"
            )
            # tsc reports diagnostics on stdout
            output = (e.stdout or "") + (e.stderr or "")
            if output:
                self._logger.error(f"Compiler output: {output}")
            raise CompilationError(
                f"TypeScript compilation failed with exit code {e.returncode}"
            ) from e

        self._logger.info(f"Compiled {len(paths)} TypeScript files")
