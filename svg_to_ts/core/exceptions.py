"""
exceptions.py

Custom, typed exception hierarchy used across the SVG -> TypeScript pipeline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import PipelineState

# --------------------------------------------------------------------------- #
#                              Base hierarchy                                 #
# --------------------------------------------------------------------------- #


class SvgToTsError(Exception):
    """
    Root of all errors raised by this project.
    """


class ConfigurationError(SvgToTsError):
    """Raised when a configuration file cannot be read or validated."""


class DiscoveryError(SvgToTsError):
    """
    Raised by the definition provider when source icons cannot be collected.

    Examples
    --------
    * Source file vanished or is unreadable
    * File content is not SVG markup
    """


class GenerationError(SvgToTsError):
    """Raised when rendering generated TypeScript text fails."""


class FilesystemError(SvgToTsError):
    """Raised when deleting, writing or globbing output paths fails."""


class CompilationError(SvgToTsError):
    """Raised when the source compiler rejects the generated sources."""


# --------------------------------------------------------------------------- #
#                              Fatal outcome                                  #
# --------------------------------------------------------------------------- #


class ConversionError(SvgToTsError):
    """
    The single fatal outcome of a conversion run.

    Wraps whatever stopped the pipeline and remembers the stage that was
    running at the time, so diagnostics can tell a compiler failure apart from
    a write failure even though callers treat both the same way.
    """

    def __init__(self, stage: PipelineState, cause: BaseException):
        super().__init__(f"{stage.value} failed: {cause}")
        self.stage = stage
        self.cause = cause
