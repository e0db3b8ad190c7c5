"""Conversion core: orchestrator, collaborator contracts and errors."""

from .exceptions import (
    CompilationError,
    ConfigurationError,
    ConversionError,
    DiscoveryError,
    FilesystemError,
    GenerationError,
    SvgToTsError,
)
from .orchestrator import ConversionOrchestrator
from .single_file import SingleFileConverter
from .state import ArtifactKind, ConversionResult, GeneratedArtifact, PipelineState

__all__ = [
    "ArtifactKind",
    "CompilationError",
    "ConfigurationError",
    "ConversionError",
    "ConversionOrchestrator",
    "ConversionResult",
    "DiscoveryError",
    "FilesystemError",
    "GenerationError",
    "GeneratedArtifact",
    "PipelineState",
    "SingleFileConverter",
    "SvgToTsError",
]
