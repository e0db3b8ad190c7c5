"""Pipeline states and generated artifact records."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class PipelineState(str, Enum):
    """Lifecycle of a single conversion run."""

    IDLE = "idle"
    CLEANING = "cleaning"
    PROCESSING = "processing"
    EMITTING = "emitting"
    COMPILING = "compiling"
    DONE = "done"
    FAILED = "failed"


class ArtifactKind(str, Enum):
    ICON = "icon"
    COMPLETE_SET = "complete_set"
    BARREL = "barrel"
    MODEL = "model"
    ADDITIONAL_MODEL = "additional_model"
    SINGLE_FILE = "single_file"


@dataclass(frozen=True)
class GeneratedArtifact:
    """A file materialized by the orchestrator."""

    path: Path
    kind: ArtifactKind


@dataclass
class ConversionResult:
    """Summary of a successful conversion run."""

    output_directory: Path
    generated_file_names: list[str] = field(default_factory=list)
    artifacts: list[GeneratedArtifact] = field(default_factory=list)
    compiled_paths: list[Path] = field(default_factory=list)

    def paths_of(self, kind: ArtifactKind) -> list[Path]:
        """Return the paths of every artifact of the given kind."""
        return [artifact.path for artifact in self.artifacts if artifact.kind == kind]
