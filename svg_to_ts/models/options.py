from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

_TS_IDENTIFIER_PATTERN = r"^[A-Za-z_$][A-Za-z0-9_$]*$"


class Delimiter(str, Enum):
    """Casing applied to icon keys in the generated type union."""

    CAMEL = "CAMEL"
    KEBAB = "KEBAB"
    SNAKE = "SNAKE"
    UPPER = "UPPER"


class ConversionOptions(BaseModel):
    """
    Configuration of a single conversion run.

    Field names are snake_case in Python; configuration files may use the
    camelCase aliases (e.g. ``outputDirectory``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    optimize_for_lazy_loading: bool = Field(
        default=True,
        description=(
            "Generate one module per icon plus a barrel file. When false, every "
            "icon goes into the single module named by file_name."
        ),
    )
    file_name: str = Field(
        default="my-icons",
        min_length=1,
        description="Base name of the module generated without lazy loading.",
    )
    src_files: list[str] = Field(
        default_factory=lambda: ["*.svg"],
        description="Glob patterns selecting the source SVG files.",
    )
    output_directory: str = Field(
        default="./dist",
        min_length=1,
        description="Directory receiving the barrel file and the icons folder.",
    )
    icons_folder_name: str = Field(
        default="build",
        min_length=1,
        description=(
            "Folder below the output directory holding one module per icon. "
            "Deleted at the start of every run."
        ),
    )
    barrel_file_name: str = Field(
        default="index",
        min_length=1,
        description="Base name of the module re-exporting every generated module.",
    )
    prefix: str = Field(
        default="myIcon",
        description="Prefix of generated file names and constant names.",
    )
    delimiter: Delimiter = Field(
        default=Delimiter.KEBAB,
        description="Casing of icon keys in the generated type union.",
    )
    interface_name: str = Field(
        default="MyIcon",
        pattern=_TS_IDENTIFIER_PATTERN,
        description="Name of the generated consumer-facing interface.",
    )
    type_name: str = Field(
        default="myIcons",
        pattern=_TS_IDENTIFIER_PATTERN,
        description="Name of the generated union of icon keys.",
    )
    model_file_name: str | None = Field(
        default=None,
        description="Base name of the model module. No model is generated if unset.",
    )
    additional_model_output_path: str | None = Field(
        default=None,
        description=(
            "Optional second directory receiving a copy of the model module. "
            "Ignored when model_file_name is unset."
        ),
    )
    export_complete_icon_set: bool = Field(
        default=False,
        description="Also generate a module exporting every icon as one array.",
    )
    compile_sources: bool = Field(
        default=False,
        description="Compile the generated sources and delete them afterwards.",
    )
    verbose: bool = Field(default=False, description="Enable verbose logging.")

    @field_validator("src_files")
    def validate_src_files(cls, v: list[str]) -> list[str]:
        if not v or any(not pattern.strip() for pattern in v):
            raise ValueError("src_files must contain at least one non-empty pattern")
        return v

    @field_validator(
        "output_directory", "icons_folder_name", "barrel_file_name", "file_name"
    )
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("value must not be blank")
        return v

    @field_validator("model_file_name", "additional_model_output_path")
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v

    @property
    def icons_directory(self) -> str:
        """Path of the icons folder below the output directory."""
        return f"{self.output_directory}/{self.icons_folder_name}"
