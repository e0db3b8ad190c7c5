from pydantic import BaseModel, ConfigDict, Field


class IconDefinition(BaseModel):
    """
    One source icon, ready to be rendered as a TypeScript module.

    Produced once per SVG by the definition provider and never mutated
    afterwards.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str = Field(..., description="Prefix shared by every icon of a run.")
    filename_without_ending: str = Field(
        ..., min_length=1, description="Source file name without the .svg suffix."
    )
    variable_name: str = Field(
        ..., min_length=1, description="Identifier of the exported constant."
    )
    type_name: str = Field(
        ..., description="Value of the constant's name field (the icon key)."
    )
    data: str = Field(..., description="Serialized SVG markup.")

    @property
    def icon_key(self) -> str:
        return f"{self.prefix}-{self.filename_without_ending}"

    @property
    def generated_file_name(self) -> str:
        """Base name of the icon module, without the .ts extension."""
        return f"{self.icon_key}.icon"
