from collections.abc import Sequence

from svg_to_ts.models.definitions import IconDefinition

COMPLETE_ICON_SET_FILE_NAME = "completeIconSet"


def generate_complete_icon_set_array(definitions: Sequence[IconDefinition]) -> str:
    members = ", ".join(definition.variable_name for definition in definitions)
    return f"export const {COMPLETE_ICON_SET_FILE_NAME} = [{members}];\n"


def generate_complete_icon_set_content(definitions: Sequence[IconDefinition]) -> str:
    """
    Render a module importing every icon constant and exporting them as one array.

    Imports and array entries follow the order of ``definitions``.
    """
    imports = "".join(
        f"import {{ {definition.variable_name} }} from "
        f"'./{definition.generated_file_name}';\n"
        for definition in definitions
    )
    return imports + generate_complete_icon_set_array(definitions)
