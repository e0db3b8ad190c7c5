from collections.abc import Sequence

from svg_to_ts.models.definitions import IconDefinition
from svg_to_ts.models.options import ConversionOptions

from .code_snippets import (
    generate_interface_definition,
    generate_svg_constant,
    generate_type_definition,
)
from .complete_icon_set import generate_complete_icon_set_array


def generate_single_file_content(
    options: ConversionOptions, definitions: Sequence[IconDefinition]
) -> str:
    """
    Render one module holding the key union, the interface and every icon.

    Constants follow the order of ``definitions``; the complete icon set array
    closes the module when ``export_complete_icon_set`` is set.
    """
    sections = [
        generate_type_definition(options, definitions),
        generate_interface_definition(options),
    ]
    sections.extend(
        generate_svg_constant(
            definition.variable_name, definition.type_name, definition.data
        )
        for definition in definitions
    )
    if options.export_complete_icon_set:
        sections.append(generate_complete_icon_set_array(definitions))
    return "\n".join(sections)
