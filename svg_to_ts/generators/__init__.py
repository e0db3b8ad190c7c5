"""Pure TypeScript text generators."""

from .code_snippets import (
    generate_export_statement,
    generate_interface_definition,
    generate_svg_constant,
    generate_type_definition,
    generate_type_helper_with_import,
)
from .complete_icon_set import (
    COMPLETE_ICON_SET_FILE_NAME,
    generate_complete_icon_set_array,
    generate_complete_icon_set_content,
)
from .single_file import generate_single_file_content

__all__ = [
    "COMPLETE_ICON_SET_FILE_NAME",
    "generate_complete_icon_set_array",
    "generate_complete_icon_set_content",
    "generate_export_statement",
    "generate_interface_definition",
    "generate_single_file_content",
    "generate_svg_constant",
    "generate_type_definition",
    "generate_type_helper_with_import",
]
