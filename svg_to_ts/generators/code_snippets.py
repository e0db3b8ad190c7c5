"""
Pure functions rendering the TypeScript snippets of the generated library.

Every function maps explicit inputs to source text and has no side effects;
the orchestrator decides where the text ends up.
"""

from collections.abc import Sequence

from svg_to_ts.models.definitions import IconDefinition
from svg_to_ts.models.options import ConversionOptions


def to_ts_string_literal(value: str) -> str:
    """Quote ``value`` as a single-quoted TypeScript string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )
    return f"'{escaped}'"


def generate_svg_constant(variable_name: str, type_name: str, data: str) -> str:
    name_literal = to_ts_string_literal(type_name)
    return (
        f"export const {variable_name}: {{\n"
        f"  name: {name_literal};\n"
        f"  data: string;\n"
        f"}} = {{\n"
        f"  name: {name_literal},\n"
        f"  data: {to_ts_string_literal(data)}\n"
        f"}};\n"
    )


def generate_export_statement(name: str, folder: str | None = None) -> str:
    """Re-export everything from ``./<folder>/<name>`` (or ``./<name>``)."""
    if folder:
        return f"export * from './{folder}/{name}';\n"
    return f"export * from './{name}';\n"


def generate_type_helper_with_import(
    interface_name: str, folder: str, model_file_name: str | None
) -> str:
    """
    Render the header of the barrel file.

    With a model module, the interface is imported from it and
    ``IconNameSubset`` narrows to its ``name`` field. Without one there is no
    interface to import, so the helper falls back to a structural type.
    """
    if model_file_name:
        return (
            f"import {{ {interface_name} }} from './{folder}/{model_file_name}';\n"
            f"export type IconNameSubset<T extends Readonly<{interface_name}[]>> "
            f"= T[number]['name'];\n"
        )
    return (
        "export type IconNameSubset<T extends Readonly<{ name: string }[]>> "
        "= T[number]['name'];\n"
    )


def generate_type_definition(
    options: ConversionOptions, definitions: Sequence[IconDefinition]
) -> str:
    """
    Render the union of valid icon keys, ``never`` for an empty set.

    Members are the ``type_name`` of each definition, the same value every
    icon constant carries in its ``name`` field.
    """
    keys = [to_ts_string_literal(definition.type_name) for definition in definitions]
    union = " | ".join(keys) if keys else "never"
    return f"export type {options.type_name} = {union};\n"


def generate_interface_definition(options: ConversionOptions) -> str:
    return (
        f"export interface {options.interface_name} {{\n"
        f"  name: {options.type_name};\n"
        f"  data: string;\n"
        f"}}\n"
    )
