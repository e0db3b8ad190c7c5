"""Identifier and key casing helpers for generated TypeScript names."""

import re

from svg_to_ts.models.options import Delimiter

_WORD_BOUNDARY = re.compile(r"[\s_\-.]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_INVALID_IDENTIFIER_CHARS = re.compile(r"[^A-Za-z0-9_$]")


def split_words(text: str) -> list[str]:
    """
    Split a file name or key into words.

    Separators are whitespace, ``-``, ``_`` and ``.``; a lower-to-upper case
    change also starts a new word (``arrowLeft`` -> ``arrow``, ``Left``).
    """
    words = []
    for chunk in _WORD_BOUNDARY.split(text):
        words.extend(part for part in _CAMEL_BOUNDARY.split(chunk) if part)
    return words


def to_camel_case(text: str) -> str:
    words = split_words(text)
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(word.capitalize() for word in rest)


def to_pascal_case(text: str) -> str:
    return "".join(word.capitalize() for word in split_words(text))


def to_kebab_case(text: str) -> str:
    return "-".join(word.lower() for word in split_words(text))


def to_snake_case(text: str) -> str:
    return "_".join(word.lower() for word in split_words(text))


def to_upper_case(text: str) -> str:
    return "_".join(word.upper() for word in split_words(text))


_CONVERTERS = {
    Delimiter.CAMEL: to_camel_case,
    Delimiter.KEBAB: to_kebab_case,
    Delimiter.SNAKE: to_snake_case,
    Delimiter.UPPER: to_upper_case,
}


def apply_delimiter(text: str, delimiter: Delimiter) -> str:
    """Convert ``text`` to the casing selected by ``delimiter``."""
    return _CONVERTERS[delimiter](text)


def sanitize_identifier(name: str) -> str:
    """Make ``name`` a valid TypeScript identifier."""
    sanitized = _INVALID_IDENTIFIER_CHARS.sub("_", name)
    if not sanitized or sanitized[0].isdigit():
        sanitized = f"_{sanitized}"
    return sanitized


def get_variable_name(prefix: str, filename_without_ending: str) -> str:
    """
    Build the constant name for an icon.

    ``("md", "arrow-left")`` -> ``mdArrowLeft``; without a prefix the file name
    alone is camel-cased.
    """
    if prefix:
        name = to_camel_case(prefix) + to_pascal_case(filename_without_ending)
    else:
        name = to_camel_case(filename_without_ending)
    return sanitize_identifier(name)


def get_type_name(prefix: str, filename_without_ending: str, delimiter: Delimiter) -> str:
    """Build the icon key used in the generated type union."""
    key = f"{prefix}-{filename_without_ending}" if prefix else filename_without_ending
    return apply_delimiter(key, delimiter)
