"""Structural minification of SVG markup."""

import re

_XML_DECLARATION = re.compile(r"<\?xml.*?\?>", re.DOTALL)
_DOCTYPE = re.compile(r"<!DOCTYPE[^>]*>", re.IGNORECASE)
_COMMENT = re.compile(r"<!--.*?-->", re.DOTALL)
_METADATA = re.compile(r"<metadata\b.*?</metadata>|<metadata\b[^>]*/>", re.DOTALL)
_BETWEEN_TAGS = re.compile(r">\s+<")
_WHITESPACE = re.compile(r"\s+")
_SVG_ROOT = re.compile(r"<svg[\s>]")


def optimize_svg(markup: str) -> str:
    """
    Strip everything a browser does not need to render the icon.

    Raises:
        ValueError: If the markup has no ``<svg>`` element
    """
    optimized = _XML_DECLARATION.sub("", markup)
    optimized = _DOCTYPE.sub("", optimized)
    optimized = _COMMENT.sub("", optimized)
    optimized = _METADATA.sub("", optimized)
    optimized = _BETWEEN_TAGS.sub("><", optimized)
    optimized = _WHITESPACE.sub(" ", optimized).strip()

    if not _SVG_ROOT.search(optimized):
        raise ValueError("No <svg> element found")
    return optimized
