"""SVG source plugin: discovery, minification and naming of icons."""

from .optimizer import optimize_svg
from .provider import SvgDefinitionProvider

__all__ = ["SvgDefinitionProvider", "optimize_svg"]
