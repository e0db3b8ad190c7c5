"""Convert SVG icons into a tree-shakable TypeScript icon library."""

__version__ = "0.1.0"
