from .definitions import IconDefinition
from .options import ConversionOptions, Delimiter

__all__ = ["ConversionOptions", "Delimiter", "IconDefinition"]
