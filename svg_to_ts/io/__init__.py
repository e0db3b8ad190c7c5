from .config_loader import load_config
from .filesystem import SOURCE_EXTENSION, LocalFilesystem

__all__ = ["LocalFilesystem", "SOURCE_EXTENSION", "load_config"]
