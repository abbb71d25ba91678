# Common module for shared configuration and global instances
# Global instances are imported from .globals directly, it depends on utils

from .config import *
from .enums import *
from .types import *

__all__ = [
    # From config
    "WEB_DIR_NAME",
    "WEB_CURRENT_DIR_NAME",
    "SERVER_ICON_FILE_NAME",
    "REPORT_TEMPLATE",
    "FAILURE_PREFIX",
    "LOG_COLOR",
    "NO_COLOR",
    # From enums
    "BaseStringEnum",
    "MetadataType",
    "BandFormat",
    "ColorMode",
    # From types
    "FileMetadataValue",
    "FileMetadataDict",
]
