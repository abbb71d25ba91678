from .logging_utils import Logger, color_text, should_use_color
from .file.file_utils import analyze_image_file, analyze_image_file_async

__all__ = [
    # File analysis functions
    "analyze_image_file",
    "analyze_image_file_async",
    # Logging helpers
    "color_text",
    "should_use_color",
    # Classes
    "Logger",
]
