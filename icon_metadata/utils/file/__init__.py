#!/usr/bin/env python3
from .file_utils import analyze_image_file, analyze_image_file_async

from .metadata.basic_metadata import extract_basic_metadata
from .metadata.image_metadata import (
    determine_band_format,
    determine_channels,
    extract_image_metadata,
)

__all__ = [
    # Main analysis functions
    "analyze_image_file",
    "analyze_image_file_async",
    # Basic metadata functions
    "extract_basic_metadata",
    # Image header functions
    "determine_band_format",
    "determine_channels",
    "extract_image_metadata",
]
