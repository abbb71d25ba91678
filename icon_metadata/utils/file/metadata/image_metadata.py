#!/usr/bin/env python3
from pathlib import Path
from typing import Dict, Any
from PIL import Image
from ....common.enums import BandFormat, MetadataType

MODE_TO_BAND_FORMAT = {
    "I": BandFormat.INT,
    "I;16": BandFormat.USHORT,
    "I;16B": BandFormat.USHORT,
    "I;16L": BandFormat.USHORT,
    "I;16N": BandFormat.USHORT,
    "F": BandFormat.FLOAT,
}

ALPHA_MODES = {"RGBA", "LA", "PA", "RGBa", "La"}

# Only headers are read here, pixel data is never decoded
Image.MAX_IMAGE_PIXELS = None


def _tile_rawmode(img: Image.Image) -> str:
    """Return the raw mode Pillow will decode the first tile with, or ''."""
    if not img.tile:
        return ""
    args = img.tile[0][3]
    if isinstance(args, tuple):
        args = args[0] if args else ""
    return args if isinstance(args, str) else ""


def determine_band_format(img: Image.Image) -> BandFormat:
    """
    Determine the per-channel sample format from the decoded header.
    PNG stores 16-bit samples that Pillow narrows to 8-bit modes, so the tile raw mode is checked first.
    """
    if img.format == "PNG" and ";16" in _tile_rawmode(img):
        return BandFormat.USHORT
    return MODE_TO_BAND_FORMAT.get(img.mode, BandFormat.UCHAR)


def determine_channels(img: Image.Image) -> int:
    """
    Count color/alpha channels. Palette images count as RGB.
    A transparency entry on a mode without alpha adds an alpha channel.
    """
    if img.mode == "PA":
        return 4
    channels = 3 if img.mode == "P" else len(img.getbands())
    if img.mode not in ALPHA_MODES and "transparency" in img.info:
        channels += 1
    return channels


def extract_image_metadata(file_path: Path) -> Dict[str, Any]:
    """
    Extract image header metadata without loading pixel data.
    Raises exceptions if the file cannot be opened or identified.
    """
    with Image.open(file_path) as img:
        return {
            MetadataType.IMAGE: {
                "width": img.width,
                "height": img.height,
                "format": (img.format or "").lower(),
                "mode": img.mode,
                "depth": determine_band_format(img).value,
                "channels": determine_channels(img),
                "has_alpha": img.mode in ALPHA_MODES or "transparency" in img.info,
            }
        }
