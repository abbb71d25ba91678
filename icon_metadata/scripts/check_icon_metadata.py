#!/usr/bin/env python3
"""
Print the header metadata of the server icon.

Usage:
    python -m icon_metadata.scripts.check_icon_metadata
"""

import asyncio
from pathlib import Path
from typing import Optional, Union
from ..common.config import (
    FAILURE_PREFIX,
    SERVER_ICON_FILE_NAME,
    WEB_CURRENT_DIR_NAME,
    WEB_DIR_NAME,
)
from ..common.globals import logger
from ..dataclasses.image_metadata import ImageMetadata
from ..utils.file.file_utils import analyze_image_file_async

# Two levels up from this directory is the repository root
ICON_PATH = (
    Path(__file__).resolve().parents[2]
    / WEB_DIR_NAME
    / WEB_CURRENT_DIR_NAME
    / SERVER_ICON_FILE_NAME
)


async def check_metadata(
    icon_path: Union[str, Path] = ICON_PATH,
) -> Optional[ImageMetadata]:
    """
    Read the icon header and report it on stdout, or report the failure on stderr.
    Returns the metadata on success and None on failure. Never raises.
    """
    try:
        file_metadata = await analyze_image_file_async(icon_path)
        metadata = ImageMetadata.from_dict(file_metadata)
    except Exception as e:
        logger.error(f"{FAILURE_PREFIX} {e}")
        return None

    logger.info(metadata.to_report_line())
    return metadata


def main() -> None:
    asyncio.run(check_metadata())


if __name__ == "__main__":
    main()
