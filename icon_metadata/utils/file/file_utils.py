#!/usr/bin/env python3
import asyncio
from pathlib import Path
from typing import Union
from ...common.enums import MetadataType
from ...common.types import FileMetadataDict
from .metadata.basic_metadata import extract_basic_metadata
from .metadata.image_metadata import extract_image_metadata


def analyze_image_file(file_path: Union[str, Path]) -> FileMetadataDict:
    """
    Analyze a single image file.
    Extracts basic filesystem metadata and the image header metadata.
    Raises exceptions if the file cannot be analyzed.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"File does not exist: {file_path}")

    if not file_path.is_file():
        raise ValueError(f"Path is not a file: {file_path}")

    metadata = extract_basic_metadata(file_path)
    system_metadata = metadata[MetadataType.SYSTEM]
    if system_metadata["file_size"] <= 0:
        raise ValueError(f"File is empty: {system_metadata['file_name']}")

    metadata.update(extract_image_metadata(file_path))
    return metadata


async def analyze_image_file_async(file_path: Union[str, Path]) -> FileMetadataDict:
    """Run analyze_image_file in a worker thread so the event loop is not blocked."""
    return await asyncio.to_thread(analyze_image_file, file_path)
