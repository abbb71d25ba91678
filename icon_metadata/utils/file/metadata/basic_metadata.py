#!/usr/bin/env python3
from pathlib import Path
from typing import Dict, Any
from ....common.enums import MetadataType


def extract_basic_metadata(file_path: Path) -> Dict[str, Any]:
    """Extract file system metadata from a stat call. File contents are not read."""
    stat = file_path.stat()

    return {
        MetadataType.SYSTEM: {
            "file_name": file_path.name,
            "file_size": stat.st_size,
        }
    }
