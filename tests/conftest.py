import struct
import zlib
from pathlib import Path

import pytest
from PIL import Image

from icon_metadata.common.globals import logger, reset_globals

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@pytest.fixture(autouse=True)
def _reset_global_logger(monkeypatch):
    monkeypatch.setattr(logger, "color_mode", "auto")
    reset_globals()
    yield
    reset_globals()


@pytest.fixture
def make_png(tmp_path):
    """Write a PNG of the given mode and size and return its path."""

    def _make_png(
        mode: str = "RGBA",
        size: tuple[int, int] = (256, 256),
        name: str = "server-icon.png",
        **save_kwargs,
    ) -> Path:
        path = tmp_path / name
        Image.new(mode, size).save(path, format="PNG", **save_kwargs)
        return path

    return _make_png


@pytest.fixture
def corrupt_png(tmp_path) -> Path:
    path = tmp_path / "server-icon.png"
    path.write_bytes(b"this is not an image at all")
    return path


def _png_chunk(chunk_type: bytes, data: bytes) -> bytes:
    return (
        struct.pack(">I", len(data))
        + chunk_type
        + data
        + struct.pack(">I", zlib.crc32(chunk_type + data) & 0xFFFFFFFF)
    )


@pytest.fixture
def make_png_header(tmp_path):
    """
    Write a PNG whose IHDR declares the given size and format.
    The IDAT holds no pixel rows, so only header reads succeed.
    """

    def _make_png_header(
        width: int,
        height: int,
        bit_depth: int = 8,
        color_type: int = 6,
        name: str = "server-icon.png",
    ) -> Path:
        ihdr = struct.pack(">IIBBBBB", width, height, bit_depth, color_type, 0, 0, 0)
        path = tmp_path / name
        path.write_bytes(
            PNG_SIGNATURE
            + _png_chunk(b"IHDR", ihdr)
            + _png_chunk(b"IDAT", zlib.compress(b""))
            + _png_chunk(b"IEND", b"")
        )
        return path

    return _make_png_header
