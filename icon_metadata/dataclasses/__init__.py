from .image_metadata import ImageMetadata

__all__ = [
    "ImageMetadata",
]
