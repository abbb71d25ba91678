#!/usr/bin/env python3
from dataclasses import dataclass, fields
from typing import ClassVar
from ..common.config import REPORT_TEMPLATE
from ..common.enums import BandFormat, MetadataType
from ..common.types import FileMetadataDict


@dataclass(frozen=True)
class ImageMetadata:
    """
    Header metadata of a single image.
    Built once from a FileMetadataDict and only read afterwards.
    """

    REQUIRED_FIELDS: ClassVar[dict[str, type]] = {
        "width": int,
        "height": int,
        "format": str,
        "depth": str,
        "channels": int,
    }

    width: int  # in pixels
    height: int  # in pixels
    format: str  # e.g. "png"
    depth: str  # e.g. "uchar", "ushort"
    channels: int  # e.g. 3 for RGB, 4 for RGBA

    def __post_init__(self):
        self.validate_required_fields()

    def validate_required_fields(self) -> None:
        """
        Validate that all fields have the expected types and sensible values.
        Raises ValueError listing every invalid field.
        """
        invalid_fields = []

        for field_name, expected_type in self.REQUIRED_FIELDS.items():
            field_value = getattr(self, field_name)
            # bool is an int subclass but never a valid count
            if isinstance(field_value, bool) or not isinstance(
                field_value, expected_type
            ):
                invalid_fields.append(
                    f"'{field_name}' has incorrect type: {type(field_value)}. Expected type: {expected_type}"
                )
            elif expected_type is int and field_value <= 0:
                invalid_fields.append(f"'{field_name}' must be positive")
            elif expected_type is str and not field_value:
                invalid_fields.append(f"'{field_name}' is empty")
            elif (
                field_name == "depth"
                and field_value not in BandFormat.get_all_values()
            ):
                invalid_fields.append(f"'depth' is not a known band format: {field_value}")

        if invalid_fields:
            raise ValueError(
                f"Required fields validation failed: {', '.join(invalid_fields)}"
            )

    @classmethod
    def from_dict(cls, file_metadata: FileMetadataDict) -> "ImageMetadata":
        """
        Create an instance from the image section of a FileMetadataDict.
        Raises ValueError if the image section or any field is missing.
        """
        if not isinstance(file_metadata, dict):
            raise ValueError("file_metadata must be a dictionary")

        image_metadata = file_metadata.get(MetadataType.IMAGE)
        if not isinstance(image_metadata, dict):
            raise ValueError(f"Metadata for type '{MetadataType.IMAGE}' is missing")

        missing = [f.name for f in fields(cls) if f.name not in image_metadata]
        if missing:
            raise ValueError(f"Missing image metadata fields: {', '.join(missing)}")

        return cls(**{f.name: image_metadata[f.name] for f in fields(cls)})

    def to_report_line(self) -> str:
        """Format the metadata as a single human-readable line."""
        return REPORT_TEMPLATE.format(
            width=self.width,
            height=self.height,
            format=self.format,
            depth=self.depth,
            channels=self.channels,
        )
