#!/usr/bin/env python3
from enum import Enum
from typing import TypeVar, Type


T = TypeVar("T", bound="BaseStringEnum")


class BaseStringEnum(Enum):
    """
    Base enum class with common string-based enum functionality.
    """

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls: Type[T], value: str) -> T:
        """Create enum instance from string value."""
        value_lower = value.lower()
        for item in cls:
            if item.value == value_lower:
                return item
        raise ValueError(f"Invalid {cls.__name__} value: {value}")

    @classmethod
    def get_all_values(cls) -> list[str]:
        """Get all possible string values."""
        return [item.value for item in cls]


class MetadataType(BaseStringEnum):
    """
    Enum for metadata types.
    Representing different metadata categories for files.
    """

    IMAGE = "image"
    SYSTEM = "system"


class BandFormat(BaseStringEnum):
    """
    Enum for per-channel sample formats.
    Names follow the libvips band formats reported by image tooling.
    """

    UCHAR = "uchar"  # 8-bit unsigned
    USHORT = "ushort"  # 16-bit unsigned
    INT = "int"  # 32-bit signed
    FLOAT = "float"  # 32-bit float


class ColorMode(BaseStringEnum):
    """
    Enum for LOG_COLOR setting values.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"
