"""Data models for the color picker."""

from .color import Color, HSLSample
from .enums import Channel, PickerTab
from .config import PickerConfig

__all__ = [
    # Models
    "Color",
    "HSLSample",
    "PickerConfig",
    # Enums
    "Channel",
    "PickerTab",
]
