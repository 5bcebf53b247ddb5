"""chromapick: color picker engine with presets, spectrum and RGB entry."""

__version__ = "0.1.0"

from .colors import PRESET_PALETTE, hsl_to_color, parse_hex, to_hex
from .core import PickerSession, PickerState
from .models import Channel, Color, PickerTab

__all__ = [
    "Channel",
    "Color",
    "PRESET_PALETTE",
    "PickerSession",
    "PickerState",
    "PickerTab",
    "hsl_to_color",
    "parse_hex",
    "to_hex",
]
