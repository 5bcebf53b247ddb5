"""Reusable UI widgets for the TUI."""

from .color_picker_field import ColorPickerField
from .color_picker_modal import ColorPickerModal
from .swatch_widget import SwatchWidget

__all__ = [
    "ColorPickerField",
    "ColorPickerModal",
    "SwatchWidget",
]
