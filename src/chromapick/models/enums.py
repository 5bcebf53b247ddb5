"""Enumerations for the color picker."""

from enum import Enum


class PickerTab(str, Enum):
    """Input modalities offered by the picker modal."""

    GRID = "grid"  # Preset palette grid
    SPECTRUM = "spectrum"  # Hue/saturation spectrum plus grayscale ramp
    SLIDERS = "sliders"  # Per-channel numeric entry

    @property
    def label(self) -> str:
        """Human-readable tab caption."""
        return _TAB_LABELS[self]


_TAB_LABELS = {
    PickerTab.GRID: "Grid",
    PickerTab.SPECTRUM: "Spectrum",
    PickerTab.SLIDERS: "Sliders",
}


class Channel(str, Enum):
    """RGB channels editable from the sliders tab."""

    RED = "r"
    GREEN = "g"
    BLUE = "b"

    @property
    def label(self) -> str:
        """Human-readable channel name."""
        return self.name.capitalize()
