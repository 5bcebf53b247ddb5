"""Domain events for observer pattern.

Each event names the input modality that produced a color change. Tab and
modal transitions are not color changes and have no event.
"""

from enum import Enum


class ColorEvent(Enum):
    """Events fired when the picker's canonical color changes."""

    PRESET_SELECTED = "preset_selected"        # Preset swatch chosen on the grid tab
    SPECTRUM_SELECTED = "spectrum_selected"    # Spectrum cell chosen
    GRAYSCALE_SELECTED = "grayscale_selected"  # Grayscale ramp cell chosen
    HEX_EDITED = "hex_edited"                  # Hex buffer became a valid color
    CHANNEL_EDITED = "channel_edited"          # Numeric channel entry changed
