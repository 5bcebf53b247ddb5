"""Tests for the preset palette."""

import pytest

from chromapick.colors import (
    PRESET_COLUMNS,
    PRESET_PALETTE,
    PRESET_ROWS,
    find_swatch,
    is_selected,
    preset_swatches,
    selected_swatch,
)
from chromapick.models import Color


class TestPresetPalette:
    """Test the preset catalogue and selection rule."""

    @pytest.mark.unit
    def test_layout(self):
        assert len(PRESET_PALETTE) == PRESET_ROWS == 3
        assert all(len(row) == PRESET_COLUMNS == 5 for row in PRESET_PALETTE)
        swatches = list(preset_swatches())
        assert len(swatches) == 15
        assert swatches[0].name == "Red"
        assert swatches[-1].name == "White"
        assert (swatches[7].row, swatches[7].column) == (1, 2)

    @pytest.mark.unit
    def test_values_are_distinct_uppercase_hex(self):
        values = [swatch.hex for swatch in preset_swatches()]
        assert len(set(values)) == len(values)
        assert all(value == value.upper() and len(value) == 7 for value in values)

    @pytest.mark.unit
    def test_selection_is_case_insensitive(self):
        blue = find_swatch("Blue")
        assert blue is not None
        assert is_selected(blue, "#007aff")
        assert is_selected(blue, "#007AFF")
        assert is_selected(blue, Color(r=0, g=122, b=255))
        assert not is_selected(blue, "#007AFE")
        assert not is_selected(blue, None)

    @pytest.mark.unit
    def test_at_most_one_selected(self):
        for swatch in preset_swatches():
            matches = [other for other in preset_swatches() if is_selected(other, swatch.color)]
            assert matches == [swatch]

    @pytest.mark.unit
    def test_selected_swatch(self):
        assert selected_swatch("#ff3b30").name == "Red"
        assert selected_swatch("#123456") is None

    @pytest.mark.unit
    def test_find_swatch(self):
        assert find_swatch("  indigo ").hex == "#5856D6"
        assert find_swatch("Magenta") is None
