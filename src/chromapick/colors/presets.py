"""Preset palette shown on the grid tab.

A fixed, ordered catalogue of 15 named swatches laid out as 3 rows of 5.
Selection is never stored: a swatch is "selected" whenever its hex value
equals the current color, compared case-insensitively, and this is
recomputed every time it is asked.
"""

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from chromapick.models.color import Color

PRESET_ROWS = 3
PRESET_COLUMNS = 5


class PresetSwatch(BaseModel):
    """An immutable named color in the preset catalogue."""

    model_config = ConfigDict(frozen=True)

    name: str
    color: Color
    row: int
    column: int

    @property
    def hex(self) -> str:
        """Uppercase '#RRGGBB' value of the swatch."""
        return self.color.to_hex()


_CATALOGUE: tuple[tuple[tuple[str, str], ...], ...] = (
    (
        ("Red", "#FF3B30"),
        ("Orange", "#FF9500"),
        ("Yellow", "#FFCC00"),
        ("Green", "#34C759"),
        ("Mint", "#00C7BE"),
    ),
    (
        ("Teal", "#30B0C7"),
        ("Cyan", "#32ADE6"),
        ("Blue", "#007AFF"),
        ("Indigo", "#5856D6"),
        ("Purple", "#AF52DE"),
    ),
    (
        ("Pink", "#FF2D55"),
        ("Brown", "#A2845E"),
        ("Gray", "#8E8E93"),
        ("Black", "#000000"),
        ("White", "#FFFFFF"),
    ),
)

PRESET_PALETTE: tuple[tuple[PresetSwatch, ...], ...] = tuple(
    tuple(
        PresetSwatch(name=name, color=Color.from_hex(value), row=row, column=column)
        for column, (name, value) in enumerate(entries)
    )
    for row, entries in enumerate(_CATALOGUE)
)


def preset_swatches() -> Iterator[PresetSwatch]:
    """Iterate over the catalogue row by row."""
    for row in PRESET_PALETTE:
        yield from row


def _as_hex_text(current: Color | str | None) -> str:
    if isinstance(current, Color):
        return current.to_hex()
    if isinstance(current, str):
        return current
    return ""


def is_selected(swatch: PresetSwatch, current: Color | str | None) -> bool:
    """Check whether ``swatch`` matches the current color.

    Args:
        swatch: Catalogue entry
        current: The current color, or its hex text in any case

    Returns:
        True if the hex values are equal ignoring case
    """
    return swatch.hex.upper() == _as_hex_text(current).upper()


def selected_swatch(current: Color | str | None) -> PresetSwatch | None:
    """Return the swatch matching ``current``, or None.

    The catalogue holds distinct values, so at most one swatch matches.
    """
    for swatch in preset_swatches():
        if is_selected(swatch, current):
            return swatch
    return None


def find_swatch(name: str) -> PresetSwatch | None:
    """Look up a swatch by name, ignoring case."""
    wanted = name.strip().lower()
    for swatch in preset_swatches():
        if swatch.name.lower() == wanted:
            return swatch
    return None
