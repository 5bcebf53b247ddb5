"""Spectrum and grayscale swatch tables.

The spectrum tab shows a fixed 12 x 10 matrix of hue/saturation swatches
at 50% lightness, followed by an 11-cell grayscale ramp. Both tables are
pure data, computed once and cached.
"""

from collections.abc import Iterator
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from chromapick.models.color import Color, HSLSample

from .codec import round_half_up

HUE_STEPS = 12
HUE_STEP_DEGREES = 30
SATURATION_STEPS = 10
SATURATION_STEP_PERCENT = 10
SPECTRUM_LIGHTNESS = 50
GRAYSCALE_STEPS = 11


class SpectrumCell(BaseModel):
    """One swatch of the spectrum matrix."""

    model_config = ConfigDict(frozen=True)

    column: int
    row: int
    sample: HSLSample
    color: Color


@lru_cache(maxsize=1)
def generate_spectrum() -> tuple[tuple[SpectrumCell, ...], ...]:
    """Build the spectrum matrix as a tuple of hue columns.

    Column ``c`` has hue ``c * 30``; row ``r`` has saturation
    ``100 - r * 10``. Lightness is 50% everywhere.
    """
    columns = []
    for column in range(HUE_STEPS):
        hue = column * HUE_STEP_DEGREES
        cells = []
        for row in range(SATURATION_STEPS):
            sample = HSLSample(
                hue=hue,
                saturation=100 - row * SATURATION_STEP_PERCENT,
                lightness=SPECTRUM_LIGHTNESS,
            )
            cells.append(SpectrumCell(column=column, row=row, sample=sample, color=sample.to_color()))
        columns.append(tuple(cells))
    return tuple(columns)


@lru_cache(maxsize=1)
def generate_grayscale_ramp() -> tuple[Color, ...]:
    """Build the grayscale ramp from black (index 0) to white (index 10)."""
    last = GRAYSCALE_STEPS - 1
    return tuple(Color.gray(round_half_up(index / last * 255)) for index in range(GRAYSCALE_STEPS))


def spectrum_cells() -> Iterator[SpectrumCell]:
    """Iterate over every spectrum cell, column by column."""
    for column in generate_spectrum():
        yield from column


def spectrum_cell(column: int, row: int) -> SpectrumCell:
    """Look up one spectrum cell.

    Raises:
        IndexError: If the position is outside the 12 x 10 matrix
    """
    if not (0 <= column < HUE_STEPS and 0 <= row < SATURATION_STEPS):
        raise IndexError(f"Spectrum cell out of range: column={column}, row={row}")
    return generate_spectrum()[column][row]
