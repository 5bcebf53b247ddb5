"""Color math and swatch catalogues for the picker.

## Three Color Representations

### 1. Canonical 8-bit RGB (0-255)
**Format**: `Color(r=255, g=128, b=0)`
**Used by**: picker state, notifications, presets

This is the only representation treated as truth. Everything else is
derived from it.

### 2. Hex string
**Format**: `"#FF8000"`
**Used by**: the hex edit buffer and the host notification contract

Text typed by the user may be partial or invalid; it only becomes a Color
once it fully matches `#RRGGBB`.

```python
from chromapick.colors import parse_hex

parse_hex("#ff8000")   # Color(r=255, g=128, b=0)
parse_hex("#FF80")     # None
```

### 3. HSL sample
**Format**: `HSLSample(hue=30, saturation=100, lightness=50)`
**Used by**: the spectrum tab only

```python
from chromapick.colors import hsl_to_color

hsl_to_color(30, 100, 50).to_hex()  # '#FF8000'
```

## Swatch Tables

- `PRESET_PALETTE`: 3 x 5 named presets (grid tab)
- `generate_spectrum()`: 12 hues x 10 saturations at 50% lightness
- `generate_grayscale_ramp()`: 11 grays from black to white

## See Also

- `models.Color`: the Color model
- `core.PickerSession`: keeps hex buffer, RGB cache and Color consistent
"""

from .codec import (
    clamp_channel,
    coerce_channel,
    hsl_to_color,
    is_valid_hex,
    normalize_hex,
    parse_hex,
    round_half_up,
    to_hex,
)
from .presets import (
    PRESET_COLUMNS,
    PRESET_PALETTE,
    PRESET_ROWS,
    PresetSwatch,
    find_swatch,
    is_selected,
    preset_swatches,
    selected_swatch,
)
from .spectrum import (
    GRAYSCALE_STEPS,
    HUE_STEPS,
    SATURATION_STEPS,
    SPECTRUM_LIGHTNESS,
    SpectrumCell,
    generate_grayscale_ramp,
    generate_spectrum,
    spectrum_cell,
    spectrum_cells,
)

__all__ = [
    # Codec
    "clamp_channel",
    "coerce_channel",
    "hsl_to_color",
    "is_valid_hex",
    "normalize_hex",
    "parse_hex",
    "round_half_up",
    "to_hex",
    # Presets
    "PRESET_COLUMNS",
    "PRESET_PALETTE",
    "PRESET_ROWS",
    "PresetSwatch",
    "find_swatch",
    "is_selected",
    "preset_swatches",
    "selected_swatch",
    # Spectrum
    "GRAYSCALE_STEPS",
    "HUE_STEPS",
    "SATURATION_STEPS",
    "SPECTRUM_LIGHTNESS",
    "SpectrumCell",
    "generate_grayscale_ramp",
    "generate_spectrum",
    "spectrum_cell",
    "spectrum_cells",
]
