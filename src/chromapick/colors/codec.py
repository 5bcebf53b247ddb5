"""Conversions between hex strings, RGB triples and HSL samples.

Every function in this module is total: malformed text, out-of-range
numbers and non-finite floats are absorbed (rejected, clamped or wrapped)
rather than raised, so the picker stays usable while the user is still
composing input.

## Representations

- ``Color``: canonical 8-bit RGB model (see ``chromapick.models.color``)
- Hex string: ``#`` followed by six hex digits, uppercase once accepted
- HSL: hue in degrees, saturation and lightness in percent

## Rounding

Scaling steps use round-half-up (``26`` for ``25.5``, ``77`` for
``76.5``), not Python's banker's rounding, so spectrum and grayscale
values match CSS ``hsl()`` rendering.
"""

import math
import re
import sys

from chromapick.models.color import Color

HEX_PATTERN = re.compile(r"#([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})")
BARE_HEX_PATTERN = re.compile(r"#?([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})")
_LEADING_INT = re.compile(r"^\s*([+-]?)0*(\d+)")

CHANNEL_MIN = 0
CHANNEL_MAX = 255

# Phase offsets (in 30 degree steps) for the red, green and blue channels
_PHASES = (0, 8, 4)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values."""
    return int(math.floor(value + 0.5))


def clamp_channel(value: int) -> int:
    """Clamp an integer into the 8-bit channel range."""
    return max(CHANNEL_MIN, min(CHANNEL_MAX, value))


def parse_hex(text: object, require_hash: bool = True) -> Color | None:
    """Parse a hex color string.

    Args:
        text: Candidate text, typically the hex edit buffer
        require_hash: When False, the bare ``RRGGBB`` form is accepted too

    Returns:
        The parsed Color, or None if ``text`` is not a valid hex color

    Example:
        >>> parse_hex("#3b82f6")
        Color(r=59, g=130, b=246)
        >>> parse_hex("#3B82F") is None
        True
    """
    if not isinstance(text, str):
        return None
    pattern = HEX_PATTERN if require_hash else BARE_HEX_PATTERN
    match = pattern.fullmatch(text)
    if match is None:
        return None
    r, g, b = (int(group, 16) for group in match.groups())
    return Color(r=r, g=g, b=b)


def to_hex(color: Color) -> str:
    """Render a color as '#RRGGBB' with uppercase digits."""
    return color.to_hex()


def is_valid_hex(text: object) -> bool:
    """Check whether ``text`` is a complete '#RRGGBB' string."""
    return parse_hex(text) is not None


def normalize_hex(text: object, require_hash: bool = True) -> str | None:
    """Return the uppercase canonical form of a hex string, or None if invalid."""
    color = parse_hex(text, require_hash=require_hash)
    return None if color is None else color.to_hex()


def coerce_channel(raw: object) -> int:
    """Turn raw numeric-entry input into a valid channel value.

    Text is parsed by its leading integer, so ``"12abc"`` gives 12 and
    ``"3.7"`` gives 3. Empty or non-numeric text gives 0. The result is
    clamped to [0, 255]: ``"300"`` gives 255 and ``"-10"`` gives 0.
    """
    if isinstance(raw, bool):
        value = int(raw)
    elif isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        value = int(raw) if math.isfinite(raw) else 0
    elif isinstance(raw, str):
        value = _leading_int(raw)
    else:
        value = 0
    return clamp_channel(value)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    sign, digits = match.groups()
    # More than four significant digits is out of range whatever they are
    if len(digits) > 4:
        return -CHANNEL_MAX - 1 if sign == "-" else CHANNEL_MAX + 1
    return int(sign + digits)


def _finite(value: float, default: float = 0.0) -> float:
    try:
        number = float(value)
    except OverflowError:
        # Integers past the float range saturate instead of failing
        return sys.float_info.max if value > 0 else -sys.float_info.max
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def hsl_to_color(hue: float, saturation: float, lightness: float) -> Color:
    """Convert an HSL triple to RGB with the chroma formula.

    Hue is taken modulo 360; saturation and lightness are clamped to
    [0, 100]. Each channel is clamped to [0, 255] after scaling to guard
    against floating-point overshoot.

    Args:
        hue: Hue in degrees
        saturation: Saturation percent
        lightness: Lightness percent

    Returns:
        The converted Color

    Example:
        >>> hsl_to_color(120, 100, 50).to_hex()
        '#00FF00'
    """
    # Exact integer wrap first so huge int hues keep their angle
    h = _finite(hue % 360 if isinstance(hue, int) else hue) % 360
    s = min(100.0, max(0.0, _finite(saturation))) / 100
    l = min(100.0, max(0.0, _finite(lightness))) / 100

    a = s * min(l, 1 - l)

    def channel(n: int) -> int:
        k = (n + h / 30) % 12
        value = l - a * max(min(k - 3, 9 - k, 1), -1)
        scaled = min(float(CHANNEL_MAX), max(float(CHANNEL_MIN), 255 * value))
        return clamp_channel(round_half_up(scaled))

    r, g, b = (channel(n) for n in _PHASES)
    return Color(r=r, g=g, b=b)
