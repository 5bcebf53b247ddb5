"""Color models for the picker."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    This is the canonical color representation: hex strings, channel
    entries and spectrum samples are all derived from (or written into)
    an instance of this model.

    The model is frozen to ensure hashability, which is required for
    LRU caching of the spectrum tables.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @field_validator("r", "g", "b")
    @classmethod
    def validate_rgb(cls, v: int) -> int:
        """Ensure RGB values are in valid range."""
        if not 0 <= v <= 255:
            raise ValueError("RGB values must be between 0 and 255")
        return v

    @classmethod
    def off(cls) -> "Color":
        """Create off (black) color."""
        return cls(r=0, g=0, b=0)

    @classmethod
    def gray(cls, value: int) -> "Color":
        """Create a neutral gray with all three channels set to ``value``."""
        return cls(r=value, g=value, b=value)

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Create a color from a '#RRGGBB' string.

        Raises:
            ValueError: If the text is not a valid hex color

        Example:
            >>> Color.from_hex("#ff0000")
            Color(r=255, g=0, b=0)
        """
        from chromapick.colors.codec import parse_hex

        color = parse_hex(text)
        if color is None:
            raise ValueError(f"Invalid hex color: {text!r}")
        return color

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to RGB tuple."""
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000').

        Returns:
            str: Hex color string in format '#RRGGBB'

        Example:
            >>> color = Color(r=255, g=0, b=0)
            >>> color.to_hex()
            '#FF0000'
        """
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def with_channel(self, channel: str, value: int) -> "Color":
        """Return a copy with one channel ('r', 'g' or 'b') replaced."""
        return Color(**{**self.model_dump(), channel: value})


class HSLSample(BaseModel):
    """Transient hue/saturation/lightness triple used to generate swatches.

    Never stored as picker state; it is converted into a :class:`Color`
    and discarded.
    """

    model_config = ConfigDict(frozen=True)

    hue: float = Field(ge=0, lt=360, description="Hue in degrees [0, 360)")
    saturation: float = Field(ge=0, le=100, description="Saturation percent")
    lightness: float = Field(ge=0, le=100, description="Lightness percent")

    def to_color(self) -> Color:
        """Convert to RGB using the chroma formula."""
        from chromapick.colors.codec import hsl_to_color

        return hsl_to_color(self.hue, self.saturation, self.lightness)

    def to_css(self) -> str:
        """Render as a CSS ``hsl()`` expression."""
        return f"hsl({self.hue:g}, {self.saturation:g}%, {self.lightness:g}%)"
