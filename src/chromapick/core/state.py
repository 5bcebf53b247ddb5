"""Immutable picker state and its transitions."""

import logging

from pydantic import BaseModel, ConfigDict, Field

from chromapick.colors.codec import coerce_channel, parse_hex
from chromapick.models.color import Color
from chromapick.models.enums import Channel, PickerTab

logger = logging.getLogger(__name__)


class PickerState(BaseModel):
    """
    Snapshot of one picker session.

    Transitions never mutate a state; each returns a new one. After any
    accepted color mutation ``rgb == color`` and ``hex_buffer`` is the
    uppercase hex of ``color``. Between mutations the hex buffer may hold
    partial text the user is still typing.

    Attributes:
        color: Canonical color
        rgb: Channel values shown on the sliders tab (mirrors ``color``)
        hex_buffer: Text in the hex entry, possibly invalid
        tab: Active input tab
        modal_open: Whether the picker modal is visible
    """

    model_config = ConfigDict(frozen=True)

    color: Color = Field(default_factory=Color.off)
    rgb: Color = Field(default_factory=Color.off)
    hex_buffer: str = "#000000"
    tab: PickerTab = PickerTab.GRID
    modal_open: bool = False

    @classmethod
    def seeded(cls, initial: Color | str | None, tab: PickerTab = PickerTab.GRID) -> "PickerState":
        """
        Create the state for a freshly mounted picker.

        Args:
            initial: Host color, as a Color or hex text ('#' optional)
            tab: Tab to show first

        Unparseable text seeds black and is kept verbatim in the hex buffer
        so the user can correct it.
        """
        if isinstance(initial, Color):
            return cls(color=initial, rgb=initial, hex_buffer=initial.to_hex(), tab=tab)

        color = parse_hex(initial, require_hash=False)
        if color is None:
            logger.warning(f"Cannot seed picker from {initial!r}, using black")
            text = initial if isinstance(initial, str) else ""
            return cls(hex_buffer=text, tab=tab)
        return cls(color=color, rgb=color, hex_buffer=color.to_hex(), tab=tab)

    @property
    def hex(self) -> str:
        """Uppercase hex of the canonical color."""
        return self.color.to_hex()

    @property
    def has_pending_edit(self) -> bool:
        """True while the hex buffer differs from the canonical color."""
        return self.hex_buffer.upper() != self.hex

    def opened(self) -> "PickerState":
        """Show the modal."""
        return self.model_copy(update={"modal_open": True})

    def closed(self) -> "PickerState":
        """Hide the modal."""
        return self.model_copy(update={"modal_open": False})

    def with_tab(self, tab: PickerTab) -> "PickerState":
        """Switch tabs without touching the color."""
        return self.model_copy(update={"tab": tab})

    def with_color(self, color: Color) -> "PickerState":
        """Replace the canonical color and re-derive cache and buffer."""
        return self.model_copy(update={"color": color, "rgb": color, "hex_buffer": color.to_hex()})

    def with_hex_buffer(self, text: str) -> tuple["PickerState", bool]:
        """
        Store typed hex text, promoting it to the color when complete.

        Args:
            text: Current content of the hex entry

        Returns:
            Tuple of (new_state, accepted). When ``accepted`` is False only
            the buffer changed.
        """
        color = parse_hex(text)
        if color is None:
            buffer = text if isinstance(text, str) else ""
            return self.model_copy(update={"hex_buffer": buffer}), False
        return self.with_color(color), True

    def with_channel(self, channel: Channel, raw: object) -> "PickerState":
        """
        Write one numeric channel entry.

        The raw entry is coerced (non-numeric becomes 0) and clamped to
        [0, 255] before the color and buffer are derived from it.
        """
        rgb = self.rgb.with_channel(channel.value, coerce_channel(raw))
        return self.with_color(rgb)
