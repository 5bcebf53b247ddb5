"""Compact color field that opens the picker modal."""

import logging
from collections.abc import Callable

from textual.binding import Binding
from textual.widgets import Static

from chromapick.core import PickerSession
from chromapick.models import Color, PickerTab
from chromapick.protocols import ColorEvent

from .color_picker_modal import ColorPickerModal

logger = logging.getLogger(__name__)


class ColorPickerField(Static):
    """
    Preview box plus hex label; click or press enter to pick a color.

    The field owns a PickerSession for as long as it is mounted. The
    session is seeded from the host color on mount and discarded on
    unmount, together with any half-typed hex text. The host only ever
    sees validated colors, through ``on_color_change``.
    """

    can_focus = True

    DEFAULT_CSS = """
    ColorPickerField {
        height: 3;
        width: auto;
        min-width: 20;
        padding: 0 1;
        border: round $surface-lighten-2;
        content-align: left middle;
    }

    ColorPickerField:focus {
        border: round $primary;
    }
    """

    BINDINGS = [
        Binding("enter", "open_picker", "Pick Color", show=True),
    ]

    def __init__(
        self,
        color: str,
        on_color_change: Callable[[str], None] | None = None,
        tab: PickerTab = PickerTab.GRID,
        *,
        id: str | None = None,
    ) -> None:
        """
        Initialize the field.

        Args:
            color: Host-owned current color ('#RRGGBB')
            on_color_change: Host callback for every validated change
            tab: Tab the modal opens on first
            id: Widget id
        """
        super().__init__(id=id)
        self._seed_color = color
        self._on_color_change = on_color_change
        self._initial_tab = tab
        self.session: PickerSession | None = None

    def on_mount(self) -> None:
        """Create the session from the host color."""
        self.session = PickerSession(
            self._seed_color, on_color_change=self._on_color_change, tab=self._initial_tab
        )
        self.session.register_observer(self)
        self._update_preview()

    def on_unmount(self) -> None:
        """Drop the session and its edit buffer."""
        if self.session is not None:
            self.session.unregister_observer(self)
            self.session = None

    @property
    def color(self) -> Color | None:
        """Current canonical color, or None when not mounted."""
        return self.session.color if self.session else None

    def set_color(self, color: str) -> None:
        """Reseed from a host-side color change (no notification back)."""
        self._seed_color = color
        if self.session is not None:
            self.session.reseed(color)
            self._update_preview()

    def on_color_event(self, event: ColorEvent, hex_value: str) -> None:
        """Keep the preview in step with the session."""
        self._update_preview()

    def on_click(self) -> None:
        """Open the picker on click."""
        self.action_open_picker()

    def action_open_picker(self) -> None:
        """Show the picker modal for this field."""
        if self.session is None or self.session.is_open:
            return
        self.session.open()
        self.app.push_screen(ColorPickerModal(self.session), self._on_modal_closed)

    def _on_modal_closed(self, hex_value: str | None) -> None:
        if self.session is not None:
            self.session.close()
            logger.debug(f"Picker closed at {hex_value}")
        self._update_preview()

    def _update_preview(self) -> None:
        if self.session is None:
            return
        hex_value = self.session.hex
        self.update(f"[{hex_value}]████[/] [b]{hex_value}[/b]")
