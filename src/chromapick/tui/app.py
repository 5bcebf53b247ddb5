"""Demo host application for the color picker."""

import logging
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Label, Static

from chromapick.models import PickerConfig

from .decorators import handle_action_errors
from .widgets import ColorPickerField

logger = logging.getLogger(__name__)


class ColorPickerApp(App):
    """
    Textual host for a single ColorPickerField.

    The app plays the host role: it owns the authoritative color, receives
    every validated change from the field, and is the only place the color
    is persisted (as ``last_color`` in the config, when enabled).
    """

    TITLE = "chromapick"

    CSS = """
    #body {
        padding: 1 2;
        height: auto;
    }

    #caption {
        padding: 0 0 1 0;
        color: $text-muted;
    }

    #status {
        padding: 1 0 0 0;
    }
    """

    BINDINGS = [
        Binding("o", "open_picker", "Open Picker", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        config: PickerConfig | None = None,
        config_path: Path | None = None,
        color: str | None = None,
    ) -> None:
        """
        Initialize the app.

        Args:
            config: Loaded configuration (defaults are used when None)
            config_path: Where to save ``last_color``; None means the default location
            color: Start color overriding the configured one
        """
        super().__init__()
        self.config = config or PickerConfig()
        self.config_path = config_path
        self.current_color = color or self.config.start_color
        self.change_count = 0

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        yield Header()
        with Vertical(id="body"):
            yield Label("Accent color (click, press enter, or press o)", id="caption")
            yield ColorPickerField(
                self.current_color,
                on_color_change=self._handle_color_change,
                tab=self.config.default_tab,
                id="field",
            )
            yield Static(id="status")
        yield Footer()

    def on_mount(self) -> None:
        """Focus the field and show the starting color."""
        self.query_one(ColorPickerField).focus()
        self._update_status()

    def action_open_picker(self) -> None:
        """Open the picker modal."""
        self.query_one(ColorPickerField).action_open_picker()

    def _handle_color_change(self, hex_value: str) -> None:
        """Receive a validated color from the picker."""
        self.current_color = hex_value
        self.change_count += 1
        logger.info(f"Color changed to {hex_value}")
        self._update_status()
        if self.config.remember_last_color:
            self._save_last_color(hex_value)

    @handle_action_errors("save last color")
    def _save_last_color(self, hex_value: str) -> None:
        self.config = self.config.model_copy(update={"last_color": hex_value})
        self.config.save(self.config_path)

    def _update_status(self) -> None:
        self.query_one("#status", Static).update(
            f"Current: [b]{self.current_color}[/b]  (changes this session: {self.change_count})"
        )
