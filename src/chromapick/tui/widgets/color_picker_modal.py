"""Modal dialog with the three color input tabs."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, ContentSwitcher, Input, Label, Static

from chromapick.colors import (
    HUE_STEPS,
    PRESET_PALETTE,
    SATURATION_STEPS,
    PresetSwatch,
    SpectrumCell,
    generate_grayscale_ramp,
    generate_spectrum,
)
from chromapick.core import PickerSession
from chromapick.models import Channel, PickerTab

from .swatch_widget import SwatchWidget

logger = logging.getLogger(__name__)

BAR_WIDTH = 24

# Fill colors of the channel bars
CHANNEL_COLORS = {
    Channel.RED: "#FF3B30",
    Channel.GREEN: "#34C759",
    Channel.BLUE: "#007AFF",
}


def render_channel_bar(channel: Channel, value: int, width: int = BAR_WIDTH) -> str:
    """Render a channel value as a filled bar with Rich markup."""
    filled = round(value / 255 * width)
    return f"[{CHANNEL_COLORS[channel]}]{'█' * filled}[/][dim]{'░' * (width - filled)}[/]"


class ColorPickerModal(ModalScreen[str]):
    """
    Color picker dialog bound to a PickerSession.

    Every widget event is forwarded to the session; the modal only
    re-renders from the session's state afterwards. Dismisses with the
    session's current hex value.
    """

    DEFAULT_CSS = """
    ColorPickerModal {
        align: center middle;
    }

    #dialog {
        width: 80;
        height: auto;
        max-height: 90%;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    #header {
        height: 3;
    }

    #title {
        width: 1fr;
        text-style: bold;
        content-align: left middle;
        height: 3;
    }

    #tabs {
        height: 3;
    }

    #tabs Button {
        width: 1fr;
    }

    #tabs Button.active {
        text-style: bold reverse;
    }

    #panes {
        height: auto;
        padding: 1 0;
    }

    #grid-pane {
        grid-size: 5 3;
        grid-gutter: 1 2;
        height: 11;
    }

    #spectrum {
        grid-size: 12 10;
        grid-gutter: 0;
        height: 10;
    }

    #grayscale {
        grid-size: 11 1;
        grid-gutter: 0 1;
        height: 2;
        margin-top: 1;
    }

    .slider-row {
        height: 3;
    }

    .slider-row Label {
        width: 8;
        content-align: left middle;
        height: 3;
    }

    .slider-row Static {
        width: 1fr;
        content-align: left middle;
        height: 3;
    }

    .slider-row Input {
        width: 9;
    }

    #preview-large {
        height: 4;
        margin-top: 1;
    }

    #hex-row {
        height: 3;
        border-top: solid $surface-lighten-2;
    }

    #hex-row Label {
        width: 6;
        content-align: left middle;
        height: 3;
    }

    #hex-input {
        width: 1fr;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close", show=True),
    ]

    def __init__(self, session: PickerSession) -> None:
        """
        Initialize the modal.

        Args:
            session: Session of the picker field that opened this modal
        """
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        """Create the modal content."""
        with Vertical(id="dialog"):
            with Horizontal(id="header"):
                yield Label("Pick a color", id="title")
                yield Button("Done", variant="success", id="done-btn")

            with Horizontal(id="tabs"):
                for tab in PickerTab:
                    yield Button(tab.label, id=f"tab-{tab.value}")

            with ContentSwitcher(initial=f"{self.session.tab.value}-pane", id="panes"):
                with Grid(id="grid-pane"):
                    for row in PRESET_PALETTE:
                        for swatch in row:
                            yield SwatchWidget(
                                swatch.color,
                                swatch,
                                id=f"preset-{swatch.row}-{swatch.column}",
                                classes="preset",
                            )

                with Vertical(id="spectrum-pane"):
                    spectrum = generate_spectrum()
                    with Grid(id="spectrum"):
                        # Grid fills row-major; the table is stored column-major
                        for row in range(SATURATION_STEPS):
                            for column in range(HUE_STEPS):
                                cell = spectrum[column][row]
                                yield SwatchWidget(cell.color, cell, id=f"spectrum-{column}-{row}")
                    with Grid(id="grayscale"):
                        for index, color in enumerate(generate_grayscale_ramp()):
                            yield SwatchWidget(color, index, id=f"gray-{index}")

                with Vertical(id="sliders-pane"):
                    for channel in Channel:
                        with Horizontal(classes="slider-row"):
                            yield Label(channel.label)
                            yield Static(id=f"bar-{channel.value}")
                            yield Input(
                                value=str(getattr(self.session.rgb, channel.value)),
                                max_length=3,
                                id=f"channel-{channel.value}",
                            )
                    yield Static(id="preview-large")

            with Horizontal(id="hex-row"):
                yield Label("Hex:")
                yield Input(value=self.session.hex_buffer, max_length=7, id="hex-input")

    def on_mount(self) -> None:
        """Render the initial state."""
        self._refresh_view()

    # =================================================================
    # Event handlers
    # =================================================================

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle Done and tab buttons."""
        button_id = event.button.id or ""
        if button_id == "done-btn":
            event.stop()
            self.action_close()
        elif button_id.startswith("tab-"):
            event.stop()
            self.session.select_tab(button_id.removeprefix("tab-"))
            self.query_one("#panes", ContentSwitcher).current = f"{self.session.tab.value}-pane"
            self._refresh_tabs()

    def on_swatch_widget_selected(self, message: SwatchWidget.Selected) -> None:
        """Route a swatch click to the matching session operation."""
        message.stop()
        payload = message.swatch.payload
        if isinstance(payload, PresetSwatch):
            self.session.select_preset(payload)
        elif isinstance(payload, SpectrumCell):
            self.session.select_spectrum_cell(payload)
        else:
            self.session.select_grayscale_cell(payload)
        self._refresh_view()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Forward hex and channel entry to the session."""
        input_id = event.input.id or ""
        if input_id == "hex-input":
            # Skip echoes of values written back by _refresh_view
            if event.value == self.session.hex_buffer:
                return
            if self.session.edit_hex_buffer(event.value):
                self._refresh_view()
        elif input_id.startswith("channel-"):
            channel = input_id.removeprefix("channel-")
            if event.value == str(getattr(self.session.rgb, channel)):
                return
            self.session.edit_channel(channel, event.value)
            # Leave the field being typed in alone so "" or "007" are not rewritten mid-edit
            self._refresh_view(skip_input=input_id)

    def action_close(self) -> None:
        """Close the dialog, handing back the current color."""
        logger.debug(f"Closing picker modal with {self.session.hex}")
        self.dismiss(self.session.hex)

    # =================================================================
    # Rendering
    # =================================================================

    def _refresh_view(self, skip_input: str | None = None) -> None:
        """Re-render everything derived from the session state."""
        state = self.session.state

        for row in PRESET_PALETTE:
            for swatch in row:
                widget = self.query_one(f"#preset-{swatch.row}-{swatch.column}", SwatchWidget)
                widget.set_selected(self.session.is_preset_selected(swatch))

        for channel in Channel:
            value = getattr(state.rgb, channel.value)
            self.query_one(f"#bar-{channel.value}", Static).update(
                render_channel_bar(channel, value)
            )
            channel_input = self.query_one(f"#channel-{channel.value}", Input)
            if channel_input.id != skip_input and channel_input.value != str(value):
                channel_input.value = str(value)

        self.query_one("#preview-large", Static).styles.background = state.hex

        hex_input = self.query_one("#hex-input", Input)
        if hex_input.value != state.hex_buffer:
            hex_input.value = state.hex_buffer

        self._refresh_tabs()

    def _refresh_tabs(self) -> None:
        for tab in PickerTab:
            self.query_one(f"#tab-{tab.value}", Button).set_class(
                tab is self.session.tab, "active"
            )
