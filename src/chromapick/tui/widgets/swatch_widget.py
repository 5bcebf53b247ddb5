"""Widget representing a single clickable color swatch."""

from textual.message import Message
from textual.widgets import Static

from chromapick.colors import PresetSwatch, SpectrumCell
from chromapick.models import Color


def contrast_text(color: Color) -> str:
    """Pick black or white text for legibility on ``color``."""
    luminance = 0.299 * color.r + 0.587 * color.g + 0.114 * color.b
    return "#000000" if luminance > 150 else "#FFFFFF"


class SwatchWidget(Static):
    """
    A filled color cell (presentation only).

    Posts a Selected message when clicked; the containing picker decides
    what the click means based on ``payload``.
    """

    DEFAULT_CSS = """
    SwatchWidget {
        width: 100%;
        height: 100%;
        min-height: 1;
        content-align: center middle;
    }

    SwatchWidget.preset {
        height: 3;
        border: round $surface-lighten-2;
    }

    SwatchWidget.preset.selected {
        border: heavy $text;
        text-style: bold;
    }
    """

    class Selected(Message):
        """Message posted when the swatch is clicked."""

        def __init__(self, swatch: "SwatchWidget"):
            super().__init__()
            self.swatch = swatch

    def __init__(
        self,
        color: Color,
        payload: PresetSwatch | SpectrumCell | int,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """
        Initialize swatch widget.

        Args:
            color: Fill color
            payload: What was picked: a preset, a spectrum cell, or a grayscale index
            id: Widget id
            classes: Extra CSS classes
        """
        super().__init__("", id=id, classes=classes)
        self.swatch_color = color
        self.payload = payload
        self.styles.background = color.to_hex()
        self.styles.color = contrast_text(color)
        if isinstance(payload, PresetSwatch):
            self.tooltip = f"{payload.name} {payload.hex}"
        else:
            self.tooltip = color.to_hex()

    def set_selected(self, selected: bool) -> None:
        """Show or hide the check mark."""
        self.set_class(selected, "selected")
        self.update("✓" if selected else "")

    def on_click(self) -> None:
        """Handle click event - post message for parent to handle."""
        self.post_message(self.Selected(self))
