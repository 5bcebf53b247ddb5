"""Picker session: owns the current state and notifies the host."""

import logging
from collections.abc import Callable

from chromapick.colors.presets import PresetSwatch, is_selected, selected_swatch
from chromapick.colors.spectrum import SpectrumCell, generate_grayscale_ramp
from chromapick.model_manager import ObserverManager
from chromapick.models.color import Color
from chromapick.models.enums import Channel, PickerTab
from chromapick.protocols import ColorEvent, ColorObserver

from .state import PickerState

logger = logging.getLogger(__name__)


class CallbackColorObserver:
    """Adapts a plain ``on_color_change(hex_value)`` callable to ColorObserver."""

    def __init__(self, callback: Callable[[str], None]) -> None:
        self._callback = callback

    def on_color_event(self, event: ColorEvent, hex_value: str) -> None:
        self._callback(hex_value)

    def __repr__(self) -> str:
        return f"CallbackColorObserver({self._callback!r})"


class PickerSession:
    """
    Single source of truth for one mounted color picker.

    The session holds an immutable :class:`PickerState` and replaces it on
    every operation. Operations that change the color notify observers
    synchronously with the new uppercase hex value; tab and modal changes
    and rejected hex edits do not notify.

    No public operation raises. Invalid input is absorbed: hex text stays
    in the buffer, channel entries are coerced and clamped, unknown tabs
    and channels are ignored.

    Re-entrancy:
        Observers must not call mutating operations while being notified.
        If they do, the nested change is applied but not notified again.
    """

    def __init__(
        self,
        initial_color: Color | str | None = None,
        on_color_change: Callable[[str], None] | None = None,
        tab: PickerTab = PickerTab.GRID,
    ) -> None:
        """
        Initialize the session.

        Args:
            initial_color: Host color used as the seed ('#' optional)
            on_color_change: Optional host callback receiving the new hex value
            tab: Tab to show first
        """
        self._state = PickerState.seeded(initial_color, tab=tab)
        self._observers = ObserverManager[ColorObserver](observer_type_name="color")
        self._notifying = False
        if on_color_change is not None:
            self._observers.register(CallbackColorObserver(on_color_change))
        logger.info(f"Picker session created with color {self._state.hex}")

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: ColorObserver) -> None:
        """Register an observer to receive color events."""
        self._observers.register(observer)

    def unregister_observer(self, observer: ColorObserver) -> None:
        """Unregister an observer."""
        self._observers.unregister(observer)

    # =================================================================
    # Queries
    # =================================================================

    @property
    def state(self) -> PickerState:
        """Current immutable state snapshot."""
        return self._state

    @property
    def color(self) -> Color:
        return self._state.color

    @property
    def rgb(self) -> Color:
        return self._state.rgb

    @property
    def hex(self) -> str:
        return self._state.hex

    @property
    def hex_buffer(self) -> str:
        return self._state.hex_buffer

    @property
    def tab(self) -> PickerTab:
        return self._state.tab

    @property
    def is_open(self) -> bool:
        return self._state.modal_open

    @property
    def selected_preset(self) -> PresetSwatch | None:
        """Preset matching the current color, recomputed on every access."""
        return selected_swatch(self._state.color)

    def is_preset_selected(self, swatch: PresetSwatch) -> bool:
        """Check whether ``swatch`` should carry the selected marker."""
        return is_selected(swatch, self._state.color)

    # =================================================================
    # Modal and tab transitions (no notification)
    # =================================================================

    def open(self) -> None:
        """Show the picker modal."""
        self._state = self._state.opened()
        logger.debug("Picker modal opened")

    def close(self) -> None:
        """Hide the picker modal."""
        self._state = self._state.closed()
        logger.debug("Picker modal closed")

    def select_tab(self, tab: PickerTab | str) -> None:
        """Switch the active tab. The color is left untouched."""
        try:
            tab = PickerTab(tab)
        except ValueError:
            logger.warning(f"Ignoring unknown picker tab: {tab!r}")
            return
        self._state = self._state.with_tab(tab)
        logger.debug(f"Picker tab -> {tab.value}")

    def reseed(self, color: Color | str | None) -> None:
        """
        Replace the color from the host without notifying it.

        Used when the host's own value changes while the picker is mounted.
        Tab and modal visibility are preserved.
        """
        seeded = PickerState.seeded(color, tab=self._state.tab)
        self._state = seeded.model_copy(update={"modal_open": self._state.modal_open})
        logger.debug(f"Picker reseeded to {self._state.hex}")

    # =================================================================
    # Color mutations (notify)
    # =================================================================

    def select_preset(self, swatch: PresetSwatch) -> Color:
        """Choose a preset swatch from the grid tab."""
        return self._select(swatch.color, ColorEvent.PRESET_SELECTED)

    def select_spectrum_cell(self, cell: SpectrumCell | Color) -> Color:
        """Choose a spectrum cell (or its color) from the spectrum tab."""
        color = cell.color if isinstance(cell, SpectrumCell) else cell
        return self._select(color, ColorEvent.SPECTRUM_SELECTED)

    def select_grayscale_cell(self, cell: Color | int) -> Color:
        """
        Choose a grayscale ramp cell, by color or by ramp index.

        An index outside the ramp is ignored.
        """
        if isinstance(cell, Color):
            color = cell
        else:
            ramp = generate_grayscale_ramp()
            if not isinstance(cell, int) or not 0 <= cell < len(ramp):
                logger.warning(f"Ignoring grayscale cell outside the ramp: {cell!r}")
                return self._state.color
            color = ramp[cell]
        return self._select(color, ColorEvent.GRAYSCALE_SELECTED)

    def edit_hex_buffer(self, text: str) -> bool:
        """
        Store typed hex text.

        The color changes (and observers are notified) only when the text
        is a complete '#RRGGBB' value.

        Returns:
            True if the text was promoted to the color
        """
        state, accepted = self._state.with_hex_buffer(text)
        if not accepted:
            self._state = state
            logger.debug(f"Hex buffer pending: {state.hex_buffer!r}")
            return False
        self._commit(state, ColorEvent.HEX_EDITED)
        return True

    def edit_channel(self, channel: Channel | str, raw: object) -> Color:
        """
        Write a numeric channel entry ('r', 'g' or 'b').

        Non-numeric input counts as 0 and values are clamped to [0, 255],
        so this always yields a valid color.
        """
        try:
            channel = Channel(channel)
        except ValueError:
            logger.warning(f"Ignoring unknown channel: {channel!r}")
            return self._state.color
        self._commit(self._state.with_channel(channel, raw), ColorEvent.CHANNEL_EDITED)
        return self._state.color

    # =================================================================
    # Internals
    # =================================================================

    def _select(self, color: Color, event: ColorEvent) -> Color:
        self._commit(self._state.with_color(color), event)
        return self._state.color

    def _commit(self, state: PickerState, event: ColorEvent) -> None:
        self._state = state
        hex_value = state.hex

        if self._notifying:
            logger.warning(
                f"Color changed to {hex_value} from inside a color observer; not notifying again"
            )
            return

        logger.debug(f"Color -> {hex_value} ({event.value})")
        self._notifying = True
        try:
            self._observers.notify("on_color_event", event, hex_value)
        finally:
            self._notifying = False
