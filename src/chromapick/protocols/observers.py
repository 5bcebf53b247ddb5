"""Observer protocol definitions for picker events."""

from typing import Protocol, runtime_checkable

from .events import ColorEvent


@runtime_checkable
class ColorObserver(Protocol):
    """
    Observer that receives color change notifications from a picker session.

    This protocol allows loose coupling between the picker core and the
    host (or any widget mirroring the current color).
    """

    def on_color_event(self, event: ColorEvent, hex_value: str) -> None:
        """
        Handle a color change.

        Args:
            event: Which input modality produced the change
            hex_value: The new color as uppercase '#RRGGBB'

        Threading:
            Called synchronously at the end of the transition, on the
            thread that performed it.

        Re-entrancy:
            Observers must not call the session's mutating operations from
            here. Nested mutations are applied but not re-notified.

        Error Handling:
            Exceptions raised by observers are caught and logged by the
            session. They do not propagate to the caller.
        """
        ...
