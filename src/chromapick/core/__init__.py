"""Picker core: immutable state and the session that owns it."""

from .session import CallbackColorObserver, PickerSession
from .state import PickerState

__all__ = [
    "CallbackColorObserver",
    "PickerSession",
    "PickerState",
]
