"""Protocol definitions for picker observers.

- Events: which input modality changed the color
- Observers: protocols for components that react to color changes
"""

from .events import ColorEvent
from .observers import ColorObserver

__all__ = [
    "ColorEvent",
    "ColorObserver",
]
