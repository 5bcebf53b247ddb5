"""Textual host application and picker widgets."""

from .app import ColorPickerApp

__all__ = ["ColorPickerApp"]
