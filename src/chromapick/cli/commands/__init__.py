"""CLI commands for chromapick."""

from .colors import convert, hsl, palette, spectrum
from .config import config

__all__ = ["config", "convert", "hsl", "palette", "spectrum"]
