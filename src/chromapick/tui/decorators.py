"""Decorators for TUI components."""

import logging
from functools import wraps

from chromapick.exceptions import ChromaPickError, format_error_for_display

logger = logging.getLogger(__name__)


def handle_action_errors(operation_name: str):
    """
    Keep the TUI running when a host-side action fails.

    The failure is logged and shown with ``self.notify``; the decorated
    method then returns None.

    Example:
        @handle_action_errors("save last color")
        def _save_last_color(self, hex_value):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except Exception as e:
                if isinstance(e, ChromaPickError):
                    logger.error(f"Failed to {operation_name}: {e.technical_message}")
                else:
                    logger.error(f"Failed to {operation_name}: {e}", exc_info=True)
                message, hint = format_error_for_display(e)
                self.notify(f"{message}\n{hint}" if hint else message, severity="error", timeout=5)
                return None
        return wrapper
    return decorator
