"""Base exception for the layers around the picker core.

The color core never raises. Everything that can fail lives at the edges
(reading and writing the config file, the CLI, the TUI host), and those
failures are reported as a ChromaPickError so the edge that catches it can
show one friendly line plus an optional hint, and log the technical detail.
"""


class ChromaPickError(Exception):
    """
    Failure that can be shown to the user as-is.

    Attributes:
        user_message: One line for the user
        technical_message: Detail for the log file (defaults to user_message)
        recovery_hint: What the user can do about it, if anything
    """

    def __init__(
        self,
        user_message: str,
        *,
        technical_message: str | None = None,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the hint on its own line."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\nHint: {self.recovery_hint}"
