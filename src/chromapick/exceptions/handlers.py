"""Translation of low-level failures into ChromaPickError.

pydantic and the file system report problems in their own terms. These
helpers turn them into messages that name the config field or file the
user has to fix.
"""

from pydantic import ValidationError

from .base import ChromaPickError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError


def wrap_pydantic_error(error: ValidationError, file_path: str) -> ConfigurationError:
    """
    Convert a failed ``model_validate_json`` into a config exception.

    A JSON syntax problem becomes ConfigFileInvalidError. Otherwise the
    first failing field is reported; further failures are counted in the
    message so the user knows to run ``config validate`` again.

    Args:
        error: The ValidationError raised while loading the file
        file_path: Config file that was being loaded
    """
    details = error.errors()

    for detail in details:
        if detail["type"] == "json_invalid":
            reason = detail.get("ctx", {}).get("error", detail["msg"])
            return ConfigFileInvalidError(file_path, str(reason))

    if not details:
        return ConfigValidationError("config", None, str(error), file_path=file_path)

    first = details[0]
    field = ".".join(str(part) for part in first["loc"]) or "config"
    reason = first["msg"].removeprefix("Value error, ")
    if len(details) > 1:
        reason += f" (and {len(details) - 1} more problem(s))"

    return ConfigValidationError(field, first.get("input"), reason, file_path=file_path)


def format_error_for_display(error: Exception) -> tuple[str, str | None]:
    """
    Split an exception into (message, hint) for the CLI and TUI.

    File system errors get a permissions hint; anything unexpected is shown
    with its type name and no hint.
    """
    if isinstance(error, ChromaPickError):
        return error.user_message, error.recovery_hint

    if isinstance(error, OSError):
        target = error.filename or "file"
        return (
            f"Cannot access {target}: {error.strerror or error}",
            "Check that the directory exists and is writable",
        )

    return f"{type(error).__name__}: {error}", None
