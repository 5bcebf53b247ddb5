"""Tests for the exception hierarchy and error helpers."""

import json
from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from chromapick.exceptions import (
    ChromaPickError,
    ConfigFileInvalidError,
    ConfigValidationError,
    format_error_for_display,
    wrap_pydantic_error,
)
from chromapick.models import PickerConfig
from chromapick.tui.decorators import handle_action_errors


def _validation_error(payload: str) -> ValidationError:
    with pytest.raises(ValidationError) as exc_info:
        PickerConfig.model_validate_json(payload)
    return exc_info.value


class TestExceptions:
    """Test exception messages and hints."""

    @pytest.mark.unit
    def test_full_message_includes_hint(self):
        error = ChromaPickError("Something broke", recovery_hint="Try again")
        assert str(error) == "Something broke"
        assert error.technical_message == "Something broke"
        assert error.get_full_message() == "Something broke\nHint: Try again"

    @pytest.mark.unit
    def test_full_message_without_hint(self):
        assert ChromaPickError("Plain").get_full_message() == "Plain"

    @pytest.mark.unit
    def test_trailing_comma_hint(self):
        error = ConfigFileInvalidError("/tmp/config.json", "trailing comma at line 3")
        assert error.user_message == "Configuration file has a trailing comma"
        assert "/tmp/config.json" in error.recovery_hint

    @pytest.mark.unit
    def test_tab_validation_hint(self):
        error = ConfigValidationError("default_tab", "wheel", "not a valid tab")
        assert "grid, spectrum, sliders" in error.recovery_hint


class TestWrapPydanticError:
    """Test mapping pydantic failures onto config errors."""

    @pytest.mark.unit
    def test_invalid_json_is_a_file_error(self):
        error = wrap_pydantic_error(_validation_error("{ not json"), "config.json")
        assert isinstance(error, ConfigFileInvalidError)
        assert error.user_message == "Configuration file has invalid syntax"

    @pytest.mark.unit
    def test_single_field_is_named(self):
        error = wrap_pydantic_error(
            _validation_error(json.dumps({"initial_color": "blue"})), "config.json"
        )
        assert isinstance(error, ConfigValidationError)
        assert error.field == "initial_color"
        assert error.value == "blue"
        assert "must be a hex color" in error.user_message
        assert "Value error" not in error.user_message

    @pytest.mark.unit
    def test_further_problems_are_counted(self):
        payload = json.dumps({"initial_color": "blue", "default_tab": "wheel"})
        error = wrap_pydantic_error(_validation_error(payload), "config.json")
        assert error.field == "initial_color"
        assert "(and 1 more problem(s))" in error.user_message


class TestFormatErrorForDisplay:
    """Test splitting errors into message and hint."""

    @pytest.mark.unit
    def test_chromapick_error(self):
        error = ConfigValidationError("initial_color", "blue", "bad color")
        message, hint = format_error_for_display(error)
        assert "initial_color" in message
        assert "#RRGGBB" in hint

    @pytest.mark.unit
    def test_os_error(self):
        error = PermissionError(13, "Permission denied", "/etc/config.json")
        message, hint = format_error_for_display(error)
        assert message == "Cannot access /etc/config.json: Permission denied"
        assert hint is not None

    @pytest.mark.unit
    def test_unexpected_error(self):
        message, hint = format_error_for_display(KeyError("x"))
        assert message.startswith("KeyError")
        assert hint is None


class _Host:
    """Stand-in for a Textual app: only ``notify`` is used."""

    def __init__(self, error: Exception | None = None):
        self.notify = Mock()
        self._error = error

    @handle_action_errors("save last color")
    def save(self, value):
        if self._error is not None:
            raise self._error
        return value


class TestHandleActionErrors:
    """Test the TUI action decorator."""

    @pytest.mark.unit
    def test_passes_through_results(self):
        host = _Host()
        assert host.save(42) == 42
        host.notify.assert_not_called()

    @pytest.mark.unit
    def test_config_error_is_notified(self):
        host = _Host(ChromaPickError("Disk full", recovery_hint="Free some space"))

        assert host.save(1) is None

        host.notify.assert_called_once_with(
            "Disk full\nFree some space", severity="error", timeout=5
        )

    @pytest.mark.unit
    def test_unexpected_error_is_notified(self):
        host = _Host(RuntimeError("boom"))

        assert host.save(1) is None

        host.notify.assert_called_once_with("RuntimeError: boom", severity="error", timeout=5)
