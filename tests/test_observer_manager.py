"""Tests for the generic observer manager."""

from unittest.mock import Mock

import pytest

from chromapick.model_manager import ObserverManager
from chromapick.protocols import ColorEvent, ColorObserver


@pytest.fixture
def manager():
    return ObserverManager[ColorObserver](observer_type_name="color")


class TestObserverManager:
    """Test registration and notification."""

    @pytest.mark.unit
    def test_register_is_idempotent(self, manager):
        observer = Mock(spec=ColorObserver)
        manager.register(observer)
        manager.register(observer)

        manager.notify("on_color_event", ColorEvent.HEX_EDITED, "#000000")

        observer.on_color_event.assert_called_once_with(ColorEvent.HEX_EDITED, "#000000")

    @pytest.mark.unit
    def test_unregister_unknown_is_harmless(self, manager):
        kept = Mock(spec=ColorObserver)
        manager.register(kept)

        manager.unregister(Mock(spec=ColorObserver))
        manager.notify("on_color_event", ColorEvent.HEX_EDITED, "#000000")

        kept.on_color_event.assert_called_once()

    @pytest.mark.unit
    def test_unregistered_observer_is_not_called(self, manager):
        observer = Mock(spec=ColorObserver)
        manager.register(observer)
        manager.unregister(observer)

        manager.notify("on_color_event", ColorEvent.HEX_EDITED, "#000000")

        observer.on_color_event.assert_not_called()

    @pytest.mark.unit
    def test_notify_calls_in_registration_order(self, manager):
        order = []
        first = Mock(spec=ColorObserver)
        first.on_color_event.side_effect = lambda *args: order.append("first")
        second = Mock(spec=ColorObserver)
        second.on_color_event.side_effect = lambda *args: order.append("second")
        manager.register(first)
        manager.register(second)

        manager.notify("on_color_event", ColorEvent.HEX_EDITED, "#FFFFFF")

        assert order == ["first", "second"]
        second.on_color_event.assert_called_once_with(ColorEvent.HEX_EDITED, "#FFFFFF")

    @pytest.mark.unit
    def test_exceptions_are_isolated(self, manager):
        failing = Mock(spec=ColorObserver)
        failing.on_color_event.side_effect = ValueError("bad observer")
        healthy = Mock(spec=ColorObserver)
        manager.register(failing)
        manager.register(healthy)

        manager.notify("on_color_event", ColorEvent.CHANNEL_EDITED, "#000000")

        healthy.on_color_event.assert_called_once()

    @pytest.mark.unit
    def test_missing_callback_is_logged_not_raised(self, manager):
        healthy = Mock(spec=ColorObserver)
        manager.register(object())
        manager.register(healthy)

        manager.notify("on_color_event", ColorEvent.CHANNEL_EDITED, "#000000")

        healthy.on_color_event.assert_called_once()

    @pytest.mark.unit
    def test_attribute_error_inside_callback_is_isolated(self, manager):
        failing = Mock(spec=ColorObserver)
        failing.on_color_event.side_effect = AttributeError("inner")
        healthy = Mock(spec=ColorObserver)
        manager.register(failing)
        manager.register(healthy)

        manager.notify("on_color_event", ColorEvent.CHANNEL_EDITED, "#000000")

        healthy.on_color_event.assert_called_once()

    @pytest.mark.unit
    def test_observer_may_unregister_itself_during_notify(self, manager):
        observer = Mock(spec=ColorObserver)
        observer.on_color_event.side_effect = lambda *args: manager.unregister(observer)
        manager.register(observer)

        manager.notify("on_color_event", ColorEvent.CHANNEL_EDITED, "#000000")
        manager.notify("on_color_event", ColorEvent.CHANNEL_EDITED, "#FFFFFF")

        observer.on_color_event.assert_called_once()

    @pytest.mark.unit
    def test_runtime_protocol_check(self):
        assert isinstance(Mock(spec=ColorObserver), ColorObserver)
