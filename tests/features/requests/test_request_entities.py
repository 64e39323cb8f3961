"""Tests for request entities, options and notifiers."""

import logging

import pytest

from neo_datastate.core.exceptions import ConfigurationError
from neo_datastate.features.requests.adapters.notifiers import LoggingNotifier, NullNotifier
from neo_datastate.features.requests.entities.request_options import RequestOptions
from neo_datastate.features.requests.entities.request_state import AsyncOperationState, RequestStatus
from neo_datastate.features.requests.protocols.notifier import ErrorClassifier, Notifier
from neo_datastate.features.requests.utils.error_handling import get_error_message


class TestAsyncOperationState:
    """Test the lifecycle transitions of the state snapshot."""

    def test_idle_holds_initial_data(self):
        state = AsyncOperationState.idle(initial_data=[])
        assert state.status == RequestStatus.IDLE
        assert state.data == []
        assert state.error is None
        assert state.is_idle

    def test_started_keeps_data_and_clears_error(self):
        state = AsyncOperationState(status=RequestStatus.ERROR, data="old", error="boom").started()
        assert state.loading
        assert state.data == "old"
        assert state.error is None

    def test_failed_keeps_data(self):
        state = AsyncOperationState.idle("old").started().failed("boom")
        assert state.is_error
        assert state.data == "old"
        assert state.error == "boom"

    def test_succeeded_replaces_data(self):
        state = AsyncOperationState.idle("old").started().succeeded("new")
        assert state.is_success
        assert state.data == "new"
        assert state.error is None


class TestRequestOptions:
    """Test option defaults and settings integration."""

    def test_defaults(self):
        options = RequestOptions()
        assert options.on_success is None
        assert options.on_error is None
        assert options.show_success_toast is False
        assert options.show_error_toast is True
        assert options.success_message == "Operation successful"
        assert options.initial_data is None
        assert options.discard_stale is False

    def test_from_settings_with_overrides(self, settings):
        settings.show_success_toast = True
        settings.success_message = "Saved"

        options = RequestOptions.from_settings(settings, show_error_toast=False, initial_data=[])

        assert options.show_success_toast is True
        assert options.success_message == "Saved"
        assert options.show_error_toast is False
        assert options.initial_data == []

    def test_from_settings_rejects_unknown_options(self, settings):
        with pytest.raises(ConfigurationError) as exc_info:
            RequestOptions.from_settings(settings, show_toast=True)

        assert exc_info.value.details == {"unknown": ["show_toast"]}


class TestNotifiers:
    """Test shipped notifier adapters."""

    def test_adapters_satisfy_protocol(self):
        assert isinstance(LoggingNotifier(), Notifier)
        assert isinstance(NullNotifier(), Notifier)

    def test_default_classifier_satisfies_protocol(self):
        assert isinstance(get_error_message, ErrorClassifier)
        assert isinstance(lambda error: "failed", ErrorClassifier)

    def test_logging_notifier_levels(self, caplog):
        notifier = LoggingNotifier(logging.getLogger("tests.notifications"))

        with caplog.at_level(logging.INFO, logger="tests.notifications"):
            notifier.success("Saved")
            notifier.error("Failed")
            notifier.info("Heads up")

        levels = [(record.levelname, record.getMessage()) for record in caplog.records]
        assert levels == [("INFO", "Saved"), ("WARNING", "Failed"), ("INFO", "Heads up")]
