"""
Tests for write rejection errors and their wire payload.
"""

import pytest

from syncstate.errors import (
    ChannelNotBoundError,
    RemoteCauseError,
    SlotAlreadyRegisteredError,
    SyncStateBaseError,
    SyncStateError,
    SyncStateErrorCode,
    create_write_forbidden_message,
    create_write_rejected_message,
)
from syncstate.models import InvokeErrorPayload, SyncStateErrorPayload


class TestSyncStateError:
    """Test SyncStateError fields and formatting."""

    def test_fields(self):
        cause = ValueError("too big")
        error = SyncStateError(
            SyncStateErrorCode.WRITE_REJECTED,
            "rejected",
            slot_name="counter",
            namespace="state",
            cause=cause,
        )

        assert error.code is SyncStateErrorCode.WRITE_REJECTED
        assert error.message == "rejected"
        assert str(error) == "rejected"
        assert error.cause is cause
        assert error.__cause__ is cause

    def test_full_message_includes_context(self):
        error = SyncStateError(
            SyncStateErrorCode.WRITE_REJECTED,
            "rejected",
            slot_name="counter",
            namespace="state",
            cause=ValueError("too big"),
        )

        assert error.get_full_message() == (
            'rejected\n  Slot name: "counter"'
            '\n  Channel namespace: "state"'
            "\n  Original error: too big"
        )

    def test_full_message_without_context(self):
        error = SyncStateError(SyncStateErrorCode.WRITE_FORBIDDEN, "forbidden")

        assert error.get_full_message() == "forbidden"
        assert error.__cause__ is None

    def test_codes_are_stable_strings(self):
        assert SyncStateErrorCode.WRITE_FORBIDDEN.value == "WRITE_FORBIDDEN"
        assert SyncStateErrorCode.WRITE_REJECTED.value == "WRITE_REJECTED"


class TestMessages:
    """Test the default error message texts."""

    def test_forbidden_message_names_slot(self):
        message = create_write_forbidden_message("counter", "state")

        assert '"counter"' in message
        assert '"state"' in message
        assert "allow_observer_write=True" in message

    def test_rejected_message_names_slot(self):
        message = create_write_rejected_message("counter", "app")

        assert '"counter"' in message
        assert '"app"' in message


class TestBaseErrors:
    """Test registration and transport errors."""

    def test_slot_already_registered(self):
        error = SlotAlreadyRegisteredError("counter", "state")

        assert isinstance(error, SyncStateBaseError)
        assert error.slot_name == "counter"
        assert error.namespace == "state"
        assert "counter" in str(error)

    def test_channel_not_bound(self):
        error = ChannelNotBoundError("state:missing:get")

        assert error.channel == "state:missing:get"
        assert "state:missing:get" in str(error)


class TestSyncStateErrorPayload:
    """Test carrying a SyncStateError across the transport."""

    def test_error_survives_payload(self):
        original = SyncStateError(
            SyncStateErrorCode.WRITE_REJECTED,
            "must be positive",
            slot_name="counter",
            namespace="state",
            cause=ValueError("must be positive"),
        )

        payload = SyncStateErrorPayload.load(
            SyncStateErrorPayload.from_error(original).dump()
        )
        restored = payload.to_error()

        assert restored.code is SyncStateErrorCode.WRITE_REJECTED
        assert restored.message == "must be positive"
        assert restored.slot_name == "counter"
        assert restored.namespace == "state"
        assert isinstance(restored.cause, RemoteCauseError)
        assert str(restored.cause) == "must be positive"

    def test_error_without_cause(self):
        original = SyncStateError(SyncStateErrorCode.WRITE_FORBIDDEN, "forbidden")

        restored = SyncStateErrorPayload.from_error(original).to_error()

        assert restored.cause is None
        assert restored.slot_name is None

    def test_unknown_code_is_rejected(self):
        payload = SyncStateErrorPayload(code="NOT_A_CODE", message="bad")

        with pytest.raises(ValueError):
            payload.to_error()

    def test_invoke_error_payload(self):
        payload = InvokeErrorPayload.load(
            InvokeErrorPayload(error_type="KeyError", message="'x'").dump()
        )

        assert payload.error_type == "KeyError"
        assert payload.message == "'x'"
