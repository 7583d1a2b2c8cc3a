"""Tests for Pydantic data models and terminal errors."""

import pytest
from pydantic import ValidationError

from peercoin_rpc.core.errors import (
    ConnectionFailure,
    HTTPStatusFailure,
    NodeRPCError,
    PeercoinRPCError,
    RequestTimeout,
)
from peercoin_rpc.core.models import CallAttempt, CallContext, ExecutionState, MethodPurity


def test_call_attempt_model():
    """Test CallAttempt model."""
    attempt = CallAttempt(method="sendrawtransaction", params=["0100"], attempt=2, max_attempts=5)

    assert attempt.method == "sendrawtransaction"
    assert attempt.params == ["0100"]
    assert attempt.is_last is False
    assert CallAttempt(method="getinfo", attempt=5, max_attempts=5).is_last is True


def test_call_attempt_is_immutable():
    attempt = CallAttempt(method="getinfo", attempt=1, max_attempts=5)

    with pytest.raises(ValidationError):
        attempt.attempt = 2


@pytest.mark.parametrize(("attempt", "max_attempts"), [(0, 5), (6, 5), (1, 0)])
def test_call_attempt_bounds(attempt, max_attempts):
    with pytest.raises(ValidationError):
        CallAttempt(method="getinfo", attempt=attempt, max_attempts=max_attempts)


def test_call_context_from_attempt():
    attempt = CallAttempt(method="sendtoaddress", params=["PAddr", "1"], attempt=3, max_attempts=5)

    context = CallContext.from_attempt(attempt, method_is_pure=False)

    assert context.method == "sendtoaddress"
    assert context.params == ["PAddr", "1"]
    assert context.attempts == 3
    assert context.max_attempts == 5
    assert context.method_is_pure is False


@pytest.mark.parametrize(
    ("state", "executed"),
    [
        (ExecutionState.EXECUTED, True),
        (ExecutionState.NOT_EXECUTED, False),
        (ExecutionState.UNKNOWN, None),
    ],
)
def test_execution_state_tri_state(state, executed):
    assert state.executed is executed


def test_enum_values():
    """Test enum values."""
    assert ExecutionState.EXECUTED.value == "executed"
    assert ExecutionState.NOT_EXECUTED.value == "not_executed"
    assert ExecutionState.UNKNOWN.value == "unknown"
    assert MethodPurity.PURE.value == "pure"
    assert MethodPurity.MUTATING.value == "mutating"


def test_transport_error_str_includes_details():
    assert str(NodeRPCError(-27, "transaction already in block chain", http_status=500)) == (
        "transaction already in block chain (code=-27, status=500)"
    )
    assert str(HTTPStatusFailure(503)) == "RPC HTTP error 503 (status=503)"
    assert str(ConnectionFailure("Connection refused")) == "Connection refused"
    assert RequestTimeout("timed out", phase="connect").phase == "connect"


def test_terminal_error_reconciliation_flag():
    context = CallContext(method="getbalance", method_is_pure=True, attempts=5, max_attempts=5)
    error = PeercoinRPCError(ConnectionFailure("refused"), ExecutionState.UNKNOWN, context)

    assert error.needs_reconciliation is False
    assert "read-only" in str(error)
    assert "may or may not have been executed" in str(error)
