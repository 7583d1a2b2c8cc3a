"""Tests for the retry policy and error categories."""

import pytest

from peercoin_rpc.core.errors import (
    ConnectionFailure,
    ConnectionLost,
    HTTPStatusFailure,
    InvalidResponse,
    NodeRPCError,
    RequestNotSent,
    RequestTimeout,
    TransportError,
)
from peercoin_rpc.core.models import ExecutionState
from peercoin_rpc.rpc.policy import ErrorCategory, RetryPolicy, categorize


@pytest.mark.parametrize(
    ("error", "category"),
    [
        (ConnectionFailure("refused"), ErrorCategory.TRANSIENT),
        (ConnectionLost("reset"), ErrorCategory.TRANSIENT),
        (RequestTimeout("timeout"), ErrorCategory.TRANSIENT),
        (InvalidResponse("empty", empty=True), ErrorCategory.TRANSIENT),
        (HTTPStatusFailure(502), ErrorCategory.TRANSIENT),
        (HTTPStatusFailure(500), ErrorCategory.TRANSIENT),
        (HTTPStatusFailure(503), ErrorCategory.NODE_BUSY),
        (HTTPStatusFailure(429), ErrorCategory.NODE_BUSY),
        (NodeRPCError(-28, "Loading wallet..."), ErrorCategory.NODE_BUSY),
        (NodeRPCError(-32601, "Method not found"), ErrorCategory.MALFORMED_REQUEST),
        (NodeRPCError(-8, "Invalid parameter"), ErrorCategory.MALFORMED_REQUEST),
        (HTTPStatusFailure(401), ErrorCategory.MALFORMED_REQUEST),
        (RequestNotSent("unsupported protocol"), ErrorCategory.MALFORMED_REQUEST),
        (HTTPStatusFailure(500, "<html>boom</html>"), ErrorCategory.UNRECOGNIZED),
        (NodeRPCError(-26, "insufficient priority"), ErrorCategory.UNRECOGNIZED),
        (InvalidResponse("garbage"), ErrorCategory.UNRECOGNIZED),
        (TransportError("mystery"), ErrorCategory.UNRECOGNIZED),
    ],
)
def test_categorize(error, category):
    assert categorize(error) is category


class TestShouldRetry:
    """Retry decisions for pure and mutating methods."""

    policy = RetryPolicy()

    @pytest.mark.parametrize("state", [ExecutionState.EXECUTED, ExecutionState.UNKNOWN])
    def test_mutating_never_retried_unless_not_executed(self, state):
        assert self.policy.should_retry(False, state, ConnectionFailure("refused")) is False

    def test_mutating_retried_when_not_executed_and_transient(self):
        assert self.policy.should_retry(False, ExecutionState.NOT_EXECUTED, RequestTimeout("timeout")) is True

    def test_mutating_not_retried_on_malformed_request(self):
        error = NodeRPCError(-8, "Invalid parameter")

        assert self.policy.should_retry(False, ExecutionState.NOT_EXECUTED, error) is False

    @pytest.mark.parametrize("state", list(ExecutionState))
    def test_pure_ignores_execution_state_for_transient_errors(self, state):
        assert self.policy.should_retry(True, state, ConnectionFailure("refused")) is True

    def test_pure_not_retried_on_malformed_request(self):
        error = NodeRPCError(-32601, "Method not found")

        assert self.policy.should_retry(True, ExecutionState.NOT_EXECUTED, error) is False

    def test_unrecognized_errors_fail_closed(self):
        assert self.policy.should_retry(True, ExecutionState.UNKNOWN, TransportError("mystery")) is False

    def test_node_busy_is_retried(self):
        assert self.policy.should_retry(True, ExecutionState.NOT_EXECUTED, HTTPStatusFailure(503)) is True
