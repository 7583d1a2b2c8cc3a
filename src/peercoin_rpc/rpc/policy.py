"""Retry policy deciding whether a failed attempt may be repeated."""

from enum import StrEnum

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
from peercoin_rpc.rpc.classifier import (
    RPC_DESERIALIZATION_ERROR,
    RPC_IN_WARMUP,
    RPC_INVALID_ADDRESS_OR_KEY,
    RPC_INVALID_PARAMETER,
    RPC_INVALID_PARAMS,
    RPC_INVALID_REQUEST,
    RPC_METHOD_NOT_FOUND,
    RPC_MISC_ERROR,
    RPC_PARSE_ERROR,
    RPC_TYPE_ERROR,
)


class ErrorCategory(StrEnum):
    """Retry-relevant category of a transport error."""

    TRANSIENT = "transient"
    NODE_BUSY = "node_busy"
    MALFORMED_REQUEST = "malformed_request"
    UNRECOGNIZED = "unrecognized"


MALFORMED_REQUEST_CODES = frozenset(
    {
        RPC_PARSE_ERROR,
        RPC_INVALID_REQUEST,
        RPC_METHOD_NOT_FOUND,
        RPC_INVALID_PARAMS,
        RPC_MISC_ERROR,
        RPC_TYPE_ERROR,
        RPC_INVALID_ADDRESS_OR_KEY,
        RPC_INVALID_PARAMETER,
        RPC_DESERIALIZATION_ERROR,
    }
)

TRANSIENT_HTTP_STATUSES = frozenset({502, 504})
BUSY_HTTP_STATUSES = frozenset({429, 503})
MALFORMED_HTTP_STATUSES = frozenset({400, 401, 403, 404})

RETRYABLE_CATEGORIES = frozenset({ErrorCategory.TRANSIENT, ErrorCategory.NODE_BUSY})


def categorize(error: TransportError) -> ErrorCategory:
    """
    Map a transport error to its retry category.

    Parameters
    ----------
    error : TransportError
        Error raised by the transport

    Returns
    -------
    ErrorCategory
        Category; UNRECOGNIZED when no known pattern applies

    """
    if isinstance(error, RequestNotSent):
        return ErrorCategory.MALFORMED_REQUEST
    if isinstance(error, (ConnectionFailure, ConnectionLost, RequestTimeout)):
        return ErrorCategory.TRANSIENT
    if isinstance(error, InvalidResponse):
        return ErrorCategory.TRANSIENT if error.empty else ErrorCategory.UNRECOGNIZED
    if isinstance(error, NodeRPCError):
        if error.code == RPC_IN_WARMUP:
            return ErrorCategory.NODE_BUSY
        if error.code in MALFORMED_REQUEST_CODES:
            return ErrorCategory.MALFORMED_REQUEST
        return ErrorCategory.UNRECOGNIZED
    if isinstance(error, HTTPStatusFailure):
        if error.http_status in BUSY_HTTP_STATUSES:
            return ErrorCategory.NODE_BUSY
        if error.http_status in TRANSIENT_HTTP_STATUSES:
            return ErrorCategory.TRANSIENT
        if error.http_status == 500 and not error.body.strip():
            return ErrorCategory.TRANSIENT
        if error.http_status in MALFORMED_HTTP_STATUSES:
            return ErrorCategory.MALFORMED_REQUEST
    return ErrorCategory.UNRECOGNIZED


class RetryPolicy:
    """Stateless retry decision, evaluated fresh for every failed attempt."""

    def should_retry(self, method_is_pure: bool, execution_state: ExecutionState, error: TransportError) -> bool:
        """
        Decide whether another attempt is permitted.

        Parameters
        ----------
        method_is_pure : bool
            Whether the method is configured as read-only
        execution_state : ExecutionState
            Classifier verdict for the failed attempt
        error : TransportError
            Error raised by the failed attempt

        Returns
        -------
        bool
            True if the call may be attempted again

        """
        # A mutating call may have landed unless the node clearly never ran it
        if not method_is_pure and execution_state is not ExecutionState.NOT_EXECUTED:
            return False
        return categorize(error) in RETRYABLE_CATEGORIES
