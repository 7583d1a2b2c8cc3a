"""Core functionality including models, error taxonomy, and the method purity table."""

from peercoin_rpc.core.errors import (
    ConnectionFailure,
    ConnectionLost,
    DecodingError,
    HTTPStatusFailure,
    InvalidResponse,
    NodeRPCError,
    PeercoinRPCBaseError,
    PeercoinRPCError,
    RequestNotSent,
    RequestTimeout,
    TransportError,
)
from peercoin_rpc.core.methods import MethodTable
from peercoin_rpc.core.models import CallAttempt, CallContext, ExecutionState, MethodPurity

__all__ = [
    "CallAttempt",
    "CallContext",
    "ConnectionFailure",
    "ConnectionLost",
    "DecodingError",
    "ExecutionState",
    "HTTPStatusFailure",
    "InvalidResponse",
    "MethodPurity",
    "MethodTable",
    "NodeRPCError",
    "PeercoinRPCBaseError",
    "PeercoinRPCError",
    "RequestNotSent",
    "RequestTimeout",
    "TransportError",
]
