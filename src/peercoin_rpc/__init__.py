"""Peercoin node RPC client with side-effect aware retries."""

from peercoin_rpc.client import (
    FeeEstimateMode,
    FundRawTransactionOptions,
    OutPoint,
    PeercoinRPC,
    SendToAddressOptions,
    TxInput,
)
from peercoin_rpc.config import ClientConfig, ClientOptions
from peercoin_rpc.core import (
    DecodingError,
    ExecutionState,
    MethodPurity,
    MethodTable,
    PeercoinRPCError,
    TransportError,
)
from peercoin_rpc.rpc import EffectClassifier, RetryConfig, RetryExecutor, RetryPolicy

__all__ = [
    "ClientConfig",
    "ClientOptions",
    "DecodingError",
    "EffectClassifier",
    "ExecutionState",
    "FeeEstimateMode",
    "FundRawTransactionOptions",
    "MethodPurity",
    "MethodTable",
    "OutPoint",
    "PeercoinRPC",
    "PeercoinRPCError",
    "RetryConfig",
    "RetryExecutor",
    "RetryPolicy",
    "SendToAddressOptions",
    "TransportError",
    "TxInput",
]
