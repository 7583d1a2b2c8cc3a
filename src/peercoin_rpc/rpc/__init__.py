"""RPC layer with transport, effect classification, retry policy, and decoding."""

from peercoin_rpc.rpc.classifier import ClassificationRule, EffectClassifier
from peercoin_rpc.rpc.decode import decode
from peercoin_rpc.rpc.policy import ErrorCategory, RetryPolicy, categorize
from peercoin_rpc.rpc.retry import RetryConfig, RetryExecutor
from peercoin_rpc.rpc.transport import JsonRpcTransport, Transport

__all__ = [
    "ClassificationRule",
    "EffectClassifier",
    "ErrorCategory",
    "JsonRpcTransport",
    "RetryConfig",
    "RetryExecutor",
    "RetryPolicy",
    "Transport",
    "categorize",
    "decode",
]
