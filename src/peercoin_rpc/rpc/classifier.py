"""Effect classification: decide whether a failed call's side effect took hold."""

from collections.abc import Callable, Sequence
from typing import NamedTuple

from peercoin_rpc.core.errors import (
    ConnectionFailure,
    HTTPStatusFailure,
    InvalidResponse,
    NodeRPCError,
    RequestNotSent,
    RequestTimeout,
    TransportError,
)
from peercoin_rpc.core.models import ExecutionState

# Node error codes (bitcoind / peercoind rpc/protocol.h)
RPC_PARSE_ERROR = -32700
RPC_INVALID_REQUEST = -32600
RPC_METHOD_NOT_FOUND = -32601
RPC_INVALID_PARAMS = -32602
RPC_MISC_ERROR = -1
RPC_TYPE_ERROR = -3
RPC_INVALID_ADDRESS_OR_KEY = -5
RPC_WALLET_INSUFFICIENT_FUNDS = -6
RPC_INVALID_PARAMETER = -8
RPC_WALLET_UNLOCK_NEEDED = -13
RPC_WALLET_PASSPHRASE_INCORRECT = -14
RPC_DESERIALIZATION_ERROR = -22
RPC_VERIFY_ERROR = -25
RPC_VERIFY_REJECTED = -26
RPC_VERIFY_ALREADY_IN_CHAIN = -27
RPC_IN_WARMUP = -28

# Codes returned when the node rejected the request before acting on it.
# RPC_MISC_ERROR is absent: handlers raise it after side effects too.
REQUEST_REJECTED_CODES = frozenset(
    {
        RPC_PARSE_ERROR,
        RPC_INVALID_REQUEST,
        RPC_METHOD_NOT_FOUND,
        RPC_INVALID_PARAMS,
        RPC_TYPE_ERROR,
        RPC_INVALID_ADDRESS_OR_KEY,
        RPC_WALLET_INSUFFICIENT_FUNDS,
        RPC_INVALID_PARAMETER,
        RPC_WALLET_UNLOCK_NEEDED,
        RPC_WALLET_PASSPHRASE_INCORRECT,
        RPC_DESERIALIZATION_ERROR,
        RPC_IN_WARMUP,
    }
)

ALREADY_KNOWN_MARKERS = (
    "txn-already-known",
    "txn-already-in-mempool",
    "already have transaction",
)


class ClassificationRule(NamedTuple):
    """A named (predicate, verdict) pair; the first matching rule wins."""

    name: str
    predicate: Callable[[str, TransportError], bool]
    verdict: ExecutionState


def _message(error: TransportError) -> str:
    return (error.message or "").lower()


def _already_in_chain(method: str, error: TransportError) -> bool:
    return isinstance(error, NodeRPCError) and (
        error.code == RPC_VERIFY_ALREADY_IN_CHAIN or "already in block chain" in _message(error)
    )


def _already_known(method: str, error: TransportError) -> bool:
    return isinstance(error, NodeRPCError) and any(marker in _message(error) for marker in ALREADY_KNOWN_MARKERS)


def _verify_rejected(method: str, error: TransportError) -> bool:
    return isinstance(error, NodeRPCError) and error.code in (RPC_VERIFY_REJECTED, RPC_VERIFY_ERROR)


def _node_refused_request(method: str, error: TransportError) -> bool:
    return isinstance(error, NodeRPCError) and error.code in REQUEST_REJECTED_CODES


def _connection_failed(method: str, error: TransportError) -> bool:
    return isinstance(error, (ConnectionFailure, RequestNotSent))


def _request_timeout(method: str, error: TransportError) -> bool:
    return isinstance(error, RequestTimeout)


def _empty_response(method: str, error: TransportError) -> bool:
    return isinstance(error, InvalidResponse) and error.empty


def _service_unavailable(method: str, error: TransportError) -> bool:
    return isinstance(error, HTTPStatusFailure) and error.http_status == 503


DEFAULT_RULES: tuple[ClassificationRule, ...] = (
    ClassificationRule("already_in_chain", _already_in_chain, ExecutionState.EXECUTED),
    ClassificationRule("already_known", _already_known, ExecutionState.EXECUTED),
    ClassificationRule("verify_rejected", _verify_rejected, ExecutionState.NOT_EXECUTED),
    ClassificationRule("node_refused_request", _node_refused_request, ExecutionState.NOT_EXECUTED),
    ClassificationRule("connection_failed", _connection_failed, ExecutionState.NOT_EXECUTED),
    ClassificationRule("request_timeout", _request_timeout, ExecutionState.NOT_EXECUTED),
    ClassificationRule("empty_response", _empty_response, ExecutionState.NOT_EXECUTED),
    ClassificationRule("service_unavailable", _service_unavailable, ExecutionState.NOT_EXECUTED),
)


class EffectClassifier:
    """
    Decides whether a failed RPC call was nevertheless executed by the node.

    Rules are evaluated in order and the first match decides. Errors that
    match no rule are classified as unknown, which the retry policy treats
    as "presume executed" for mutating methods.

    Parameters
    ----------
    rules : Sequence[ClassificationRule] | None
        Ordered rule table. Uses DEFAULT_RULES if None.

    """

    def __init__(self, rules: Sequence[ClassificationRule] | None = None) -> None:
        self.rules = tuple(DEFAULT_RULES if rules is None else rules)

    def with_rules(self, *rules: ClassificationRule) -> "EffectClassifier":
        """
        Return a classifier that checks the given rules before the current ones.

        Parameters
        ----------
        *rules : ClassificationRule
            Higher-priority rules

        Returns
        -------
        EffectClassifier
            New classifier instance

        """
        return EffectClassifier((*rules, *self.rules))

    def match(self, method: str, error: TransportError) -> ClassificationRule | None:
        for rule in self.rules:
            if rule.predicate(method, error):
                return rule
        return None

    def classify(self, method: str, error: TransportError) -> ExecutionState:
        """
        Classify the execution state of one failed attempt.

        Parameters
        ----------
        method : str
            RPC method name
        error : TransportError
            Error raised by the transport for this attempt

        Returns
        -------
        ExecutionState
            Verdict of the first matching rule, or UNKNOWN

        """
        rule = self.match(method, error)
        return rule.verdict if rule is not None else ExecutionState.UNKNOWN
