"""Error taxonomy for transport failures, decoding failures, and terminal RPC errors."""

from typing import Any

from peercoin_rpc.core.models import CallContext, ExecutionState


class PeercoinRPCBaseError(Exception):
    """Base exception for all errors raised by this package."""


class TransportError(PeercoinRPCBaseError):
    """
    Failure at the network or protocol layer for one RPC request.

    Parameters
    ----------
    message : str
        Human-readable error description
    code : int | None
        Node-specific JSON-RPC error code, when the node reported one
    http_status : int | None
        HTTP status of the response, when one was received
    cause : BaseException | None
        Underlying library exception

    """

    def __init__(
        self,
        message: str,
        code: int | None = None,
        http_status: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.http_status = http_status
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        details = []
        if self.code is not None:
            details.append(f"code={self.code}")
        if self.http_status is not None:
            details.append(f"status={self.http_status}")
        if self.cause is not None:
            details.append(f"cause={self.cause!r}")
        return f"{self.message} ({', '.join(details)})" if details else self.message


class ConnectionFailure(TransportError):
    """The connection could not be established; the request never reached the node."""


class ConnectionLost(TransportError):
    """The connection broke after the request may already have been delivered."""


class RequestNotSent(TransportError):
    """The request could not be built or sent (bad URL scheme, proxy or protocol misuse)."""


class RequestTimeout(TransportError):
    """No response arrived within the configured timeout."""

    def __init__(self, message: str, phase: str = "read", cause: BaseException | None = None) -> None:
        self.phase = phase
        super().__init__(message, cause=cause)


class HTTPStatusFailure(TransportError):
    """Non-2xx HTTP response without a JSON-RPC error body."""

    def __init__(self, http_status: int, body: str = "") -> None:
        self.body = body
        super().__init__(f"RPC HTTP error {http_status}", http_status=http_status)


class NodeRPCError(TransportError):
    """The node answered with a JSON-RPC error object."""

    def __init__(self, code: int | None, message: str, http_status: int | None = None) -> None:
        super().__init__(message, code=code, http_status=http_status)


class InvalidResponse(TransportError):
    """The response body is not a valid JSON-RPC envelope."""

    def __init__(
        self,
        message: str,
        *,
        empty: bool = False,
        http_status: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.empty = empty
        super().__init__(message, http_status=http_status, cause=cause)


class DecodingError(PeercoinRPCBaseError):
    """
    A successful RPC result did not match the expected shape.

    The remote call succeeded, so the error is always tagged as executed.

    Parameters
    ----------
    message : str
        Error description
    raw_result : Any
        Result returned by the node
    errors : list[dict[str, Any]] | None
        Validation error details
    context : CallContext | None
        Method, parameters, purity, and attempt counts of the call, once known

    """

    execution_state = ExecutionState.EXECUTED

    def __init__(
        self,
        message: str,
        raw_result: Any = None,
        errors: list[dict[str, Any]] | None = None,
        context: CallContext | None = None,
    ) -> None:
        self.message = message
        self.raw_result = raw_result
        self.errors = errors or []
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context is None:
            return self.message
        return (
            f"RPC {self.context.method} succeeded on attempt "
            f"{self.context.attempts}/{self.context.max_attempts} but decoding failed: {self.message}. "
            f"Execution state: {self.execution_state.value} ({self.execution_state.describe()})"
        )

    def with_context(self, context: CallContext) -> "DecodingError":
        """Return a copy of this error carrying the context of the call that produced it."""
        return DecodingError(self.message, raw_result=self.raw_result, errors=self.errors, context=context)

    @property
    def executed(self) -> bool:
        return True


class PeercoinRPCError(PeercoinRPCBaseError):
    """
    Terminal failure of a retried RPC call.

    Raised when attempts are exhausted or the retry policy forbids another
    attempt. Carries the last error, the execution-state verdict for the last
    attempt, and the call context needed to decide whether node state must be
    reconciled before resubmitting.

    Parameters
    ----------
    error : TransportError
        Error raised by the last attempt
    execution_state : ExecutionState
        Classifier verdict for the last attempt
    context : CallContext
        Method, parameters, purity, and attempt counts

    """

    def __init__(self, error: TransportError, execution_state: ExecutionState, context: CallContext) -> None:
        self.error = error
        self.execution_state = execution_state
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        kind = "read-only" if self.context.method_is_pure else "mutating"
        return (
            f"RPC {self.context.method} ({kind}) failed after "
            f"{self.context.attempts}/{self.context.max_attempts} attempts: {self.error}. "
            f"Execution state: {self.execution_state.value} ({self.execution_state.describe()})"
        )

    @property
    def executed(self) -> bool | None:
        return self.execution_state.executed

    @property
    def needs_reconciliation(self) -> bool:
        """Whether a mutating call may have been applied and node state should be checked."""
        return not self.context.method_is_pure and self.execution_state is not ExecutionState.NOT_EXECUTED
