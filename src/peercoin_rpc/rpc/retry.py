"""Bounded retry with a fixed delay, guarded against double execution."""

import logging
import time
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from peercoin_rpc.core.errors import DecodingError, PeercoinRPCError, TransportError
from peercoin_rpc.core.methods import MethodTable
from peercoin_rpc.core.models import CallAttempt, CallContext, ExecutionState
from peercoin_rpc.rpc.classifier import EffectClassifier
from peercoin_rpc.rpc.decode import decode
from peercoin_rpc.rpc.policy import RetryPolicy
from peercoin_rpc.rpc.transport import Transport

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_ATTEMPTS = 5
DELAY_BETWEEN_ATTEMPTS = 5.0


class RetryConfig:
    """
    Configuration for retry behavior.

    Parameters
    ----------
    max_attempts : int
        Maximum number of transport attempts per call, including the first
    delay : float
        Constant delay in seconds between attempts

    """

    def __init__(self, max_attempts: int = MAX_ATTEMPTS, delay: float = DELAY_BETWEEN_ATTEMPTS) -> None:
        if max_attempts < 1:
            msg = f"max_attempts must be at least 1, got {max_attempts}"
            raise ValueError(msg)
        if delay < 0:
            msg = f"delay must not be negative, got {delay}"
            raise ValueError(msg)
        self.max_attempts = max_attempts
        self.delay = delay

    def get_delay(self, attempt: int) -> float:
        """
        Delay to wait after a failed attempt.

        Parameters
        ----------
        attempt : int
            Failed attempt number (1-indexed)

        Returns
        -------
        float
            Delay in seconds; the same for every attempt

        """
        return self.delay

    def __repr__(self) -> str:
        return f"RetryConfig(max_attempts={self.max_attempts}, delay={self.delay})"


class RetryExecutor:
    """
    Runs RPC calls with bounded retry and execution-state tracking.

    After every failed attempt the effect classifier decides whether the
    call's side effect already took hold and the retry policy decides whether
    another attempt is allowed. A call that fails terminally raises
    PeercoinRPCError carrying the execution state of its last attempt.

    The executor keeps no per-call state, so one instance may serve
    concurrent calls.

    Parameters
    ----------
    transport : Transport
        Sends one RPC request and returns the raw result
    methods : MethodTable
        Purity of known methods
    classifier : EffectClassifier | None
        Execution-state classifier. Uses the default rule table if None.
    policy : RetryPolicy | None
        Retry policy. Uses the default policy if None.
    config : RetryConfig | None
        Attempt limit and delay. Uses defaults (5 attempts, 5s) if None.
    sleep : Callable[[float], None]
        Function used to wait between attempts

    """

    def __init__(
        self,
        transport: Transport,
        methods: MethodTable,
        classifier: EffectClassifier | None = None,
        policy: RetryPolicy | None = None,
        config: RetryConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.transport = transport
        self.methods = methods
        self.classifier = classifier or EffectClassifier()
        self.policy = policy or RetryPolicy()
        self.config = config or RetryConfig()
        self.sleep = sleep

    def execute(self, method: str, params: Sequence[Any] = (), *, max_attempts: int | None = None) -> Any:
        """
        Invoke an RPC method, retrying while it is safe to do so.

        Parameters
        ----------
        method : str
            RPC method name
        params : Sequence[Any]
            Positional parameters
        max_attempts : int | None
            Override of the configured attempt limit for this call

        Returns
        -------
        Any
            Raw result returned by the transport

        Raises
        ------
        PeercoinRPCError
            If attempts are exhausted or the failure is not retryable

        """
        result, _ = self._run(method, params, max_attempts)
        return result

    def _run(self, method: str, params: Sequence[Any], max_attempts: int | None) -> tuple[Any, CallAttempt]:
        """Retry loop; returns the raw result and the attempt that produced it."""
        params = list(params)
        method_is_pure = self.methods.is_pure(method)
        limit = self.config.max_attempts if max_attempts is None else max_attempts
        if limit < 1:
            msg = f"max_attempts must be at least 1, got {limit}"
            raise ValueError(msg)

        for attempt_n in range(1, limit + 1):
            attempt = CallAttempt(method=method, params=params, attempt=attempt_n, max_attempts=limit)
            try:
                result = self.transport.invoke(method, params)
            except TransportError as error:
                executed = self.classifier.classify(method, error)
                # An executed call is never repeated, pure or not
                had_effects = executed is ExecutionState.EXECUTED or (
                    not method_is_pure and executed is not ExecutionState.NOT_EXECUTED
                )
                should_retry = not had_effects and self.policy.should_retry(method_is_pure, executed, error)

                logger.debug(
                    "Command failed: %s (method=%s pure=%s params=%r executed=%s attempt=%d/%d "
                    "had_effects=%s should_retry=%s)",
                    error,
                    method,
                    method_is_pure,
                    params,
                    executed.value,
                    attempt_n,
                    limit,
                    had_effects,
                    should_retry,
                )

                if attempt.is_last:
                    logger.warning("RPC call %s failed after %d attempts", method, attempt_n)
                    raise self._terminal_error(error, executed, attempt, method_is_pure) from error

                if not should_retry:
                    logger.debug(
                        "Cannot retry %s (pure=%s executed=%s attempt=%d/%d)",
                        method,
                        method_is_pure,
                        executed.value,
                        attempt_n,
                        limit,
                    )
                    raise self._terminal_error(error, executed, attempt, method_is_pure) from error

                delay = self.config.get_delay(attempt_n)
                logger.debug("Retrying %s in %.1fs", method, delay)
                self.sleep(delay)
            else:
                if attempt_n > 1:
                    logger.info("RPC call %s succeeded on attempt %d/%d", method, attempt_n, limit)
                return result, attempt

        # Should never reach here
        msg = f"Unexpected retry exhaustion for {method}"
        raise RuntimeError(msg)

    def execute_and_decode(
        self,
        shape: type[T] | Any,
        method: str,
        params: Sequence[Any] = (),
        *,
        max_attempts: int | None = None,
    ) -> T:
        """
        Invoke an RPC method with retry, then validate its result.

        A decoding failure is never retried: the node already executed the
        call successfully. It is raised with the call context attached.

        Parameters
        ----------
        shape : type[T] | Any
            Expected result shape
        method : str
            RPC method name
        params : Sequence[Any]
            Positional parameters
        max_attempts : int | None
            Override of the configured attempt limit for this call

        Returns
        -------
        T
            Validated result

        Raises
        ------
        PeercoinRPCError
            If the call fails terminally
        DecodingError
            If the result does not match the expected shape

        """
        result, attempt = self._run(method, params, max_attempts)
        try:
            return decode(shape, result)
        except DecodingError as e:
            logger.debug("Decoding result of %s failed after successful execution", method)
            context = CallContext.from_attempt(attempt, method_is_pure=self.methods.is_pure(method))
            raise e.with_context(context) from e

    @staticmethod
    def _terminal_error(
        error: TransportError,
        executed: ExecutionState,
        attempt: CallAttempt,
        method_is_pure: bool,
    ) -> PeercoinRPCError:
        context = CallContext.from_attempt(attempt, method_is_pure=method_is_pure)
        return PeercoinRPCError(error, executed, context)
