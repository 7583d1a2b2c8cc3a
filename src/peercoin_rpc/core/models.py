"""Data models for RPC calls, attempts, and retry diagnostics."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class MethodPurity(StrEnum):
    """Whether a remote method can mutate node or wallet state."""

    PURE = "pure"
    MUTATING = "mutating"


class ExecutionState(StrEnum):
    """Verdict on whether a failed call's side effect took hold on the node."""

    EXECUTED = "executed"
    NOT_EXECUTED = "not_executed"
    UNKNOWN = "unknown"

    @property
    def executed(self) -> bool | None:
        """
        Tri-state boolean form of the verdict.

        Returns
        -------
        bool | None
            True if executed, False if not executed, None if unknown

        """
        if self is ExecutionState.EXECUTED:
            return True
        if self is ExecutionState.NOT_EXECUTED:
            return False
        return None

    def describe(self) -> str:
        """Plain-words description used in terminal error messages."""
        if self is ExecutionState.EXECUTED:
            return "the call was executed on the node"
        if self is ExecutionState.NOT_EXECUTED:
            return "the call was NOT executed on the node"
        return "the call may or may not have been executed on the node"


class CallAttempt(BaseModel):
    """
    One invocation attempt of a remote method.

    Attributes
    ----------
    method : str
        RPC method name (e.g., 'sendrawtransaction')
    params : list[Any]
        Positional method parameters
    attempt : int
        Sequential attempt number, starting at 1
    max_attempts : int
        Maximum attempts allowed for this call

    """

    model_config = ConfigDict(frozen=True)

    method: str
    params: list[Any] = Field(default_factory=list)
    attempt: int = Field(ge=1)
    max_attempts: int = Field(ge=1)

    @model_validator(mode="after")
    def _check_attempt_bound(self) -> "CallAttempt":
        if self.attempt > self.max_attempts:
            msg = f"attempt {self.attempt} exceeds max_attempts {self.max_attempts}"
            raise ValueError(msg)
        return self

    @property
    def is_last(self) -> bool:
        """Whether no further attempt is allowed after this one."""
        return self.attempt >= self.max_attempts


class CallContext(BaseModel):
    """
    Diagnostic bundle attached to a terminal RPC failure.

    Attributes
    ----------
    method : str
        RPC method name
    params : list[Any]
        Parameters the call was made with
    method_is_pure : bool
        Whether the method is configured as read-only
    attempts : int
        Number of transport attempts made
    max_attempts : int
        Maximum attempts that were allowed

    """

    model_config = ConfigDict(frozen=True)

    method: str
    params: list[Any] = Field(default_factory=list)
    method_is_pure: bool
    attempts: int
    max_attempts: int

    @classmethod
    def from_attempt(cls, attempt: CallAttempt, *, method_is_pure: bool) -> "CallContext":
        return cls(
            method=attempt.method,
            params=attempt.params,
            method_is_pure=method_is_pure,
            attempts=attempt.attempt,
            max_attempts=attempt.max_attempts,
        )
