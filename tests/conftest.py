"""Pytest configuration for peercoin-rpc tests."""

from typing import Any

import pytest

from peercoin_rpc.core.methods import MethodTable
from peercoin_rpc.data import load_default_method_table


class ScriptedTransport:
    """Transport that replays a list of results and exceptions, recording every call."""

    def __init__(self, outcomes: list[Any]) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[tuple[str, list[Any]]] = []

    def invoke(self, method: str, params: list[Any]) -> Any:
        self.calls.append((method, list(params)))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


class RecordingSleep:
    """Stand-in for time.sleep that records requested delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def sleeper() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def method_table() -> MethodTable:
    return load_default_method_table()
