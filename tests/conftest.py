"""Shared test fixtures for all test modules."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest


@dataclass
class ProbeRecorder:
    """Probe that counts calls and threads an integer state.

    Each call returns (result_fn(state), state + 1) and appends an event
    to the shared timeline so tests can check call and sleep ordering.
    """

    timeline: list[tuple[str, Any]] = field(default_factory=list)
    states: list[int] = field(default_factory=list)
    result_fn: Callable[[int], Any] = lambda state: state
    fail_on_call: int | None = None

    @property
    def calls(self) -> int:
        return len(self.states)

    def __call__(self, state: int) -> tuple[Any, int]:
        self.states.append(state)
        self.timeline.append(("call", state))
        if self.fail_on_call is not None and self.calls == self.fail_on_call:
            raise RuntimeError(f"probe failed on call {self.calls}")
        return self.result_fn(state), state + 1


@pytest.fixture
def timeline() -> list[tuple[str, Any]]:
    """Ordered record of probe calls and sleeps."""
    return []


@pytest.fixture
def fake_sleep(
    monkeypatch: pytest.MonkeyPatch, timeline: list[tuple[str, Any]]
) -> list[tuple[str, Any]]:
    """Replace time.sleep with a recorder that does not block."""

    def _sleep(seconds: float) -> None:
        timeline.append(("sleep", seconds))

    monkeypatch.setattr(time, "sleep", _sleep)
    return timeline


@pytest.fixture
def probe(timeline: list[tuple[str, Any]]) -> ProbeRecorder:
    """Recording probe sharing the timeline with fake_sleep."""
    return ProbeRecorder(timeline=timeline)
