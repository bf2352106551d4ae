"""BDD step definitions for sampling and diffing features."""

import operator
import time
from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from diagkit.core.diff import sliding_window
from diagkit.core.sampler import time_fold, time_map
from tests.conftest import ProbeRecorder


@dataclass
class SamplingScenarioContext:
    """Mutable state shared between the steps of one scenario."""

    probe: ProbeRecorder = field(default_factory=ProbeRecorder)
    state: int = 0
    result: Any = None
    error: Exception | None = None
    sleeps: list[float] = field(default_factory=list)
    first: list[tuple] = field(default_factory=list)
    last: list[tuple] = field(default_factory=list)


@pytest.fixture
def ctx(monkeypatch: pytest.MonkeyPatch) -> SamplingScenarioContext:
    """Fresh scenario context with a non-blocking sleep."""
    context = SamplingScenarioContext()
    monkeypatch.setattr(time, "sleep", context.sleeps.append)
    return context


# === Sampling steps ===
@given(parsers.parse("a counting probe starting at state {state:d}"))
def step_counting_probe(ctx: SamplingScenarioContext, state: int) -> None:
    ctx.state = state


@given(parsers.parse("the probe fails on call {call:d}"))
def step_probe_fails(ctx: SamplingScenarioContext, call: int) -> None:
    ctx.probe.fail_on_call = call


@when(parsers.parse("I run time_map {n:d} times every {interval:d} ms"))
def step_run_time_map(ctx: SamplingScenarioContext, n: int, interval: int) -> None:
    try:
        ctx.result = time_map(n, interval, ctx.probe, ctx.state, lambda r: r)
    except RuntimeError as e:
        ctx.error = e


@when(
    parsers.parse(
        "I fold the results of {n:d} samples every {interval:d} ms with addition"
    )
)
def step_run_time_fold(ctx: SamplingScenarioContext, n: int, interval: int) -> None:
    ctx.result = time_fold(n, interval, ctx.probe, ctx.state, operator.add, 0)


@then(parsers.parse("the probe was called {calls:d} times"))
def step_probe_calls(ctx: SamplingScenarioContext, calls: int) -> None:
    assert ctx.probe.calls == calls


@then(parsers.parse("the results are {results}"))
def step_results(ctx: SamplingScenarioContext, results: str) -> None:
    assert ctx.result == [int(r) for r in results.split(",")]


@then("no result was collected")
def step_no_result(ctx: SamplingScenarioContext) -> None:
    assert not ctx.result


@then(parsers.parse("{count:d} delays of {interval:d} ms were taken"))
def step_delays(ctx: SamplingScenarioContext, count: int, interval: int) -> None:
    assert ctx.sleeps == [interval / 1000] * count


@then(parsers.parse("the accumulator is {value:d}"))
def step_accumulator(ctx: SamplingScenarioContext, value: int) -> None:
    assert ctx.result == value


@then(parsers.parse('the run failed with "{message}"'))
def step_run_failed(ctx: SamplingScenarioContext, message: str) -> None:
    assert ctx.error is not None
    assert str(ctx.error) == message


# === Diff steps ===
@given(parsers.parse('a first snapshot with "{key}" at {value:d} tagged "{tag}"'))
def step_first_snapshot(
    ctx: SamplingScenarioContext, key: str, value: int, tag: str
) -> None:
    ctx.first.append((key, value, tag))


@given(parsers.parse('a later snapshot with "{key}" at {value:d} tagged "{tag}"'))
def step_later_snapshot(
    ctx: SamplingScenarioContext, key: str, value: int, tag: str
) -> None:
    ctx.last.append((key, value, tag))


@when("I diff the snapshots")
def step_diff(ctx: SamplingScenarioContext) -> None:
    ctx.result = sliding_window(ctx.first, ctx.last)


@then(parsers.parse('the delta for "{key}" is {value:d} tagged "{tag}"'))
def step_delta(ctx: SamplingScenarioContext, key: str, value: int, tag: str) -> None:
    assert (key, value, tag) in ctx.result


@then("no delta is reported")
def step_no_delta(ctx: SamplingScenarioContext) -> None:
    assert ctx.result == []
