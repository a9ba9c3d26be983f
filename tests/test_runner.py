# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for the example runner."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest
from hypothesis import given, settings, strategies as st

from langtour import (
    Failure,
    Registry,
    RegistryFrozenError,
    Report,
    ReportEntry,
    Value,
    format_report,
    run,
)
from langtour.runtime.events import InProcessEventBus, RunCompleted, UnitExecuted


def test_run_matches_concrete_scenario(scenario_registry: Registry) -> None:
    report = run(scenario_registry)

    assert isinstance(report, Report)
    assert report.entries == (
        ReportEntry(name="basic-math", result=Value("3"), sequence_index=0),
        ReportEntry(name="boom", result=Failure("divide by zero"), sequence_index=1),
        ReportEntry(name="greeting", result=Value("hello"), sequence_index=2),
    )
    assert format_report(report) == (
        "0. basic-math: 3\n1. boom: ERROR: divide by zero\n2. greeting: hello\n"
    )


def test_run_empty_registry() -> None:
    report = run(Registry())

    assert report.total == 0
    assert report.entries == ()


def test_failure_does_not_skip_later_units() -> None:
    calls: list[str] = []

    def record(name: str, *, fail: bool = False) -> Callable[[], str]:
        def execute() -> str:
            calls.append(name)
            if fail:
                raise RuntimeError(f"{name} broke")
            return name

        return execute

    registry = Registry()
    registry.register("first", record("first", fail=True))
    registry.register("second", record("second", fail=True))
    registry.register("third", record("third"))

    report = run(registry)

    assert calls == ["first", "second", "third"]
    assert report.total == 3
    assert report.failed == 2
    assert report.succeeded == 1
    assert [entry.name for entry in report.failures()] == ["first", "second"]


def test_non_string_values_are_described() -> None:
    registry = Registry()
    registry.register("number", lambda: 42)
    registry.register("record", lambda: {"a": 1})
    registry.register("nothing", lambda: None)

    report = run(registry)

    assert [entry.result for entry in report] == [
        Value("42"),
        Value("{'a': 1}"),
        Value("None"),
    ]


def test_empty_exception_message_falls_back_to_type_name() -> None:
    def explode() -> str:
        raise KeyError

    registry = Registry()
    registry.register("empty", explode)

    (entry,) = run(registry).entries

    assert entry.result == Failure("KeyError")


def test_base_exceptions_propagate() -> None:
    def interrupt() -> str:
        raise KeyboardInterrupt

    registry = Registry()
    registry.register("interrupt", interrupt)

    with pytest.raises(KeyboardInterrupt):
        run(registry)


def test_run_freezes_registry(scenario_registry: Registry) -> None:
    _ = run(scenario_registry)

    assert scenario_registry.frozen
    with pytest.raises(RegistryFrozenError):
        scenario_registry.register("late", lambda: "too late")


def test_run_is_repeatable(scenario_registry: Registry) -> None:
    first = run(scenario_registry)
    second = run(scenario_registry)

    assert first == second


def test_run_publishes_progress_events(scenario_registry: Registry) -> None:
    bus = InProcessEventBus()
    executed: list[UnitExecuted] = []
    completed: list[RunCompleted] = []
    bus.subscribe(UnitExecuted, lambda event: executed.append(event))  # type: ignore[arg-type]
    bus.subscribe(RunCompleted, lambda event: completed.append(event))  # type: ignore[arg-type]

    report = run(scenario_registry, bus=bus)

    assert [event.entry for event in executed] == list(report.entries)
    assert len(completed) == 1
    assert completed[0].report is report


def test_failing_subscriber_does_not_break_run(scenario_registry: Registry) -> None:
    bus = InProcessEventBus()

    def broken(event: object) -> None:
        raise RuntimeError("subscriber failure")

    bus.subscribe(UnitExecuted, broken)

    report = run(scenario_registry, bus=bus)

    assert report.total == 3


def test_run_logs_failures(
    scenario_registry: Registry, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.DEBUG, logger="langtour.runner")

    _ = run(scenario_registry)

    events = [getattr(record, "event", None) for record in caplog.records]
    assert events[0] == "runner.start"
    assert events[-1] == "runner.finish"
    assert events.count("runner.unit.ok") == 2
    failed = [r for r in caplog.records if getattr(r, "event", None) == "runner.unit.failed"]
    assert len(failed) == 1
    assert failed[0].levelno == logging.WARNING
    assert failed[0].context == {  # type: ignore[attr-defined]
        "component": "runner",
        "name": "boom",
        "error_type": "_Boom",
    }


def test_multiline_failure_renders_as_one_report_line() -> None:
    def multi() -> str:
        raise ValueError("first line\nsecond line")

    registry = Registry()
    _ = registry.register("multi", multi)
    _ = registry.register("after", lambda: "ok")

    report = run(registry)

    assert report.entries[0].result == Failure("first line\nsecond line")
    assert format_report(report).splitlines() == [
        "0. multi: ERROR: first line\\nsecond line",
        "1. after: ok",
    ]


def test_run_logs_unit_summary(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="langtour.runner")
    registry = Registry()
    _ = registry.register("documented", lambda: "done", summary="Has a summary.")
    _ = registry.register("bare", lambda: "done")

    _ = run(registry)

    ok = [r for r in caplog.records if getattr(r, "event", None) == "runner.unit.ok"]
    assert ok[0].context == {  # type: ignore[attr-defined]
        "component": "runner",
        "name": "documented",
        "summary": "Has a summary.",
        "description": "done",
    }
    assert "summary" not in ok[1].context  # type: ignore[attr-defined]


def test_postcondition_checked_under_contracts(
    dbc_on: None, scenario_registry: Registry
) -> None:
    report = run(scenario_registry)

    assert [entry.sequence_index for entry in report] == [0, 1, 2]


_names = st.lists(
    st.text(min_size=1, max_size=12).filter(lambda name: bool(name.strip())),
    unique=True,
    max_size=15,
)


def _unit(name: str, fails: bool) -> Callable[[], str]:
    def execute() -> str:
        if fails:
            raise ValueError(f"failed {name}")
        return f"value {name}"

    return execute


@given(_names, st.data())
@settings(max_examples=60)
def test_report_shape_for_any_registry(names: list[str], data: st.DataObject) -> None:
    outcomes = data.draw(
        st.lists(st.booleans(), min_size=len(names), max_size=len(names))
    )
    registry = Registry()
    for name, fails in zip(names, outcomes, strict=True):
        registry.register(name, _unit(name, fails))

    report = run(registry)

    assert len(report) == len(names)
    assert [entry.sequence_index for entry in report] == list(range(len(names)))
    assert [entry.name for entry in report] == names
    for entry, fails in zip(report, outcomes, strict=True):
        if fails:
            assert entry.result == Failure(f"failed {entry.name}")
        else:
            assert entry.result == Value(f"value {entry.name}")
