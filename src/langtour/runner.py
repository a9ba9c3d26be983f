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

"""Example runner."""

from __future__ import annotations

from .dbc import ensure
from .registry import DemonstrationUnit, Registry
from .report import Failure, Report, ReportEntry, Result, Value, describe
from .runtime.events import EventBus, RunCompleted, UnitExecuted
from .runtime.logging import StructuredLogger, get_logger

_logger: StructuredLogger = get_logger(__name__, context={"component": "runner"})


def _report_covers_registry(
    registry: Registry, *, result: Report, **_: object
) -> tuple[bool, str]:
    indices = [entry.sequence_index for entry in result]
    names = [unit.name for unit in registry.all()]
    ok = indices == list(range(len(names))) and list(result.names()) == names
    return ok, f"indices={indices!r} names={list(result.names())!r}"


@ensure(_report_covers_registry)
def run(
    registry: Registry,
    *,
    bus: EventBus | None = None,
    logger: StructuredLogger | None = None,
) -> Report:
    """Execute every demonstration in ``registry`` and collect a report.

    For each unit, in registration order:
    1. Invoke its ``execute`` callable
    2. Record a ``Value`` for a normal return or a ``Failure`` for an exception
    3. Publish ``UnitExecuted`` (if bus provided)

    A failing demonstration never stops the run. The registry is frozen when
    the run begins.

    Args:
        registry: Demonstrations to execute.
        bus: Optional event bus for progress notifications.
        logger: Optional logger override.

    Returns:
        Report with one entry per registered unit, in registry order.
    """
    log = logger or _logger
    registry.freeze()
    units = registry.all()
    log.info(
        "Starting tour run.",
        event="runner.start",
        context={"units": len(units)},
    )

    entries: list[ReportEntry] = []
    for index, unit in enumerate(units):
        entry = ReportEntry(
            name=unit.name,
            result=_execute(unit, log),
            sequence_index=index,
        )
        entries.append(entry)
        if bus is not None:
            _ = bus.publish(UnitExecuted(entry=entry))

    report = Report(entries=tuple(entries))
    log.info(
        "Tour run finished.",
        event="runner.finish",
        context={"total": report.total, "failed": report.failed},
    )
    if bus is not None:
        _ = bus.publish(RunCompleted(report=report))
    return report


def _execute(unit: DemonstrationUnit, log: StructuredLogger) -> Result:
    unit_log = log.bind(name=unit.name)
    if unit.summary:
        unit_log = unit_log.bind(summary=unit.summary)
    try:
        returned = unit.execute()
    except Exception as error:
        reason = describe(error) or type(error).__name__
        unit_log.warning(
            "Demonstration failed.",
            event="runner.unit.failed",
            context={"error_type": type(error).__name__},
            exc_info=True,
        )
        return Failure(reason=reason)

    description = describe(returned)
    unit_log.debug(
        "Demonstration completed.",
        event="runner.unit.ok",
        context={"description": description},
    )
    return Value(description=description)


__all__ = ["run"]
