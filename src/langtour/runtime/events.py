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

"""In-process event primitives for runner progress notifications."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, override

from ..report import Report, ReportEntry
from .logging import StructuredLogger, get_logger

type EventHandler = Callable[[object], None]

logger: StructuredLogger = get_logger(__name__, context={"component": "event_bus"})


@dataclass(slots=True, frozen=True)
class HandlerFailure:
    """Container describing a handler error captured during publish."""

    handler: EventHandler
    error: Exception

    @override
    def __str__(self) -> str:
        return f"{self.handler!r} -> {self.error!r}"


@dataclass(slots=True, frozen=True)
class PublishResult:
    """Summary of an event publish invocation."""

    event: object
    handlers_invoked: tuple[EventHandler, ...]
    errors: tuple[HandlerFailure, ...]
    handled_count: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "handled_count", len(self.handlers_invoked))

    @property
    def ok(self) -> bool:
        """Return ``True`` when no handler failures were recorded."""

        return not self.errors

    def raise_if_errors(self) -> None:
        """Raise an ``ExceptionGroup`` if any handlers failed."""

        if not self.errors:
            return

        failures = ", ".join(str(failure) for failure in self.errors)
        message = f"Errors while publishing {type(self.event).__name__}: {failures}"
        raise ExceptionGroup(message, tuple(failure.error for failure in self.errors))


class EventBus(Protocol):
    """Minimal synchronous publish/subscribe abstraction."""

    def subscribe(self, event_type: type[object], handler: EventHandler) -> None:
        """Register a handler for the given event type."""
        ...

    def publish(self, event: object) -> PublishResult:
        """Publish an event instance to subscribers."""
        ...


def _describe_handler(handler: EventHandler) -> str:
    module_name = getattr(handler, "__module__", None)
    qualname = getattr(handler, "__qualname__", None)
    if isinstance(qualname, str):
        prefix = f"{module_name}." if isinstance(module_name, str) else ""
        return f"{prefix}{qualname}"
    return repr(handler)


class InProcessEventBus:
    """Process-local event bus that delivers events synchronously.

    Handlers are matched on the exact event type. A failing handler is logged
    and recorded in the :class:`PublishResult`; it never stops delivery to the
    remaining handlers or propagates to the publisher.
    """

    def __init__(self) -> None:
        super().__init__()
        self._handlers: dict[type[object], list[EventHandler]] = {}

    def subscribe(self, event_type: type[object], handler: EventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type[object], handler: EventHandler) -> bool:
        handlers = self._handlers.get(event_type)
        if handlers is None or handler not in handlers:
            return False
        handlers.remove(handler)
        return True

    def publish(self, event: object) -> PublishResult:
        handlers = tuple(self._handlers.get(type(event), ()))
        invoked: list[EventHandler] = []
        failures: list[HandlerFailure] = []
        for handler in handlers:
            invoked.append(handler)
            try:
                handler(event)
            except Exception as error:
                logger.exception(
                    "Error delivering event.",
                    event="event_delivery_failed",
                    context={
                        "handler": _describe_handler(handler),
                        "event_type": type(event).__name__,
                    },
                )
                failures.append(HandlerFailure(handler=handler, error=error))

        return PublishResult(
            event=event,
            handlers_invoked=tuple(invoked),
            errors=tuple(failures),
        )


@dataclass(slots=True, frozen=True)
class UnitExecuted:
    """Emitted after each demonstration has been recorded in the report."""

    entry: ReportEntry


@dataclass(slots=True, frozen=True)
class RunCompleted:
    """Emitted once the runner has produced the full report."""

    report: Report


__all__ = [
    "EventBus",
    "EventHandler",
    "HandlerFailure",
    "InProcessEventBus",
    "PublishResult",
    "RunCompleted",
    "UnitExecuted",
]
