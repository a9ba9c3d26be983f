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


"""Structured logging helpers for :mod:`langtour`.

Every record carries an ``event`` name and a ``context`` mapping so that log
lines stay machine-filterable. Logs always go to stderr; stdout is reserved
for the tour report.

Text output puts one record on one line::

    2024-05-01 12:00:00 WARNING langtour.runner runner.unit.failed: Demonstration failed. component=runner name=boom

JSON output emits the same fields as a compact object per line.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
from collections.abc import Mapping, MutableMapping
from datetime import UTC, datetime
from typing import Any, cast, override

__all__ = [
    "LEVEL_NAMES",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]

_LOG_LEVEL_ENV = "LANGTOUR_LOG_LEVEL"
_LOG_FORMAT_ENV = "LANGTOUR_LOG_FORMAT"
_DEFAULT_LEVEL = logging.WARNING
_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
LEVEL_NAMES: dict[str, int] = {
    name: logging.getLevelNamesMapping()[name]
    for name in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")
}
_FORMATTER_FACTORIES = {
    "text": "langtour.runtime.logging._TextFormatter",
    "json": "langtour.runtime.logging._JsonFormatter",
}


class StructuredLogger(logging.LoggerAdapter[logging.Logger]):
    """Logger adapter enforcing an ``event`` name plus a ``context`` payload.

    The adapter's ``extra`` mapping is the bound context. Each call merges, in
    order, the bound context, the ``context=`` keyword and any loose ``extra``
    keys, then hands the record ``event`` and ``context`` attributes.
    """

    def __init__(
        self,
        logger: logging.Logger,
        *,
        context: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(logger, dict(context) if context is not None else {})

    @property
    def context(self) -> Mapping[str, object]:
        return cast(Mapping[str, object], self.extra)

    def bind(self, **context: object) -> StructuredLogger:
        """Return a new adapter with ``context`` merged into the bound payload."""

        return type(self)(self.logger, context={**self.context, **context})

    @override
    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        loose = _loose_extra(kwargs.pop("extra", None))
        event = kwargs.pop("event", None)
        if event is None:
            event = loose.pop("event", None)
        loose.pop("event", None)
        if not isinstance(event, str):
            raise TypeError("Structured logs require an 'event' field.")

        payload = {
            **self.context,
            **_inline_context(kwargs.pop("context", None)),
            **loose,
        }
        kwargs["extra"] = {"event": event, "context": payload}
        return msg, kwargs


def _loose_extra(extra: object) -> dict[str, object]:
    if isinstance(extra, Mapping):
        return dict(cast(Mapping[str, object], extra))
    return {}


def _inline_context(context: object) -> Mapping[str, object]:
    if context is None:
        return {}
    if not isinstance(context, Mapping):
        raise TypeError("context must be a mapping when provided.")
    return cast(Mapping[str, object], context)


def get_logger(
    name: str,
    *,
    context: Mapping[str, object] | None = None,
) -> StructuredLogger:
    """Return a :class:`StructuredLogger` scoped to ``name``."""

    return StructuredLogger(logging.getLogger(name), context=context)


def configure_logging(
    *,
    level: int | str | None = None,
    json_mode: bool | None = None,
    env: Mapping[str, str] | None = None,
    force: bool = False,
) -> None:
    """Install a stderr handler on the root logger.

    ``level`` and ``json_mode`` fall back to ``LANGTOUR_LOG_LEVEL`` and
    ``LANGTOUR_LOG_FORMAT`` (``json`` or ``text``). The default level is
    ``WARNING`` so a plain run only shows demonstration failures.

    When the host application already configured the root logger only the level
    is adjusted, unless ``force=True``.
    """

    env = os.environ if env is None else env
    resolved_level = _coerce_level(level or env.get(_LOG_LEVEL_ENV))
    if json_mode is None:
        json_mode = env.get(_LOG_FORMAT_ENV, "text").strip().lower() == "json"

    root_logger = logging.getLogger()
    if root_logger.handlers and not force:
        root_logger.setLevel(resolved_level)
        return

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                name: {"()": factory} for name, factory in _FORMATTER_FACTORIES.items()
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stderr",
                    "formatter": "json" if json_mode else "text",
                }
            },
            "root": {"handlers": ["stderr"], "level": resolved_level},
        }
    )


def _record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Collect the fields both formatters render, in output order."""

    fields: dict[str, Any] = {
        "timestamp": datetime.fromtimestamp(record.created, tz=UTC),
        "level": record.levelname,
        "logger": record.name,
        "event": getattr(record, "event", None),
        "message": record.getMessage(),
    }
    context = getattr(record, "context", None)
    if context:
        fields["context"] = context
    return fields


def _single_line(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n")


class _TextFormatter(logging.Formatter):
    """Renders ``time level logger event: message key=value ...`` lines."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        fields = _record_fields(record)
        head = " ".join(
            (
                fields["timestamp"].strftime(_TIME_FORMAT),
                fields["level"],
                fields["logger"],
                f"{fields['event'] or '-'}:",
                _single_line(fields["message"]),
            )
        )
        context = cast(Mapping[str, object], fields.get("context", {}))
        pairs = [f"{key}={_single_line(str(value))}" for key, value in context.items()]
        line = " ".join((head, *pairs))
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class _JsonFormatter(logging.Formatter):
    """Renders the same fields as :class:`_TextFormatter` as compact JSON."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        fields = _record_fields(record)
        fields["timestamp"] = fields["timestamp"].isoformat()
        if fields["event"] is None:
            del fields["event"]
        if record.exc_info:
            fields["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(fields, default=repr, separators=(",", ":"))


def _coerce_level(level: int | str | None) -> int:
    if level is None:
        return _DEFAULT_LEVEL
    if isinstance(level, int):
        return level
    try:
        return LEVEL_NAMES[level.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown log level: {level!r}") from None
