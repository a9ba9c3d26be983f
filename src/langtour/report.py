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

"""Result and report types produced by the runner."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_UNRENDERABLE = "<unrenderable {type_name}>"


@dataclass(slots=True, frozen=True)
class Value:
    """A demonstration that returned normally."""

    description: str


@dataclass(slots=True, frozen=True)
class Failure:
    """A demonstration that raised; ``reason`` is the captured message."""

    reason: str


# Outcome of one demonstration - consumers match on the variant
type Result = Value | Failure


@dataclass(slots=True, frozen=True)
class ReportEntry:
    """Outcome of a single demonstration at its position in the run."""

    name: str
    result: Result
    sequence_index: int

    @property
    def ok(self) -> bool:
        """Return ``True`` when the demonstration produced a value."""

        return isinstance(self.result, Value)


@dataclass(slots=True, frozen=True)
class Report:
    """Ordered, immutable collection of entries produced by one run."""

    entries: tuple[ReportEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ReportEntry]:
        return iter(self.entries)

    @property
    def total(self) -> int:
        """Number of demonstrations that ran."""
        return len(self.entries)

    @property
    def succeeded(self) -> int:
        """Demonstrations that returned a value."""
        return sum(1 for entry in self.entries if entry.ok)

    @property
    def failed(self) -> int:
        """Demonstrations that raised."""
        return self.total - self.succeeded

    def failures(self) -> tuple[ReportEntry, ...]:
        """Entries whose result is a :class:`Failure`."""
        return tuple(entry for entry in self.entries if not entry.ok)

    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.entries)


def describe(value: object) -> str:
    """Render ``value`` as text without ever raising.

    Strings are returned verbatim. Other values go through ``str()``, then
    ``repr()``, and finally a placeholder naming the type when both raise.
    """

    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception:
        return _repr_or_placeholder(value)


def _repr_or_placeholder(value: object) -> str:
    try:
        return repr(value)
    except Exception:
        return _UNRENDERABLE.format(type_name=type(value).__name__)


__all__ = [
    "Failure",
    "Report",
    "ReportEntry",
    "Result",
    "Value",
    "describe",
]
