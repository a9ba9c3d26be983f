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


"""Plain-text rendering for tour reports.

Each entry renders on exactly one line. Line breaks inside a name,
description or reason are shown as escapes (``\\n``, ``\\r`` and friends) so
the Nth line of a report always belongs to the Nth demonstration. The report
itself keeps the original text.
"""

from __future__ import annotations

from .dbc import require
from .report import Failure, Report, ReportEntry, Value, describe

# Every character str.splitlines() treats as a line boundary.
_LINE_BREAKS = str.maketrans(
    {
        "\n": "\\n",
        "\r": "\\r",
        "\v": "\\x0b",
        "\f": "\\x0c",
        "\x1c": "\\x1c",
        "\x1d": "\\x1d",
        "\x1e": "\\x1e",
        "\x85": "\\x85",
        "\u2028": "\\u2028",
        "\u2029": "\\u2029",
    }
)


def _inline(value: object) -> str:
    return describe(value).translate(_LINE_BREAKS)


def format_entry(entry: ReportEntry) -> str:
    """Render one entry as ``"<index>. <name>: <description>"``.

    Failures render as ``"<index>. <name>: ERROR: <reason>"``.
    """

    prefix = f"{_inline(entry.sequence_index)}. {_inline(entry.name)}"
    match entry.result:
        case Value(description=description):
            return f"{prefix}: {_inline(description)}"
        case Failure(reason=reason):
            return f"{prefix}: ERROR: {_inline(reason)}"
        case other:
            return f"{prefix}: {_inline(other)}"


def _distinct_positions(report: Report) -> tuple[bool, str]:
    indices = [entry.sequence_index for entry in report]
    return len(set(indices)) == len(indices), f"indices={indices!r}"


@require(_distinct_positions)
def format_report(report: Report) -> str:
    """Render every entry on its own line, in sequence order."""

    ordered = sorted(report.entries, key=lambda entry: entry.sequence_index)
    return "".join(f"{format_entry(entry)}\n" for entry in ordered)


__all__ = ["format_entry", "format_report"]
