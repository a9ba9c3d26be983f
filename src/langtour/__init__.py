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

"""A guided tour of language features, run as a list of named demonstrations.

Core components:
- **Registry**: insertion-ordered, uniquely named demonstration units
- **run**: executes each unit once, isolating failures, and returns a Report
- **format_report**: renders a Report as one line per demonstration
- **default_registry**: the fixed tour shipped with the package

Example:
    >>> from langtour import Registry, format_report, run
    >>> registry = Registry()
    >>> _ = registry.register("basic-math", lambda: str(1 + 2))
    >>> print(format_report(run(registry)), end="")
    0. basic-math: 3
"""

from __future__ import annotations

from .errors import (
    ConfigError,
    DuplicateNameError,
    LangtourError,
    RegistryFrozenError,
)
from .formatting import format_entry, format_report
from .registry import Demonstration, DemonstrationUnit, Registry
from .report import Failure, Report, ReportEntry, Result, Value, describe
from .runner import run
from .tour import default_registry

__all__ = [
    "ConfigError",
    "Demonstration",
    "DemonstrationUnit",
    "DuplicateNameError",
    "Failure",
    "LangtourError",
    "Registry",
    "RegistryFrozenError",
    "Report",
    "ReportEntry",
    "Result",
    "Value",
    "default_registry",
    "describe",
    "format_entry",
    "format_report",
    "run",
]


def __dir__() -> list[str]:
    return sorted({*globals().keys(), *__all__})
