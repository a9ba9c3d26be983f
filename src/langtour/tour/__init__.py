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

"""The fixed tour of language-feature demonstrations.

Topics are registered in reading order:

- **sequences**: enumerate a list, search it
- **optionals**: optional binding and chaining over ``Present | Absent``
- **values**: memberwise initialisation, tuples
- **vehicles**: variants sharing a capability, factories, lazy properties
- **resources**: scoped release and deferred cleanup
- **closures**: sorting, reducing and mapping with functions as values
- **enums**: cases carrying data, guarded matches
- **patterns**: structural matching on tuples
- **functions**: argument labels, string length

Every demonstration is a zero-argument pure function returning a description.
"""

from __future__ import annotations

from collections.abc import Callable
from types import ModuleType

from ..registry import Registry
from . import (
    closures,
    enums,
    functions,
    optionals,
    patterns,
    resources,
    sequences,
    values,
    vehicles,
)

TOPICS: tuple[ModuleType, ...] = (
    sequences,
    optionals,
    values,
    vehicles,
    resources,
    closures,
    enums,
    patterns,
    functions,
)


def default_registry() -> Registry:
    """Build a fresh registry holding the whole tour.

    Raises:
        DuplicateNameError: two topics registered the same name.
    """

    registry = Registry()
    for topic in TOPICS:
        register: Callable[[Registry], None] = topic.register
        register(registry)
    return registry


__all__ = ["TOPICS", "default_registry"]
