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

"""Ordered registry of named demonstration units.

Demonstrations are registered once while the tour is assembled and are read
back in insertion order. The runner freezes a registry when a run begins, so
the set of demonstrations cannot change underneath a report::

    registry = Registry()
    registry.register("basic-math", lambda: str(1 + 2))

    @registry.demo("greeting", summary="Plain string result.")
    def greeting() -> str:
        return "hello"

    [unit.name for unit in registry.all()]  # ["basic-math", "greeting"]
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .dbc import invariant
from .errors import DuplicateNameError, RegistryFrozenError

type Demonstration = Callable[[], object]


@dataclass(slots=True, frozen=True)
class DemonstrationUnit:
    """One named, self-contained example computation."""

    name: str
    execute: Demonstration
    summary: str = ""


def _keys_match_unit_names(registry: Registry) -> tuple[bool, str]:
    """Every unit is stored under its own name.

    Names are unique because they are the mapping keys and ``register``
    rejects duplicates; this only catches a unit filed under a foreign key.
    """

    # Reads the private mapping: public methods are wrapped by the invariant.
    mismatched = [
        key for key, unit in registry._units.items() if key != unit.name  # noqa: SLF001
    ]
    return not mismatched, f"mismatched={mismatched!r}"


@invariant(_keys_match_unit_names)
class Registry:
    """Insertion-ordered collection of :class:`DemonstrationUnit` objects."""

    def __init__(self) -> None:
        super().__init__()
        self._units: dict[str, DemonstrationUnit] = {}
        self._frozen = False

    def register(
        self, name: str, execute: Demonstration, *, summary: str = ""
    ) -> DemonstrationUnit:
        """Add a demonstration under ``name`` and return its unit.

        Raises:
            DuplicateNameError: ``name`` is already registered. The registry
                is left untouched.
            RegistryFrozenError: a run has already started over this registry.
        """

        if not name or not name.strip():
            msg = "Demonstration names must be non-empty."
            raise ValueError(msg)
        if not callable(execute):
            msg = f"Demonstration {name!r} must be callable (got {execute!r})."
            raise TypeError(msg)
        if self._frozen:
            raise RegistryFrozenError(name)
        if name in self._units:
            raise DuplicateNameError(name)

        unit = DemonstrationUnit(name=name, execute=execute, summary=summary)
        self._units[name] = unit
        return unit

    def demo(
        self, name: str, *, summary: str = ""
    ) -> Callable[[Demonstration], Demonstration]:
        """Decorator form of :meth:`register`; returns the function unchanged."""

        def decorator(func: Demonstration) -> Demonstration:
            _ = self.register(name, func, summary=summary)
            return func

        return decorator

    def all(self) -> tuple[DemonstrationUnit, ...]:
        """Return the registered units in insertion order."""

        return tuple(self._units.values())

    def freeze(self) -> None:
        """Reject further registrations. Freezing twice is a no-op."""

        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[DemonstrationUnit]:
        return iter(self.all())

    def __contains__(self, name: object) -> bool:
        return name in self._units


__all__ = ["Demonstration", "DemonstrationUnit", "Registry"]
