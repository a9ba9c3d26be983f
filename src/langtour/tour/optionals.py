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

"""Optional binding and optional chaining.

A value that may be missing is modelled as ``Present(value) | Absent()``
rather than a nullable reference, so callers have to ``match`` on the variant
before they can reach the contained value::

    match find_index("Ian", ("Ben", "Ian")):
        case Present(value=index):
            ...
        case Absent():
            ...

Chaining goes through :meth:`Present.then`, which stops at the first
``Absent`` link.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from ..registry import Registry


@dataclass(slots=True, frozen=True)
class Present[T]:
    """A value that is there."""

    value: T

    def then[U](self, func: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return func(self.value)


@dataclass(slots=True, frozen=True)
class Absent:
    """No value."""

    def then[U](self, func: Callable[[Any], Maybe[U]]) -> Maybe[U]:
        del func
        return self


ABSENT = Absent()

type Maybe[T] = Present[T] | Absent


def find_index(needle: str, haystack: Sequence[str]) -> Maybe[int]:
    """Position of the first element equal to ``needle``."""

    for index, value in enumerate(haystack):
        if value == needle:
            return Present(index)
    return ABSENT


def parse_int(text: str) -> Maybe[int]:
    try:
        return Present(int(text))
    except ValueError:
        return ABSENT


@dataclass(slots=True, frozen=True)
class Address:
    building_number: Maybe[str] = ABSENT
    street_name: Maybe[str] = ABSENT
    apartment_number: Maybe[str] = ABSENT


@dataclass(slots=True, frozen=True)
class Residence:
    address: Maybe[Address] = ABSENT


@dataclass(slots=True, frozen=True)
class Person:
    residence: Maybe[Residence] = ABSENT


def building_number(person: Person) -> Maybe[int]:
    """``person.residence?.address?.buildingNumber`` parsed as an integer."""

    return (
        person.residence.then(lambda residence: residence.address)
        .then(lambda address: address.building_number)
        .then(parse_int)
    )


def _describe_index(found: Maybe[int]) -> str:
    match found:
        case Present(value=index):
            return f"yep, index is {index}"
        case Absent():
            return "nope"


def _describe_building_number(person: Person) -> str:
    match building_number(person):
        case Present(value=number):
            return f"address number {number}"
        case Absent():
            return "no address number"


def optional_binding() -> str:
    return _describe_index(find_index("Ian", ("Ben", "Ian")))


def optional_binding_absent() -> str:
    return _describe_index(find_index("Zed", ("Ben", "Ian")))


def optional_chaining() -> str:
    address = Address(
        building_number=Present("123"),
        street_name=Present("Main St."),
    )
    person = Person(residence=Present(Residence(address=Present(address))))
    return _describe_building_number(person)


def optional_chaining_broken() -> str:
    # Residence without an address: the chain stops at the second link.
    person = Person(residence=Present(Residence()))
    return _describe_building_number(person)


def register(registry: Registry) -> None:
    registry.register(
        "optional-binding",
        optional_binding,
        summary="Bind the index only when the search found one.",
    )
    registry.register(
        "optional-binding-absent",
        optional_binding_absent,
        summary="The else branch of an optional binding.",
    )
    registry.register(
        "optional-chaining",
        optional_chaining,
        summary="Walk person -> residence -> address -> building number.",
    )
    registry.register(
        "optional-chaining-broken",
        optional_chaining_broken,
        summary="A missing link short-circuits the whole chain.",
    )


__all__ = [
    "ABSENT",
    "Absent",
    "Address",
    "Maybe",
    "Person",
    "Present",
    "Residence",
    "building_number",
    "find_index",
    "parse_int",
    "register",
]
