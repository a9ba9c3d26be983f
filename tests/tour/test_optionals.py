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

"""Tests for the optional binding and chaining helpers."""

from __future__ import annotations

from hypothesis import given, strategies as st

from langtour.tour.optionals import (
    ABSENT,
    Absent,
    Address,
    Person,
    Present,
    Residence,
    building_number,
    find_index,
    parse_int,
)


def test_find_index_returns_first_match() -> None:
    assert find_index("b", ("a", "b", "b")) == Present(1)
    assert find_index("z", ("a", "b")) == ABSENT
    assert find_index("a", ()) == Absent()


@given(st.lists(st.text(max_size=3), max_size=8), st.text(max_size=3))
def test_find_index_agrees_with_list_index(haystack: list[str], needle: str) -> None:
    match find_index(needle, haystack):
        case Present(value=index):
            assert index == haystack.index(needle)
        case Absent():
            assert needle not in haystack


def test_parse_int() -> None:
    assert parse_int("123") == Present(123)
    assert parse_int("12a") == ABSENT


def test_then_short_circuits_on_absent() -> None:
    calls: list[int] = []

    def record(value: int) -> Present[int]:
        calls.append(value)
        return Present(value + 1)

    assert Present(1).then(record).then(record) == Present(3)
    assert ABSENT.then(record) == ABSENT
    assert calls == [1, 2]


def _person(number: str | None) -> Person:
    address = Address(
        building_number=Present(number) if number is not None else ABSENT
    )
    return Person(residence=Present(Residence(address=Present(address))))


def test_building_number_chain() -> None:
    assert building_number(_person("123")) == Present(123)
    assert building_number(_person("12B")) == ABSENT
    assert building_number(_person(None)) == ABSENT
    assert building_number(Person()) == ABSENT
    assert building_number(Person(residence=Present(Residence()))) == ABSENT
