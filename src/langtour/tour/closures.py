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

"""Functions as values: sorting, reducing and mapping."""

from __future__ import annotations

import operator
from functools import cmp_to_key, reduce

from ..registry import Registry

CLIENTS: tuple[str, ...] = ("Pestov", "Test", "ian")
PERMANENT_CLIENTS: tuple[str, ...] = ("Google", "Apple")
NUMBERS: tuple[int, ...] = (1, 2, 3, 4, 5, 6)


def backwards(s1: str, s2: str) -> int:
    """Comparator ordering strings from greatest to least."""

    return (s1 < s2) - (s1 > s2)


def sort_in_place() -> str:
    clients = list(CLIENTS)
    clients.sort(reverse=True)
    return ", ".join(clients)


def sort_immutable() -> str:
    ordered = sorted(PERMANENT_CLIENTS)
    return f"{', '.join(ordered)} (original {', '.join(PERMANENT_CLIENTS)})"


def sort_by_function() -> str:
    return ", ".join(sorted(CLIENTS, key=cmp_to_key(backwards)))


def sort_by_length() -> str:
    return ", ".join(sorted(CLIENTS, key=len))


def reduce_sum() -> str:
    verbose = reduce(lambda current, following: current + following, NUMBERS, 0)
    concise = reduce(operator.add, NUMBERS, 0)
    return f"{verbose} == {concise}"


def map_each() -> str:
    return " ".join(map(str, NUMBERS))


def register(registry: Registry) -> None:
    registry.register(
        "sort-in-place",
        sort_in_place,
        summary="Sort a mutable copy in place, descending.",
    )
    registry.register(
        "sort-immutable",
        sort_immutable,
        summary="Sorted copy; the original tuple is untouched.",
    )
    registry.register(
        "sort-by-function",
        sort_by_function,
        summary="Pass a named function as the ordering.",
    )
    registry.register(
        "sort-by-length",
        sort_by_length,
        summary="Order by a key closure.",
    )
    registry.register(
        "reduce-sum",
        reduce_sum,
        summary="Fold with a lambda and with an operator function.",
    )
    registry.register("map-each", map_each, summary="Map a function over values.")


__all__ = [
    "CLIENTS",
    "NUMBERS",
    "PERMANENT_CLIENTS",
    "backwards",
    "register",
]
