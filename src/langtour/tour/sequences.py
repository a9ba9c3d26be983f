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

"""Looping over a list with its indices."""

from __future__ import annotations

from ..registry import Registry
from .optionals import find_index

NAMES: tuple[str, ...] = ("Ian", "Ben", "Elisabeth")


def enumerate_array() -> str:
    labelled: list[str] = []
    for index, value in enumerate(NAMES):
        labelled.append(f"{index}: {value}")
    return ", ".join(labelled)


def find_in_array() -> str:
    return f"Elisabeth -> {find_index('Elisabeth', NAMES)}, Zed -> {find_index('Zed', NAMES)}"


def register(registry: Registry) -> None:
    registry.register(
        "enumerate-array",
        enumerate_array,
        summary="Read each index alongside its value.",
    )
    registry.register(
        "find-index",
        find_in_array,
        summary="A search that returns an optional index.",
    )


__all__ = ["NAMES", "enumerate_array", "find_in_array", "register"]
