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

"""Value types: a memberwise-initialised record and a plain tuple."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from ..registry import Registry


@dataclass(slots=True, frozen=True)
class Color:
    """RGB components; every field must be supplied before use."""

    red: float
    green: float
    blue: float

    @classmethod
    def grayscale(cls, level: float) -> Self:
        return cls(red=level, green=level, blue=level)


def struct_init() -> str:
    magenta = Color(red=1.3, green=0.3, blue=5.2)
    gray = Color.grayscale(0.5)
    return f"red={magenta.red} gray={gray}"


def tuple_access() -> str:
    light = ("Ian", "Test")
    return f"{light[0]} {light!r}"


def register(registry: Registry) -> None:
    registry.register("struct-init", struct_init, summary="Memberwise initialiser.")
    registry.register("tuple-access", tuple_access, summary="Index into a tuple.")


__all__ = ["Color", "register", "struct_init", "tuple_access"]
