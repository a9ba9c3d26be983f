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

"""Structural matching on an RGBA tuple."""

from __future__ import annotations

from ..registry import Registry

type Rgba = tuple[float, float, float, float]


def classify_color(color: Rgba) -> str:
    """Describe ``color`` using literal, capture and guarded patterns."""

    match color:
        case (0.0, green, blue, _) if 0.5 <= green <= 1.0:
            return f"here with blue: {blue}"
        case (red, green, blue, 1.0) if red == green == blue:
            return "monochrome"
        case _:
            return "no match"


def register(registry: Registry) -> None:
    registry.register(
        "tuple-pattern-monochrome",
        lambda: classify_color((1.0, 1.0, 1.0, 1.0)),
    )
    registry.register(
        "tuple-pattern-blue",
        lambda: classify_color((0.0, 0.75, 0.25, 0.5)),
    )
    registry.register(
        "tuple-pattern-fallback",
        lambda: classify_color((0.3, 0.2, 0.1, 0.9)),
        summary="Nothing matches, so the wildcard case answers.",
    )


__all__ = ["Rgba", "classify_color", "register"]
