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

"""Argument labels and string length."""

from __future__ import annotations

from ..registry import Registry


def save_state_labelled(*, name: str, encrypt: bool) -> str:
    return f"{name} encrypt={encrypt}"


def save_state_positional(name: str, encrypt: bool, /) -> str:
    return f"{name} encrypt={encrypt}"


def argument_labels() -> str:
    labelled = save_state_labelled(name="Ben", encrypt=True)
    positional = save_state_positional("Ian", True)
    return f"{labelled}; {positional}"


def register(registry: Registry) -> None:
    registry.register(
        "argument-labels",
        argument_labels,
        summary="Keyword-only versus positional-only parameters.",
    )

    @registry.demo("string-length", summary="len() counts characters.")
    def string_length() -> str:
        return str(len("Ian"))


__all__ = [
    "argument_labels",
    "register",
    "save_state_labelled",
    "save_state_positional",
]
