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

"""An enumeration whose cases carry data."""

from __future__ import annotations

from dataclasses import dataclass

from ..registry import Registry

LITTLE_DELAY_MINUTES = range(0, 6)


@dataclass(slots=True, frozen=True)
class OnTime:
    """The train is on schedule."""


@dataclass(slots=True, frozen=True)
class Delayed:
    """The train is late by ``minutes``."""

    minutes: int

    def __post_init__(self) -> None:
        if self.minutes < 0:
            msg = f"A delay cannot be negative (got {self.minutes})."
            raise ValueError(msg)


# Train status - announce() matches on the case
type TrainStatus = OnTime | Delayed


def announce(status: TrainStatus) -> str:
    match status:
        case OnTime():
            return "awesome"
        case Delayed(minutes=minutes) if minutes in LITTLE_DELAY_MINUTES:
            return f"just a little delay of {minutes} minutes"
        case Delayed(minutes=minutes):
            return f"damn, late by {minutes}"


def register(registry: Registry) -> None:
    registry.register("train-on-time", lambda: announce(OnTime()))
    registry.register("train-little-delay", lambda: announce(Delayed(4)))
    registry.register(
        "train-late",
        lambda: announce(Delayed(10)),
        summary="A guard decides between two cases of the same variant.",
    )


__all__ = ["Delayed", "OnTime", "TrainStatus", "announce", "register"]
