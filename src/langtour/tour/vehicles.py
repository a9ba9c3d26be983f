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

"""Vehicle variants sharing a refuelling capability.

Each variant implements :class:`Refuelable` on its own. Construction rules
live in one factory per variant instead of a chain of initialisers:

- ``make_car(color)``
- ``make_race_car(color=DEFAULT_RACE_COLOR, *, turbo=True)``
- ``make_formula_one(color)``: turbo is never allowed and the minimum weight
  is fixed at 642.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Protocol, runtime_checkable

from ..registry import Registry
from .values import Color

DEFAULT_RACE_COLOR = Color(red=1.5, green=2.0, blue=4.5)
FORMULA_ONE_MINIMUM_WEIGHT = 642


@runtime_checkable
class Refuelable(Protocol):
    """Anything that can have its tank filled."""

    def fill_gas_tank(self) -> str: ...


@dataclass(slots=True, frozen=True)
class Car:
    paint_color: Color

    def fill_gas_tank(self) -> str:
        return "car: regular unleaded"


@dataclass(slots=True, frozen=True)
class RaceCar:
    paint_color: Color
    has_turbo: bool

    def fill_gas_tank(self) -> str:
        suffix = " with turbo coolant" if self.has_turbo else ""
        return f"race car: high octane{suffix}"


@dataclass(slots=True, frozen=True)
class FormulaOne:
    paint_color: Color
    minimum_weight: int = FORMULA_ONE_MINIMUM_WEIGHT

    @property
    def has_turbo(self) -> bool:
        return False

    def fill_gas_tank(self) -> str:
        return f"formula one: ballast to {self.minimum_weight}kg"


def make_car(color: Color) -> Car:
    return Car(paint_color=color)


def make_race_car(color: Color = DEFAULT_RACE_COLOR, *, turbo: bool = True) -> RaceCar:
    return RaceCar(paint_color=color, has_turbo=turbo)


def make_formula_one(color: Color) -> FormulaOne:
    return FormulaOne(paint_color=color)


def tune_up(vehicle: Refuelable) -> tuple[str, ...]:
    """Service steps for ``vehicle``.

    A formula one car gets its own refuel first and then falls through to the
    generic step every vehicle receives.
    """

    steps: list[str] = []
    match vehicle:
        case FormulaOne():
            steps.append(vehicle.fill_gas_tank())
    steps.append("Fill the gas tank")
    return tuple(steps)


class Game:
    """Holds a manager that is only built on first access."""

    def __init__(self) -> None:
        super().__init__()
        self.managers_created = 0

    @cached_property
    def multiplayer_manager(self) -> str:
        self.managers_created += 1
        return "multiplayer manager"


def _fleet() -> tuple[Refuelable, ...]:
    red = Color(red=1.0, green=0.0, blue=0.0)
    return (make_car(red), make_race_car(), make_formula_one(red))


def vehicle_factories() -> str:
    race_car = make_race_car()
    formula_one = make_formula_one(DEFAULT_RACE_COLOR)
    return (
        f"race car turbo={race_car.has_turbo}, "
        f"formula one turbo={formula_one.has_turbo} "
        f"minimum weight={formula_one.minimum_weight}"
    )


def fill_gas_tank() -> str:
    return "; ".join(vehicle.fill_gas_tank() for vehicle in _fleet())


def tune_up_fleet() -> str:
    return " | ".join(" then ".join(tune_up(vehicle)) for vehicle in _fleet())


def lazy_property() -> str:
    game = Game()
    before = game.managers_created
    _ = game.multiplayer_manager
    _ = game.multiplayer_manager
    return f"created before access: {before}, after two accesses: {game.managers_created}"


def register(registry: Registry) -> None:
    registry.register(
        "vehicle-factories",
        vehicle_factories,
        summary="One factory per variant instead of chained initialisers.",
    )
    registry.register(
        "fill-gas-tank",
        fill_gas_tank,
        summary="Each variant implements the shared capability itself.",
    )
    registry.register(
        "tune-up",
        tune_up_fleet,
        summary="Match on the variant type, then fall through to the default.",
    )
    registry.register(
        "lazy-property",
        lazy_property,
        summary="A property computed once, on first access.",
    )


__all__ = [
    "DEFAULT_RACE_COLOR",
    "FORMULA_ONE_MINIMUM_WEIGHT",
    "Car",
    "FormulaOne",
    "Game",
    "RaceCar",
    "Refuelable",
    "make_car",
    "make_formula_one",
    "make_race_car",
    "register",
    "tune_up",
]
