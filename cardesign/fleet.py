"""Cars that override a shared interface and accept an optional speed when accelerating."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

ENGINE_OFF = "Cannot accelerate! Engine is off."


class Car(ABC):
    """What every car in the fleet does, with driving left to each kind."""

    def __init__(self, brand: str, model: str, out: TextIO | None = None) -> None:
        self.brand = brand
        self.model = model
        self.engine_on = False
        self.speed = 0
        self._out = out

    def _say(self, message: str) -> None:
        print(f"{self.brand} {self.model} : {message}", file=self._out)

    def _refused(self) -> bool:
        """Report and return True when the engine is off."""
        if not self.engine_on:
            self._say(ENGINE_OFF)
        return not self.engine_on

    def _ease_off(self, step: int) -> None:
        self.speed = max(self.speed - step, 0)

    def start_engine(self) -> None:
        self.engine_on = True
        self._say("Engine started.")

    def stop_engine(self) -> None:
        self.engine_on = False
        self.speed = 0
        self._say("Engine turned off.")

    @abstractmethod
    def accelerate(self, speed: int | None = None) -> None:
        """Speed up by the car's usual step, or by ``speed`` when given."""

    @abstractmethod
    def brake(self) -> None:
        """Slow down."""


class ManualCar(Car):
    """A geared car that gains 20 km/h per step unless told otherwise."""

    STEP = 20

    def __init__(self, brand: str, model: str, out: TextIO | None = None) -> None:
        super().__init__(brand, model, out)
        self.gear = 0

    def shift_gear(self, gear: int) -> None:
        self.gear = gear
        self._say(f"Shifted to gear {self.gear}")

    def accelerate(self, speed: int | None = None) -> None:
        if self._refused():
            return
        self.speed += self.STEP if speed is None else speed
        self._say(f"Accelerating to {self.speed} km/h")

    def brake(self) -> None:
        self._ease_off(self.STEP)
        self._say(f"Braking! Speed is now {self.speed} km/h")


class ElectricCar(Car):
    """A battery car; every acceleration costs charge, and a flat battery stops it."""

    STEP = 15

    def __init__(self, brand: str, model: str, out: TextIO | None = None) -> None:
        super().__init__(brand, model, out)
        self.battery = 100

    def charge_battery(self) -> None:
        self.battery = 100
        self._say("Battery fully charged!")

    def accelerate(self, speed: int | None = None) -> None:
        if self._refused():
            return
        if self.battery <= 0:
            self._say("Battery dead! Cannot accelerate.")
            return
        gain = self.STEP if speed is None else speed
        self.battery -= 10 if speed is None else 10 + speed
        self.speed += gain
        self._say(f"Accelerating to {self.speed} km/h. Battery at {self.battery}%.")

    def brake(self) -> None:
        self._ease_off(self.STEP)
        self._say(
            f"Regenerative braking! Speed is now {self.speed} km/h. "
            f"Battery at {self.battery}%."
        )


def _drive_routine(car: Car, requested: int | None = None) -> None:
    """Start, accelerate twice (the second time by ``requested``), brake and stop."""
    car.start_engine()
    car.accelerate()
    car.accelerate(requested)
    car.brake()
    car.stop_engine()


def main(argv: list[str] | None = None) -> int:
    """Drive a manual and an electric car through the same routine."""
    for index, car in enumerate((ManualCar("Ford", "Mustang"), ElectricCar("Tesla", "Model S"))):
        if index:
            print("----------------------")
        _drive_routine(car)
    return 0