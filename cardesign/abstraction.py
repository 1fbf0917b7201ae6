"""A car hidden behind an abstract interface: callers see only what a car can do."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from typing import Callable, TextIO

NOT_STARTED = "Your engine is not started, first start that"

# The order in which the demonstration drives a sports car.
DEMO_ROUTE = ("start", "current_speed", "accelerate", "apply_brake", "stop", "accelerate")


class Car(ABC):
    """What every car offers, with no word on how it is done."""

    @abstractmethod
    def start(self) -> None:
        """Start the engine."""

    @abstractmethod
    def current_speed(self) -> None:
        """Report the current speed."""

    @abstractmethod
    def accelerate(self) -> None:
        """Speed up."""

    @abstractmethod
    def apply_brake(self) -> None:
        """Slow down."""

    @abstractmethod
    def stop(self) -> None:
        """Stop the car and switch the engine off."""


def _needs_engine(action: Callable[[SportCar], None]) -> Callable[[SportCar], None]:
    """Refuse the action with a message while the engine is off."""

    @functools.wraps(action)
    def guarded(car: SportCar) -> None:
        if not car.engine_on:
            car._say(NOT_STARTED)
            return
        action(car)

    return guarded


class SportCar(Car):
    """A sports car that reports every action on a text stream."""

    def __init__(self, name: str, out: TextIO | None = None) -> None:
        self.name = name
        self.velocity = 12
        self.acceleration = 10
        self.deceleration = 5
        self.engine_on = False
        self._out = out

    def _say(self, message: str) -> None:
        print(message, file=self._out)

    def _report_change(self, verb: str, delta: int, result: int) -> None:
        self._say(f"{self.name}car is {verb} with {delta} KM/hour")
        self._say(f"Your current velocity become {result} KM/hour")

    def start(self) -> None:
        if self.engine_on:
            self._say("Your car is already running")
            return
        self.engine_on = True
        self._say(f"{self.name} is starting 0 KM/hour")

    @_needs_engine
    def current_speed(self) -> None:
        self._say(f"{self.name}car reached at {self.velocity} KM/hour")

    @_needs_engine
    def accelerate(self) -> None:
        self._report_change("accelerating", self.acceleration, self.velocity + self.acceleration)

    @_needs_engine
    def apply_brake(self) -> None:
        self._report_change("deccelerating", self.deceleration, self.velocity - self.deceleration)

    @_needs_engine
    def stop(self) -> None:
        self.velocity = 0
        self.engine_on = False
        self._say(f"Your car is stooped and initial velocity marked as{self.velocity}")


def _run_route(car: Car) -> None:
    """Drive ``car`` through every step of the demonstration route."""
    for action in DEMO_ROUTE:
        getattr(car, action)()


def main(argv: list[str] | None = None) -> int:
    """Drive a sports car through a short demonstration."""
    _run_route(SportCar("Lambogini"))
    return 0