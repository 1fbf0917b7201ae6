"""Cars whose acceleration differs by kind of car and by how hard it is asked for."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

from . import inheritance


class Car(inheritance.Car, ABC):
    """A car whose way of accelerating is left to each kind of car."""

    def __init__(self, brand: str, model: str, out: TextIO | None = None) -> None:
        super().__init__(brand, model, out)

    def start_engine(self) -> None:
        """Start the engine unless it is already running."""
        super().start_engine()

    def stop_engine(self) -> None:
        """Stop the engine and bring the car to rest."""
        super().stop_engine()

    def report_speed(self) -> None:
        """Report the speed, provided the engine is running."""
        super().report_speed()

    @abstractmethod
    def accelerate(self) -> None:
        """Speed up in the way this kind of car does."""

    def brake(self) -> None:
        """Bring the car to a halt, provided the engine is running."""
        super().brake()


class ManualCar(inheritance.ManualCar, Car):
    """A geared car that can accelerate gently or at full throttle; model first."""

    def __init__(self, model: str, brand: str, out: TextIO | None = None) -> None:
        super().__init__(model, brand, out)

    def accelerate(self, full: bool = False) -> None:
        """Add 20 km/h, or 50 km/h when ``full`` is set."""
        step = 50 if full else 20
        self.speed += step
        self._announce(f"Accerating with speed {step}km/h")

    def shift_gear(self, gear: int) -> None:
        """Put the car into ``gear``."""
        super().shift_gear(gear)


class ElectricCar(inheritance.ElectricCar, Car):
    """A battery car that spends charge every time it accelerates; model first."""

    def __init__(self, model: str, brand: str, out: TextIO | None = None) -> None:
        super().__init__(model, brand, out)

    def accelerate(self) -> None:
        self.speed += 15
        self.battery -= 20
        self._announce("Accerating with speed 15km/h and batery is also decreased by 20%")

    def charge_battery(self) -> None:
        """Charge the battery back to full."""
        super().charge_battery()


MANUAL_ROUTE = (
    *inheritance.DEMO_ROUTE[:4],
    ("accelerate", {"full": True}),
    "report_speed",
    *inheritance.DEMO_ROUTE[4:],
)


def main(argv: list[str] | None = None) -> int:
    """Show both kinds of car accelerating in their own ways."""
    return inheritance._demo(MANUAL_ROUTE, ManualCar, ElectricCar)