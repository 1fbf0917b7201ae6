"""A manual car whose acceleration can take an explicit amount."""

from __future__ import annotations

from typing import TextIO

from . import fleet


class ManualCar(fleet.ManualCar):
    """A geared car that gains 20 km/h per step, or as much as is asked for."""

    def __init__(self, brand: str, model: str, out: TextIO | None = None) -> None:
        super().__init__(brand, model, out)

    def start_engine(self) -> None:
        """Start the engine."""
        super().start_engine()

    def stop_engine(self) -> None:
        """Turn the engine off and bring the car to rest."""
        super().stop_engine()

    def accelerate(self, speed: int | None = None) -> None:
        """Gain 20 km/h, or ``speed`` km/h when given; refused with the engine off."""
        super().accelerate(speed)

    def brake(self) -> None:
        """Lose 20 km/h, never dropping below zero."""
        super().brake()

    def shift_gear(self, gear: int) -> None:
        """Put the car into ``gear``."""
        super().shift_gear(gear)


def main(argv: list[str] | None = None) -> int:
    """Accelerate by the usual step and by a requested amount."""
    fleet._drive_routine(ManualCar("Suzuki", "WagonR"), 40)
    return 0