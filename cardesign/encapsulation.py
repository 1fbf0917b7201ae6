"""A sports car that keeps its engine to itself and checks any replacement."""

from __future__ import annotations

from typing import TextIO

from . import abstraction

REQUIRED_MAKER = "Lamborgini"
REJECTED_ENGINE = "'Lamborgini' engine only allowd."


class SportCar(abstraction.SportCar):
    """A sports car whose engine can only be swapped for an approved one."""

    def __init__(self, name: str, out: TextIO | None = None) -> None:
        super().__init__(name, out)
        self._engine = "Lamborgini Engine"

    @property
    def engine(self) -> str:
        """The name of the installed engine."""
        return self._engine

    def install_engine(self, sentence: str) -> None:
        """Install an engine; its name must contain the approved maker as a word."""
        if REQUIRED_MAKER not in sentence.split():
            raise ValueError(REJECTED_ENGINE)
        self._engine = sentence
        self._say(f"Current Engine set as: {sentence}")

    def start(self) -> None:
        """Start the engine unless it is already running."""
        super().start()

    def current_speed(self) -> None:
        """Report the speed, provided the engine is running."""
        super().current_speed()

    def accelerate(self) -> None:
        """Report the speed the car would reach when accelerating."""
        super().accelerate()

    def apply_brake(self) -> None:
        """Report the speed the car would drop to when braking."""
        super().apply_brake()

    def stop(self) -> None:
        """Stop the engine and bring the car to rest."""
        super().stop()


def main(argv: list[str] | None = None) -> int:
    """Drive the car, then try to swap its engine for several others."""
    car = SportCar("Lambogini")
    print(f"Current Engine name is: {car.engine}")
    abstraction._run_route(car)

    for engine in ("Ducati Engine", "Lamborgini old Engine", "Farrari Engine"):
        try:
            car.install_engine(engine)
        except ValueError as error:
            print(error)
    print(f"Current Engine name is: {car.engine}")
    return 0