"""Manual and electric cars that share the behaviour of a common car."""

from __future__ import annotations

from typing import Any, Callable, Iterable, TextIO, Union

NOT_STARTED = "Engine is not started....."
SEPARATOR = "........................................................"

# A step of a route: a method name, or a method name with keyword arguments.
Step = Union[str, "tuple[str, dict[str, Any]]"]


class Car:
    """A car with an engine that can be started, driven and stopped."""

    def __init__(self, brand: str, model: str, out: TextIO | None = None) -> None:
        self.brand = brand
        self.model = model
        self.engine_on = False
        self.speed = 0
        self._out = out

    def _announce(self, message: str) -> None:
        print(message, file=self._out)

    def _say(self, message: str) -> None:
        self._announce(f"{self.brand} {self.model} :{message}")

    def start_engine(self) -> None:
        if self.engine_on:
            self._say("Engine already startted")
            return
        self.engine_on = True
        self._say("Engine is starting.....")

    def stop_engine(self) -> None:
        if not self.engine_on:
            self._say("Engine already stopped")
            return
        self.speed = 0
        self.engine_on = False
        self._say("Engine is stoping.....")

    def report_speed(self) -> None:
        self._say(f"current speed is..{self.speed}" if self.engine_on else NOT_STARTED)

    def accelerate(self) -> None:
        if not self.engine_on:
            self._say(NOT_STARTED)
            return
        self._say("Applying acceleration..")
        self.speed += 20

    def brake(self) -> None:
        if not self.engine_on:
            self._say("Engine is alreayd stop.....")
            return
        self._say("Applying break..")
        self.speed = 0


class ManualCar(Car):
    """A car with a gearbox; takes the model before the brand."""

    def __init__(self, model: str, brand: str, out: TextIO | None = None) -> None:
        super().__init__(brand, model, out)
        self.gear = 0

    def shift_gear(self, gear: int) -> None:
        self.gear = gear
        self._say(f"Gear is shifted to.....{self.gear}")


class ElectricCar(Car):
    """A battery car; takes the model before the brand."""

    def __init__(self, model: str, brand: str, out: TextIO | None = None) -> None:
        super().__init__(brand, model, out)
        self.battery = 100

    def charge_battery(self) -> None:
        self.battery = 100
        self._say(f"Battery is charged to.....{self.battery}")


DEMO_ROUTE: tuple[Step, ...] = (
    "start_engine",
    "report_speed",
    "accelerate",
    "report_speed",
    "brake",
    "stop_engine",
)


def _perform(car: Any, step: Step) -> None:
    """Call the method a route step names on ``car``."""
    name, kwargs = (step, {}) if isinstance(step, str) else step
    getattr(car, name)(**kwargs)


def _demo(
    manual_route: Iterable[Step],
    manual_class: Callable[[str, str], Any] = ManualCar,
    electric_class: Callable[[str, str], Any] = ElectricCar,
) -> int:
    """Drive a manual car along ``manual_route``, then an electric car."""
    manual = manual_class("Suzuki", "DEMO123")
    for step in manual_route:
        _perform(manual, step)
    manual.shift_gear(3)

    print(SEPARATOR)

    electric = electric_class("Tata", "DEMO456")
    for step in DEMO_ROUTE:
        _perform(electric, step)
    electric.charge_battery()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Drive a manual and an electric car through the same routine."""
    return _demo(DEMO_ROUTE)