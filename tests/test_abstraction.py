import io

import pytest

from cardesign.abstraction import NOT_STARTED, Car, SportCar, main


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def car(out):
    return SportCar("Roadster", out)


def _lines(stream):
    return stream.getvalue().splitlines()


def test_interface_is_abstract():
    with pytest.raises(TypeError):
        Car()


def test_start_twice(car, out):
    car.start()
    car.start()
    assert _lines(out) == ["Roadster is starting 0 KM/hour", "Your car is already running"]
    assert car.engine_on is True


@pytest.mark.parametrize("action", ["current_speed", "accelerate", "apply_brake", "stop"])
def test_actions_need_running_engine(car, out, action):
    getattr(car, action)()
    assert _lines(out) == [NOT_STARTED]
    assert car.engine_on is False


@pytest.mark.parametrize(
    "action, expected, engine_on, velocity",
    [
        ("current_speed", ["Roadstercar reached at 12 KM/hour"], True, 12),
        (
            "accelerate",
            ["Roadstercar is accelerating with 10 KM/hour", "Your current velocity become 22 KM/hour"],
            True,
            12,
        ),
        (
            "apply_brake",
            ["Roadstercar is deccelerating with 5 KM/hour", "Your current velocity become 7 KM/hour"],
            True,
            12,
        ),
        ("stop", ["Your car is stooped and initial velocity marked as0"], False, 0),
    ],
)
def test_running_car_reports(car, out, action, expected, engine_on, velocity):
    car.start()
    getattr(car, action)()
    assert _lines(out)[1:] == expected
    assert car.engine_on is engine_on
    assert car.velocity == velocity


def test_accelerate_leaves_velocity_alone(car):
    car.start()
    car.accelerate()
    car.apply_brake()
    assert car.velocity == 12


def test_stop_resets_velocity(car, out):
    car.start()
    car.stop()
    assert car.velocity == 0
    assert car.engine_on is False
    car.start()
    car.current_speed()
    assert car.velocity == 0
    assert _lines(out)[-1] == "Roadstercar reached at 0 KM/hour"


def test_main_runs_demo(capsys):
    assert main() == 0
    printed = capsys.readouterr().out.splitlines()
    assert printed[0] == "Lambogini is starting 0 KM/hour"
    assert printed[-1] == NOT_STARTED