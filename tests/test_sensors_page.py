import pytest

from cascade_client.page import WorkingState
from cascade_client.sensors_page import (
    DuplicateSensorError,
    Sensor,
    SensorsPage,
    sensor_name,
)


def names(page):
    return [s.name for s in page.sensors()]


@pytest.fixture
def page():
    return SensorsPage("sensors")


def test_sensor_equality_by_name():
    assert Sensor("co2") == Sensor("co2")
    assert not Sensor("co2") == Sensor("light")
    assert len({Sensor("co2"), Sensor("co2")}) == 1


def test_sensor_name_key():
    assert sensor_name(Sensor("temp")) == "temp"


def test_new_page_is_empty_and_off(page):
    assert page.sensors() == ()
    assert page.state is WorkingState.OFF
    assert page.name == "sensors"


def test_added_sensors_sorted_by_name(page):
    for n in ["light", "co2", "temp"]:
        page.add_sensor(Sensor(n))
    assert names(page) == ["co2", "light", "temp"]


def test_duplicate_name_raises(page):
    page.add_sensor(Sensor("co2"))
    with pytest.raises(DuplicateSensorError):
        page.add_sensor(Sensor("co2"))
    assert names(page) == ["co2"]


def test_custom_key_is_remembered(page):
    page.sort_sensors(lambda s: len(s.name))
    for n in ["temperature", "co2", "light"]:
        page.add_sensor(Sensor(n))
    lengths = [len(n) for n in names(page)]
    assert lengths == sorted(lengths)
    assert names(page)[0] == "co2"


def test_remove_sensor(page):
    for n in ["a", "b", "c"]:
        page.add_sensor(Sensor(n))
    page.remove_sensor("b")
    assert names(page) == ["a", "c"]


def test_remove_missing_sensor_keeps_list(page):
    page.add_sensor(Sensor("a"))
    page.remove_sensor("zzz")
    assert names(page) == ["a"]