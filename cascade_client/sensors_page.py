"""Sensors and the page that keeps them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from cascade_client.page import Page


@dataclass(eq=False)
class Sensor:
    """A sensor; identified by its name."""

    name: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


SortKey = Callable[[Sensor], Any]


class DuplicateSensorError(ValueError):
    """A sensor with the same name is already on the page."""


def sensor_name(sensor: Sensor) -> str:
    """Sort key: the sensor's name."""
    return sensor.name


class SensorsPage(Page):
    """A page holding sensors with unique names, kept sorted."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._sensors: list[Sensor] = []
        self._key: SortKey | None = None

    def sensors(self) -> tuple[Sensor, ...]:
        """The sensors in their current order."""
        return tuple(self._sensors)

    def add_sensor(self, sensor: Sensor) -> None:
        """Add a sensor; its name must be new on this page."""
        if sensor in self._sensors:
            raise DuplicateSensorError(f"sensor name {sensor.name!r} has to be unique")
        self._sensors.append(sensor)
        self.sort_sensors()

    def remove_sensor(self, sensor_name: str) -> None:
        """Remove the sensor with this name, if there is one."""
        for sensor in self._sensors:
            if sensor.name == sensor_name:
                self._sensors.remove(sensor)
                return

    def sort_sensors(self, key: SortKey | None = None) -> None:
        """Sort by key; without one, by the last key used, else by name."""
        if key is not None:
            self._key = key
        self._sensors.sort(key=self._key or sensor_name)