"""Page that keeps alerts in a sorted list."""

from __future__ import annotations

from typing import Any, Callable

from cascade_client.alert import Alert, AlertType
from cascade_client.page import Page

SortKey = Callable[[Alert], Any]


class DuplicateAlertError(ValueError):
    """An alert with the same name and alertist is already on the page."""


def by_name(alert: Alert) -> str:
    """Sort key: the alert's name."""
    return alert.name


def by_date(alert: Alert) -> str:
    """Sort key: the alert's timepoint."""
    return alert.timepoint


def by_type(alert: Alert) -> int:
    """Sort key: the alert's severity, most severe first."""
    return alert.type.value


_SAMPLE_ALERTS = (
    Alert(AlertType.INFO, "a_alert", "00-00-01", "some_text", "temperature sensor"),
    Alert(AlertType.WARNING, "c_alert", "00-00-02", "some_some_text", "CO2 sensor"),
    Alert(AlertType.ALARM, "b_alert", "00-00-03", "some_some_some_text", "light sensor"),
)


class AlertsPage(Page):
    """A page holding unique alerts, kept sorted by the last chosen key."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._alerts: list[Alert] = []
        self._key: SortKey | None = None
        for alert in _SAMPLE_ALERTS:
            self.add_alert(alert)

    def alerts(self) -> tuple[Alert, ...]:
        """The alerts in their current order."""
        return tuple(self._alerts)

    def add_alert(self, alert: Alert) -> None:
        """Add an alert; its name and alertist must be a new pair."""
        if alert in self._alerts:
            raise DuplicateAlertError(
                f"alert {alert.name!r} from {alert.alertist_name!r} already exists"
            )
        self._alerts.append(alert)
        self.sort_alerts()

    def remove_alert(self, alert_name: str, alertist_name: str) -> None:
        """Remove the alert with this name and alertist, if there is one."""
        for alert in self._alerts:
            if alert.name == alert_name and alert.alertist_name == alertist_name:
                self._alerts.remove(alert)
                self.sort_alerts()
                return

    def sort_alerts(self, key: SortKey | None = None) -> None:
        """Sort by key; without one, by the last key used, else by date."""
        if key is not None:
            self._key = key
        self._alerts.sort(key=self._key or by_date)