"""Alerts raised by sensors and other alertists."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class AlertType(enum.Enum):
    """Severity of an alert; ordered from most to least severe."""

    ALARM = 0
    WARNING = 1
    INFO = 2


@dataclass(frozen=True, eq=False)
class Alert:
    """A read-only alert; identified by its name together with its alertist."""

    type: AlertType
    name: str
    timepoint: str
    text: str
    alertist_name: str
    tags: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alert):
            return NotImplemented
        return self.name == other.name and self.alertist_name == other.alertist_name

    def __hash__(self) -> int:
        return hash((self.name, self.alertist_name))