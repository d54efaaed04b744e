"""The simpler pages of the main window and the chart they show."""

from __future__ import annotations

from dataclasses import dataclass

from cascade_client.page import Page

SEPARATOR = "|"

# Toolbar layout shared by the list pages; "|" marks a separator.
LIST_PAGE_TOOLBAR: tuple[str, ...] = (
    "sort",
    SEPARATOR,
    "add",
    "remove",
    SEPARATOR,
    "suspend",
    "resume",
)


@dataclass(eq=False)
class Chart:
    """A chart; identified by its name."""

    name: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chart):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


class _ListPage(Page):
    toolbar: tuple[str, ...] = LIST_PAGE_TOOLBAR


class _PlainPage(Page):
    toolbar: tuple[str, ...] = ()


class ChartsPage(_ListPage):
    """Page listing charts."""


class ScenariosPage(_ListPage):
    """Page listing scenarios."""


class ConnectionsPage(_ListPage):
    """Page listing connections to devices."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._connections: list[object] = []
        self._add_requests = 0

    @property
    def add_requests(self) -> int:
        """How many new connections have been asked for."""
        return self._add_requests

    def connections(self) -> tuple[object, ...]:
        """The connections on the page."""
        return tuple(self._connections)

    def add_connection(self) -> None:
        """Ask for a new connection; no kind is offered yet, so the request is only counted."""
        self._add_requests += 1


class SettingsPage(_PlainPage):
    """Page holding the application's settings."""


class LogbookPage(_PlainPage):
    """Page holding the log book."""