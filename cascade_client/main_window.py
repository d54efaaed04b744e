"""The main window: a stack of named pages with one current page."""

from __future__ import annotations

from cascade_client.alerts_page import AlertsPage
from cascade_client.page import Page
from cascade_client.pages import (
    ChartsPage,
    ConnectionsPage,
    LogbookPage,
    ScenariosPage,
    SettingsPage,
)
from cascade_client.sensors_page import SensorsPage

_DEFAULT_PAGES: tuple[tuple[type[Page], str], ...] = (
    (AlertsPage, "alerts"),
    (SensorsPage, "sensors"),
    (ConnectionsPage, "connections"),
    (ChartsPage, "charts"),
    (ScenariosPage, "scenarios"),
    (LogbookPage, "logbook"),
    (SettingsPage, "settings"),
)


class MainWindow:
    """Holds the pages in order; each built-in page is selected as it is added."""

    def __init__(self) -> None:
        self._pages: list[Page] = []
        self._current: Page | None = None
        for cls, name in _DEFAULT_PAGES:
            page = cls(name)
            self.add_page(page)
            self.set_current_page(page)

    @property
    def pages(self) -> tuple[Page, ...]:
        """The pages in stack order."""
        return tuple(self._pages)

    def get_pages(self) -> dict[str, Page]:
        """Pages by name, sorted by name; the first page wins a shared name."""
        found: dict[str, Page] = {}
        for page in self._pages:
            found.setdefault(page.name, page)
        return dict(sorted(found.items()))

    def add_page(self, page: Page) -> None:
        """Append a page to the stack; a page already there stays where it is."""
        if not isinstance(page, Page):
            raise TypeError(f"expected a Page, got {type(page).__name__}")
        if any(p is page for p in self._pages):
            return
        self._pages.append(page)
        if self._current is None:
            self._current = page

    def remove_page(self, page: Page) -> None:
        """Remove a page; if it was current, a neighbour becomes current."""
        index = self._index_of(page)
        del self._pages[index]
        if self._current is page:
            if self._pages:
                self._current = self._pages[min(index, len(self._pages) - 1)]
            else:
                self._current = None

    def set_current_page(self, page: Page) -> None:
        """Make a page on the stack the current one."""
        self._index_of(page)
        self._current = page

    def current_page(self) -> Page | None:
        """The page shown now, or None when the stack is empty."""
        return self._current

    def _index_of(self, page: Page) -> int:
        for index, candidate in enumerate(self._pages):
            if candidate is page:
                return index
        raise ValueError(f"page {getattr(page, 'name', page)!r} is not in the window")