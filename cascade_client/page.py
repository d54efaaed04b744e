"""Base page with an on/off/suspended working state."""

from __future__ import annotations

import enum
from collections.abc import Callable, Collection


class WorkingState(enum.Enum):
    """Working state of a page."""

    ON = "on"
    OFF = "off"
    SUSPENDED = "suspended"


class PageStateError(RuntimeError):
    """A state change that the page's current state does not allow."""


class Page:
    """A named page of the main window; starts turned off."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._state = WorkingState.OFF
        self._events: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> WorkingState:
        return self._state

    @property
    def events(self) -> tuple[str, ...]:
        """Names of the state changes the page has gone through, oldest first."""
        return tuple(self._events)

    def _change(
        self,
        allowed: Collection[WorkingState],
        target: WorkingState,
        message: str,
        hook: Callable[[], None],
    ) -> None:
        if self._state not in allowed:
            raise PageStateError(message)
        self._state = target
        hook()

    def on(self) -> None:
        """Turn the page on; only allowed from OFF."""
        self._change(
            {WorkingState.OFF}, WorkingState.ON, "page already turned on or suspended", self.on_on
        )

    def off(self) -> None:
        """Turn the page off from any other state."""
        self._change(
            {WorkingState.ON, WorkingState.SUSPENDED},
            WorkingState.OFF,
            "page already turned off",
            self.on_off,
        )

    def suspend(self) -> None:
        """Suspend a page that is on."""
        self._change(
            {WorkingState.ON}, WorkingState.SUSPENDED, "can't suspend, page is off", self.on_suspend
        )

    def resume(self) -> None:
        """Run the resume hook of a suspended page; the state stays SUSPENDED."""
        self._change(
            {WorkingState.SUSPENDED},
            WorkingState.SUSPENDED,
            "can't resume, page is not suspended",
            self.on_resume,
        )

    def report(self) -> str:
        """A short status report."""
        return "default empty report"

    def on_on(self) -> None:
        """Hook run after the page is turned on."""
        self._events.append("on")

    def on_off(self) -> None:
        """Hook run after the page is turned off."""
        self._events.append("off")

    def on_suspend(self) -> None:
        """Hook run after the page is suspended."""
        self._events.append("suspend")

    def on_resume(self) -> None:
        """Hook run when a suspended page is resumed."""
        self._events.append("resume")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"