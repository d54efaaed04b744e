"""Common interface of a connection to a device."""

from __future__ import annotations

import abc
from types import TracebackType
from typing import Callable

DataCallback = Callable[[bytes], object]
StatusCallback = Callable[[bool], object]
ErrorCallback = Callable[[str], object]


class Connection(abc.ABC):
    """A named link to a device that reports data, status changes and errors."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._data_callbacks: list[DataCallback] = []
        self._status_callbacks: list[StatusCallback] = []
        self._error_callbacks: list[ErrorCallback] = []

    @property
    def name(self) -> str:
        return self._name

    @abc.abstractmethod
    def connect_device(self) -> None:
        """Open the link; raise ConnectionError when it cannot be opened."""

    @abc.abstractmethod
    def disconnect_device(self) -> None:
        """Close the link."""

    @abc.abstractmethod
    def is_connected(self) -> bool:
        """Whether the link is open."""

    @abc.abstractmethod
    def send_data(self, data: bytes) -> None:
        """Send bytes; raise ConnectionError when they cannot be sent."""

    def on_data_received(self, callback: DataCallback) -> None:
        """Call back with every block of bytes received."""
        self._data_callbacks.append(callback)

    def on_connection_changed(self, callback: StatusCallback) -> None:
        """Call back with True or False whenever the link opens or closes."""
        self._status_callbacks.append(callback)

    def on_error(self, callback: ErrorCallback) -> None:
        """Call back with the message of every error."""
        self._error_callbacks.append(callback)

    def _emit_data(self, data: bytes) -> None:
        for callback in list(self._data_callbacks):
            callback(data)

    def _emit_connection_changed(self, connected: bool) -> None:
        for callback in list(self._status_callbacks):
            callback(connected)

    def _emit_error(self, message: str) -> None:
        for callback in list(self._error_callbacks):
            callback(message)

    def _error(self, message: str) -> ConnectionError:
        """Report an error to listeners and return the exception to raise."""
        self._emit_error(message)
        return ConnectionError(message)

    def __enter__(self) -> Connection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.disconnect_device()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"