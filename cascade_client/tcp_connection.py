"""Connection to a device over TCP."""

from __future__ import annotations

import select
import socket
from collections.abc import Iterator

from cascade_client.connection import Connection

_CONNECT_TIMEOUT = 3.0
_WRITE_TIMEOUT = 1.0
_READ_SETTLE = 0.01
_CHUNK = 65536


def _reason(exc: OSError) -> str:
    return str(exc) or type(exc).__name__


class TcpConnection(Connection):
    """A TCP client link to a host and port."""

    def __init__(self, name: str, host_address: str, port: int) -> None:
        super().__init__(name)
        self._host_address = host_address
        self._port = port
        self._socket: socket.socket | None = None

    @property
    def host_address(self) -> str:
        return self._host_address

    @property
    def port(self) -> int:
        return self._port

    def _require_socket(self) -> socket.socket:
        if self._socket is None:
            raise self._error("Device is not connected")
        return self._socket

    def connect_device(self) -> None:
        """Connect to the host, waiting up to three seconds."""
        if self._socket is not None:
            return
        try:
            sock = socket.create_connection(
                (self._host_address, self._port), timeout=_CONNECT_TIMEOUT
            )
        except OSError as exc:
            raise self._error(_reason(exc)) from exc
        sock.settimeout(_WRITE_TIMEOUT)
        self._socket = sock
        self._emit_connection_changed(True)

    def disconnect_device(self) -> None:
        """Close the socket if it is open."""
        sock, self._socket = self._socket, None
        if sock is None:
            return
        try:
            sock.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass
        sock.close()
        self._emit_connection_changed(False)

    def is_connected(self) -> bool:
        return self._socket is not None

    def send_data(self, data: bytes) -> None:
        """Send all bytes, waiting up to one second."""
        sock = self._require_socket()
        try:
            sock.sendall(bytes(data))
        except OSError as exc:
            raise self._error(_reason(exc)) from exc

    def read_available(self) -> bytes:
        """Read what has arrived, plus what follows within a short pause."""
        data = b"".join(self._drain(self._require_socket()))
        if data:
            self._emit_data(data)
        return data

    def _drain(self, sock: socket.socket) -> Iterator[bytes]:
        wait = 0.0
        while select.select([sock], [], [], wait)[0]:
            try:
                chunk = sock.recv(_CHUNK)
            except OSError as exc:
                self._emit_error(_reason(exc))
                self.disconnect_device()
                return
            if not chunk:
                self.disconnect_device()
                return
            yield chunk
            wait = _READ_SETTLE