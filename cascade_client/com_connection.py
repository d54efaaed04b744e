"""Connection to a device over a serial port."""

from __future__ import annotations

import time

import serial
from serial.tools import list_ports

from cascade_client.connection import Connection

_WRITE_TIMEOUT = 1.0
_READ_SETTLE = 0.01

# flow control name -> (rtscts, xonxoff)
_FLOW_CONTROL = {
    "none": (False, False),
    "hardware": (True, False),
    "software": (False, True),
}


class ComConnection(Connection):
    """A serial-port link; the port name may also be a serial URL."""

    def __init__(
        self,
        name: str,
        port_name: str,
        baud_rate: int = 9600,
        data_bits: int = serial.EIGHTBITS,
        parity: str = serial.PARITY_NONE,
        stop_bits: float = serial.STOPBITS_ONE,
        flow_control: str = "none",
    ) -> None:
        super().__init__(name)
        if flow_control not in _FLOW_CONTROL:
            raise ValueError(f"unknown flow control {flow_control!r}")
        self._port_name = port_name
        self._baud_rate = baud_rate
        self._data_bits = data_bits
        self._parity = parity
        self._stop_bits = stop_bits
        self._flow_control = flow_control
        self._port = serial.serial_for_url(port_name, do_not_open=True)

    @property
    def port_name(self) -> str:
        return self._port_name

    @property
    def baud_rate(self) -> int:
        return self._baud_rate

    @property
    def flow_control(self) -> str:
        return self._flow_control

    def connect_device(self) -> None:
        """Configure and open the port."""
        if self.is_connected():
            return
        rtscts, xonxoff = _FLOW_CONTROL[self._flow_control]
        port = self._port
        try:
            port.baudrate = self._baud_rate
            port.bytesize = self._data_bits
            port.parity = self._parity
            port.stopbits = self._stop_bits
            port.rtscts = rtscts
            port.xonxoff = xonxoff
            port.write_timeout = _WRITE_TIMEOUT
            port.timeout = 0
            port.open()
        except (serial.SerialException, OSError, ValueError) as exc:
            raise self._error(str(exc) or type(exc).__name__) from exc
        self._emit_connection_changed(True)

    def disconnect_device(self) -> None:
        """Close the port if it is open."""
        if self._port.is_open:
            self._port.close()
            self._emit_connection_changed(False)

    def is_connected(self) -> bool:
        return bool(self._port.is_open)

    def send_data(self, data: bytes) -> None:
        """Write bytes and wait up to one second for them to go out."""
        if not self.is_connected():
            raise self._error("Device is not connected")
        try:
            self._port.write(bytes(data))
            self._port.flush()
        except (serial.SerialException, OSError) as exc:
            raise self._error(str(exc) or type(exc).__name__) from exc

    def read_available(self) -> bytes:
        """Read what is waiting, plus what follows within a short pause."""
        if not self.is_connected():
            raise self._error("Device is not connected")
        port = self._port
        chunks: list[bytes] = []
        try:
            waiting = port.in_waiting
            while waiting:
                chunks.append(port.read(waiting))
                time.sleep(_READ_SETTLE)
                waiting = port.in_waiting
        except (serial.SerialException, OSError) as exc:
            self._emit_error(str(exc) or type(exc).__name__)
            self.disconnect_device()
        data = b"".join(chunks)
        if data:
            self._emit_data(data)
        return data

    def available_ports(self) -> list[str]:
        """Names of the serial ports present on this machine."""
        return [info.name for info in list_ports.comports()]