"""Connection to a USB device identified by vendor and product id."""

from __future__ import annotations

from cascade_client.connection import Connection


class UsbConnection(Connection):
    """A USB link; no transport is attached yet, so it only tracks its state."""

    def __init__(self, name: str, vendor_id: int, product_id: int) -> None:
        super().__init__(name)
        self.vendor_id = vendor_id
        self.product_id = product_id
        self._connected = False

    def _set_connected(self, connected: bool) -> None:
        self._connected = connected
        self._emit_connection_changed(connected)

    def connect_device(self) -> None:
        """Mark the device as connected."""
        self._set_connected(True)

    def disconnect_device(self) -> None:
        """Mark the device as disconnected."""
        self._set_connected(False)

    def is_connected(self) -> bool:
        return self._connected

    def send_data(self, data: bytes) -> None:
        """Accept data while connected."""
        if not self._connected:
            raise self._error("USB device is not connected")