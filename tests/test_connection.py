import pytest

from cascade_client.connection import Connection


class _Loopback(Connection):
    def __init__(self, name):
        super().__init__(name)
        self._open = False

    def connect_device(self):
        self._open = True
        self._emit_connection_changed(True)

    def disconnect_device(self):
        if self._open:
            self._open = False
            self._emit_connection_changed(False)

    def is_connected(self):
        return self._open

    def send_data(self, data):
        if not self._open:
            raise self._error("Device is not connected")
        self._emit_data(bytes(data))


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        Connection("plain")


def test_name_is_kept_and_status_reported():
    link = _Loopback("link")
    status = []
    Connection.on_connection_changed(link, status.append)
    assert link.name == "link"
    link.connect_device()
    link.disconnect_device()
    assert status == [True, False]


def test_every_data_callback_is_called():
    link = _Loopback("link")
    first, extra = [], []
    Connection.on_data_received(link, first.append)
    Connection.on_data_received(link, extra.append)
    link.connect_device()
    link.send_data(b"payload")
    assert first == [b"payload"]
    assert extra == [b"payload"]


def test_error_is_reported_and_raised():
    link = _Loopback("link")
    errors = []
    Connection.on_error(link, errors.append)
    with pytest.raises(ConnectionError, match="Device is not connected"):
        link.send_data(b"x")
    assert errors == ["Device is not connected"]


def test_context_manager_disconnects():
    link = _Loopback("link")
    status = []
    Connection.on_connection_changed(link, status.append)
    with link as entered:
        assert entered is link
        entered.connect_device()
        assert entered.is_connected() is True
    assert link.is_connected() is False
    assert status == [True, False]