from types import SimpleNamespace
from unittest import mock

import pytest

from cascade_client.com_connection import ComConnection


def _watched(port_name="loop://", **settings):
    link = ComConnection("com", port_name, **settings)
    seen = SimpleNamespace(data=[], status=[], errors=[])
    link.on_data_received(seen.data.append)
    link.on_connection_changed(seen.status.append)
    link.on_error(seen.errors.append)
    return link, seen


def test_defaults():
    link, _ = _watched()
    assert (link.port_name, link.baud_rate, link.flow_control) == ("loop://", 9600, "none")
    assert link.is_connected() is False


def test_unknown_flow_control_rejected():
    with pytest.raises(ValueError):
        ComConnection("com", "loop://", flow_control="sideways")


def test_connect_and_disconnect_report_status():
    link, seen = _watched()
    link.connect_device()
    assert link.is_connected() is True
    link.disconnect_device()
    link.disconnect_device()
    assert link.is_connected() is False
    assert seen.status == [True, False]


@pytest.mark.parametrize("payload", [b"abc", b""])
def test_loopback_round_trip(payload):
    link, seen = _watched(baud_rate=115200, flow_control="hardware")
    with link:
        link.connect_device()
        if payload:
            link.send_data(payload)
        data = link.read_available()
    assert data == payload
    assert seen.data == ([payload] if payload else [])


def test_send_when_disconnected():
    link, seen = _watched()
    with pytest.raises(ConnectionError, match="Device is not connected"):
        link.send_data(b"abc")
    assert seen.errors == ["Device is not connected"]


def test_open_missing_port_fails():
    link, seen = _watched("/nonexistent/ttyPLACEHOLDER")
    with pytest.raises(ConnectionError):
        link.connect_device()
    assert len(seen.errors) == 1
    assert link.is_connected() is False


def test_available_ports_lists_names():
    infos = [SimpleNamespace(name="ttyS0"), SimpleNamespace(name="ttyUSB0")]
    with mock.patch("serial.tools.list_ports.comports", return_value=infos):
        assert ComConnection("com", "loop://").available_ports() == ["ttyS0", "ttyUSB0"]