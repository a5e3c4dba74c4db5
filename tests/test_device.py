import pytest

from ite8291r2 import device
from ite8291r2.device import DeviceOpenError, DeviceWriteError, KeyboardController

PACKETS = [bytes([0x14, 0x00, i, 0, 0, 0, 0, 0]) for i in range(1, 6)]


def test_send_packets_in_order(handle):
    ctl = KeyboardController(handle)
    assert ctl.send_packets(PACKETS) == 5
    assert handle.reports == PACKETS


def test_negative_result_aborts_sequence(fake_handle_cls):
    handle = fake_handle_cls(fail_on=3)
    ctl = KeyboardController(handle)
    with pytest.raises(DeviceWriteError, match="device disconnected"):
        ctl.send_packets(PACKETS)
    assert handle.reports == PACKETS[:2]


def test_oserror_becomes_write_error(fake_handle_cls):
    handle = fake_handle_cls(raise_on=1)
    with pytest.raises(DeviceWriteError) as excinfo:
        KeyboardController(handle).send_packets(PACKETS)
    assert isinstance(excinfo.value.__cause__, OSError)
    assert handle.reports == []


def test_context_manager_closes(handle):
    with KeyboardController(handle) as ctl:
        ctl.send_feature_report(PACKETS[0])
    assert handle.closed


class _FakeDevice:
    opened = None

    def open_path(self, path):
        if path == b"/dev/denied":
            raise OSError("open failed")
        _FakeDevice.opened = path


def test_find_device_none(monkeypatch):
    monkeypatch.setattr(device, "enumerate_devices", lambda: [])
    with pytest.raises(DeviceOpenError, match="Keyboard not found"):
        device.find_device()


def test_find_device_opens_first_path(monkeypatch):
    hid = pytest.importorskip("hid")
    monkeypatch.setattr(device, "enumerate_devices", lambda: [
        {"path": b"/dev/hidraw3", "interface_number": 1},
        {"path": b"/dev/hidraw4", "interface_number": 2},
    ])
    monkeypatch.setattr(hid, "device", _FakeDevice)
    dev = device.find_device()
    assert isinstance(dev, _FakeDevice)
    assert _FakeDevice.opened == b"/dev/hidraw3"


def test_find_device_open_failure(monkeypatch):
    hid = pytest.importorskip("hid")
    monkeypatch.setattr(device, "enumerate_devices",
                        lambda: [{"path": b"/dev/denied", "interface_number": 0}])
    monkeypatch.setattr(hid, "device", _FakeDevice)
    with pytest.raises(DeviceOpenError, match="Cannot open HID device"):
        device.find_device()
