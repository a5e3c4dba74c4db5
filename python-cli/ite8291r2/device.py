"""
ITE 8291r2 - HID device discovery and the feature-report write path.
"""

import logging

from ite8291r2.protocol import VENDOR_ID, PRODUCT_ID

_LOGGER = logging.getLogger(__name__)


class DeviceError(RuntimeError):
    """Base class for keyboard I/O failures."""


class DeviceOpenError(DeviceError):
    """No matching keyboard, or it could not be opened."""


class DeviceWriteError(DeviceError):
    """A feature report could not be sent."""


def enumerate_devices():
    """Return hidapi info dicts for every 048D:CE00 interface."""
    import hid

    return hid.enumerate(VENDOR_ID, PRODUCT_ID)


def find_device():
    """Find and open the keyboard controller.

    Returns:
        An open ``hid.device`` handle.

    Raises:
        DeviceOpenError: nothing matches VENDOR_ID/PRODUCT_ID, or the open
            call failed (usually hidraw permissions).
    """
    import hid

    devs = enumerate_devices()
    if not devs:
        raise DeviceOpenError(
            f"Keyboard not found (0x{VENDOR_ID:04X}:0x{PRODUCT_ID:04X})")

    info = devs[0]
    _LOGGER.debug("Opening %s (interface %s)", info["path"], info.get("interface_number"))
    dev = hid.device()
    try:
        dev.open_path(info["path"])
    except (OSError, ValueError) as e:
        raise DeviceOpenError(
            f"Cannot open HID device: {e}\n"
            "  Run as root, or add a udev rule granting access to the hidraw node."
        ) from e
    return dev


class KeyboardController:
    """Sends feature reports to an open handle.

    The handle only needs ``send_feature_report(data)``, ``error()`` and
    ``close()``; anything with that shape works in place of ``hid.device``.
    """

    def __init__(self, handle):
        self._handle = handle

    @classmethod
    def open(cls):
        return cls(find_device())

    def send_feature_report(self, packet):
        _LOGGER.debug("TX %s", packet.hex(" "))
        try:
            result = self._handle.send_feature_report(packet)
        except (OSError, ValueError) as e:
            raise DeviceWriteError(f"feature report {packet.hex()} failed: {e}") from e
        if result is not None and result < 0:
            raise DeviceWriteError(
                f"feature report {packet.hex()} failed: {self._handle.error()}")

    def send_packets(self, packets):
        """Send packets in order; the first failure stops the sequence.

        Returns:
            int: number of packets sent.
        """
        sent = 0
        for packet in packets:
            self.send_feature_report(packet)
            sent += 1
        return sent

    def close(self):
        self._handle.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
