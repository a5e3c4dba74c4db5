import pytest


class FakeHandle:
    """Stands in for hid.device: records reports, optionally fails on one."""

    def __init__(self, fail_on=None, raise_on=None):
        self.reports = []
        self.closed = False
        self._fail_on = fail_on
        self._raise_on = raise_on

    def send_feature_report(self, data):
        index = len(self.reports) + 1
        if index == self._raise_on:
            raise OSError("broken pipe")
        if index == self._fail_on:
            return -1
        self.reports.append(bytes(data))
        return len(data)

    def error(self):
        return "device disconnected"

    def close(self):
        self.closed = True


@pytest.fixture
def handle():
    return FakeHandle()


@pytest.fixture
def fake_handle_cls():
    return FakeHandle
