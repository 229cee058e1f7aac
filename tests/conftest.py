import pytest

from drape.app import Diagnostics
from drape.test_utils import SpyBus


@pytest.fixture
def spy_bus(monkeypatch):
    bus = SpyBus()
    with bus.patch(monkeypatch):
        yield bus


@pytest.fixture
def diagnostics():
    # A fresh latch per test; the process-wide one is never reset.
    return Diagnostics()
