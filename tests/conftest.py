"""
Pytest configuration for syncstate tests.

Coroutine tests are marked with ``@pytest.mark.asyncio``.
"""

import tempfile
from typing import Generator

import pytest

from syncstate.bridge import SyncStateBridge
from syncstate.config import SyncStateHostConfig
from syncstate.host import SyncStateHost
from syncstate.transport import InMemoryHostBus

from tests.mocks import RecordingBus, RecordingLogger, RecordingSubscriber


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "asyncio: mark test as async"
    )


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def recording_bus() -> RecordingBus:
    return RecordingBus()


@pytest.fixture
def subscriber_factory():
    def create_subscriber(name: str = "observer") -> RecordingSubscriber:
        return RecordingSubscriber(name=name)

    return create_subscriber


@pytest.fixture
def bus() -> InMemoryHostBus:
    return InMemoryHostBus()


@pytest.fixture
def host(bus: InMemoryHostBus, recording_logger: RecordingLogger) -> SyncStateHost:
    return SyncStateHost(
        bus,
        config=SyncStateHostConfig(),
        logger=recording_logger,
    )


@pytest.fixture
def bridge_factory(bus: InMemoryHostBus):
    def create_bridge() -> SyncStateBridge:
        return SyncStateBridge(bus.connect())

    return create_bridge


@pytest.fixture
def temp_log_directory() -> Generator[str, None, None]:
    with tempfile.TemporaryDirectory() as temp_directory:
        yield temp_directory
