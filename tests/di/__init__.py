"""Mock providers for testing."""

from .clock import TEST_NOW, MockClockProvider
from .persistence import TEST_WINDOWS, MockPersistenceProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockClockProvider",
    "MockPersistenceProvider",
    "MockStorageProvider",
    "TEST_NOW",
    "TEST_WINDOWS",
    "build_test_container",
]
