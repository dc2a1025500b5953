"""Infrastructure providers."""

# Import bases
from .clock import ClockProvider
from .notification import NotificationProvider
from .persistence import PersistenceProvider
from .storage import StorageProvider

# Import implementations (needed for __subclasses__())
from .clock import ProdClockProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "ClockProvider",
    "NotificationProvider",
    "PersistenceProvider",
    "ProdClockProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "StorageProvider",
]
