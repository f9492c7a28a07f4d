"""Media storage backends."""

from .inmemory import InMemoryMediaStorage
from .local import LocalMediaStorage

__all__ = [
    "InMemoryMediaStorage",
    "LocalMediaStorage",
]
