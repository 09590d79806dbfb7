"""
Storage backends.

``StorageBackend.unit_of_work()`` yields a ``Repositories`` bundle; the memory
and SQL backends are interchangeable behind it.
"""

from .base import Repositories, StorageBackend

__all__ = ["Repositories", "StorageBackend"]
