"""
Statewire Persistence Layer - Base Classes

This module provides the abstract interface for snapshot persistence backends.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class PersistenceError(Exception):
    """Raised by backends when a load or save cannot be completed"""
    pass


class ModelPersistenceBackend(ABC, Generic[T]):
    """
    Abstract base class for snapshot persistence backends.

    The in-memory store stays the source of truth; a backend only provides
    the initial snapshot and mirrors later ones on a best-effort basis.
    """

    @abstractmethod
    async def load(self) -> T:
        """
        Load the snapshot the application starts from.

        Returns:
            The persisted snapshot

        Raises:
            PersistenceError: If the snapshot cannot be loaded
        """
        pass

    @abstractmethod
    async def save(self, model: T) -> None:
        """
        Persist a snapshot.

        Args:
            model: Snapshot to persist

        Raises:
            PersistenceError: If the snapshot cannot be saved
        """
        pass
