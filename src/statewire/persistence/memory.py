"""
Statewire Persistence Layer - Memory Backend

In-memory snapshot persistence for development and testing.
"""

from typing import List, Optional, TypeVar

from .base import ModelPersistenceBackend

T = TypeVar("T")


class MemoryBackend(ModelPersistenceBackend[T]):
    """
    In-memory snapshot persistence.

    Keeps every saved snapshot in order. Data is lost when the
    application restarts.
    """

    def __init__(self, initial: T):
        self._model = initial
        self.history: List[T] = []

    async def load(self) -> T:
        """Return the last saved snapshot, or the initial one."""
        return self._model

    async def save(self, model: T) -> None:
        """Record the snapshot as the latest one."""
        self._model = model
        self.history.append(model)

    @property
    def last_saved(self) -> Optional[T]:
        return self.history[-1] if self.history else None
