"""
Statewire Persistence Layer

Backends that provide the initial snapshot and mirror later ones.
"""

from .base import ModelPersistenceBackend, PersistenceError
from .memory import MemoryBackend
from .database import DatabaseAccess, CounterDatabaseBackend
from .sync import load_or_default, ChangePersister

__all__ = [
    "ModelPersistenceBackend",
    "PersistenceError",
    "MemoryBackend",
    "DatabaseAccess",
    "CounterDatabaseBackend",
    "load_or_default",
    "ChangePersister",
]
