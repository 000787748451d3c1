"""
Core - state snapshots, the observable store and capability interfaces.
"""

from .store import ObservableStore, Subscription, StoreError, ReentrantReplaceError
from .model import Snapshot, CounterModel
from .capabilities import (
    Publisher, Navigator,
    CounterData, CounterIncrementer, CounterDecrementer, CounterResetter,
)

__all__ = [
    "ObservableStore", "Subscription", "StoreError", "ReentrantReplaceError",
    "Snapshot", "CounterModel",
    "Publisher", "Navigator",
    "CounterData", "CounterIncrementer", "CounterDecrementer", "CounterResetter",
]
