"""
Statewire Persistence Layer - Database Stub

Lower level access to the counter as it would be stored, with a fixed
simulated latency on every call. Always succeeds.
"""

import asyncio
import logging

from ..core.model import CounterModel
from .base import ModelPersistenceBackend

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.1  # seconds


class DatabaseAccess:
    """Simulated database holding a single integer."""

    def __init__(self, delay: float = DEFAULT_DELAY):
        self.delay = delay

    async def load_counter(self) -> int:
        await asyncio.sleep(self.delay)
        return 0

    async def save_counter(self, counter: int) -> None:
        await asyncio.sleep(self.delay)
        logger.debug("Saved counter=%s", counter)


class CounterDatabaseBackend(ModelPersistenceBackend[CounterModel]):
    """Maps CounterModel snapshots onto DatabaseAccess."""

    def __init__(self, db: DatabaseAccess = None):
        self.db = db or DatabaseAccess()

    async def load(self) -> CounterModel:
        return CounterModel(counter=await self.db.load_counter())

    async def save(self, model: CounterModel) -> None:
        await self.db.save_counter(model.counter)
