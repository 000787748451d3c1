"""
Store <-> backend synchronisation.

Loading happens once, before the store exists. Saving is driven by store
notifications and never blocks or reverses a replace(): each change schedules
a fire-and-forget task, chained behind the previous save, and failures are
only logged.
"""

import asyncio
import logging
from typing import Optional, Set, TypeVar

from ..core.store import ObservableStore, Subscription
from .base import ModelPersistenceBackend

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def load_or_default(backend: ModelPersistenceBackend[T], default: T) -> T:
    """
    Load the initial snapshot, falling back to a default.

    Args:
        backend: Backend to load from
        default: Snapshot used when loading fails

    Returns:
        The loaded snapshot, or default if the backend raised
    """
    try:
        model = await backend.load()
    except Exception:
        logger.exception("%s: load failed, starting from default %r",
                         backend.__class__.__name__, default)
        return default
    logger.info("%s: loaded %r", backend.__class__.__name__, model)
    return model


class ChangePersister:
    """
    Mirrors every snapshot a store publishes into a backend.

    Saves run one after another in publish order, so the backend always
    ends up holding the latest snapshot.
    """

    def __init__(self, backend: ModelPersistenceBackend):
        self.backend = backend
        self._subscription: Optional[Subscription] = None
        self._tasks: Set[asyncio.Task] = set()
        self._last_task: Optional[asyncio.Task] = None

    def attach(self, store: ObservableStore) -> None:
        """Start persisting the snapshots published by store."""
        if self._subscription is not None:
            self.detach()
        self._subscription = store.subscribe(self._on_change, pass_value=True)

    def detach(self) -> None:
        """Stop persisting. Saves already scheduled still run."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    @property
    def attached(self) -> bool:
        return self._subscription is not None

    @property
    def pending(self) -> int:
        """Number of saves scheduled but not finished."""
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for every scheduled save to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    def _on_change(self, model) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("No running event loop, save of %r skipped", model)
            return
        task = loop.create_task(self._save(model, self._last_task))
        self._last_task = task
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _save(self, model, previous: Optional[asyncio.Task]) -> None:
        if previous is not None and not previous.done():
            await asyncio.wait([previous])
        try:
            await self.backend.save(model)
        except Exception:
            logger.exception("%s: save of %r failed", self.backend.__class__.__name__, model)
