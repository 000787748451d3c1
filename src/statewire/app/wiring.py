"""
Application wiring.

Loads the initial snapshot, creates the store, mirrors changes into the
persistence backend and hands the store to the router. Nothing can render
before start() has finished awaiting the load.
"""

import logging
from typing import Dict, Generic, Optional, TypeVar

from ..core.store import ObservableStore
from ..persistence.base import ModelPersistenceBackend
from ..persistence.sync import ChangePersister, load_or_default
from .router import RouteConfig, Router

logger = logging.getLogger(__name__)

T = TypeVar("T")


class WiringError(Exception):
    """Raised when the wiring is used before start()"""
    pass


class AppWiring(Generic[T]):
    """
    Wires model, store, persistence and routes together.

    Example:
        wiring = AppWiring(
            persistence=CounterDatabaseBackend(),
            routes={"/": RouteConfig(controller_builder=..., view_builder=...)},
            default_model=CounterModel(),
        )
        await wiring.start()
    """

    def __init__(self, persistence: ModelPersistenceBackend[T], routes: Dict[str, RouteConfig],
                 default_model: T, initial_location: Optional[str] = None,
                 persist_changes: bool = True):
        self.persistence = persistence
        self.routes = dict(routes)
        self.default_model = default_model
        self.initial_location = initial_location
        self.persist_changes = persist_changes
        self.persister = ChangePersister(persistence)
        self._store: Optional[ObservableStore[T]] = None
        self._router: Optional[Router[T]] = None

    @property
    def started(self) -> bool:
        return self._store is not None

    @property
    def store(self) -> ObservableStore[T]:
        if self._store is None:
            raise WiringError("AppWiring.start() has not completed")
        return self._store

    @property
    def router(self) -> Router[T]:
        if self._router is None:
            raise WiringError("AppWiring.start() has not completed")
        return self._router

    async def start(self) -> "AppWiring[T]":
        """Load the initial snapshot and build store and router."""
        if self.started:
            return self
        model = await load_or_default(self.persistence, self.default_model)
        store = ObservableStore(model)
        router = Router(store, self.routes, self.initial_location)
        if self.persist_changes:
            self.persister.attach(store)
        self._store, self._router = store, router
        logger.info("Started with %r at %s", model, router.location)
        return self

    async def stop(self) -> None:
        """Stop persisting, wait for pending saves and release the router."""
        self.persister.detach()
        await self.persister.drain()
        if self._router is not None:
            self._router.close()
        logger.info("Stopped")
