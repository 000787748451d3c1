"""
Statewire - single-value observable state for layered counter apps

One store owns the current immutable snapshot and notifies subscribers
synchronously on every replacement. Controllers turn intentions into new
snapshots and publish them, views render snapshots, and a router picks the
(controller, view) pair for the current path.
"""

from .core import (
    ObservableStore, Subscription, StoreError, ReentrantReplaceError,
    Snapshot, CounterModel,
)
from .controllers import (
    Controller, ControllerError,
    StoreCounterController, CounterUpController, CounterDownController,
    HomeController, DetailsController,
)
from .persistence import (
    ModelPersistenceBackend, PersistenceError, MemoryBackend,
    DatabaseAccess, CounterDatabaseBackend, ChangePersister, load_or_default,
)
from .app import (
    Router, RouteConfig, Screen,
    RouterError, RouterConfigError, RouteNotFoundError, ActionNotFoundError,
    AppWiring, WiringError,
    ApplicationConfig, Environment, configure_logging, get_config, set_config,
)

__all__ = [
    # Core
    'ObservableStore',
    'Subscription',
    'StoreError',
    'ReentrantReplaceError',
    'Snapshot',
    'CounterModel',

    # Controllers
    'Controller',
    'ControllerError',
    'StoreCounterController',
    'CounterUpController',
    'CounterDownController',
    'HomeController',
    'DetailsController',

    # Persistence
    'ModelPersistenceBackend',
    'PersistenceError',
    'MemoryBackend',
    'DatabaseAccess',
    'CounterDatabaseBackend',
    'ChangePersister',
    'load_or_default',

    # Application
    'Router',
    'RouteConfig',
    'Screen',
    'RouterError',
    'RouterConfigError',
    'RouteNotFoundError',
    'ActionNotFoundError',
    'AppWiring',
    'WiringError',
    'ApplicationConfig',
    'Environment',
    'configure_logging',
    'get_config',
    'set_config',
]
