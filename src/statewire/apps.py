"""
Demo applications.

Two route tables over the same CounterModel: an up/down counter pair and a
home/details pair with controller driven navigation.
"""

from typing import Dict

from .app.config import ApplicationConfig
from .app.router import RouteConfig
from .app.wiring import AppWiring
from .controllers import CounterDownController, CounterUpController, DetailsController, HomeController
from .core.model import CounterModel
from .persistence import CounterDatabaseBackend, DatabaseAccess, MemoryBackend, ModelPersistenceBackend
from .ui.views import CounterDownView, CounterUpView, DetailsView, HomeView


def counter_routes() -> Dict[str, RouteConfig]:
    return {
        "/": RouteConfig(
            controller_builder=lambda model, publish, navigate: CounterUpController(model, publish),
            view_builder=CounterUpView,
            actions=("increment_counter",),
            name="up",
            title="Count up",
        ),
        "/down": RouteConfig(
            controller_builder=lambda model, publish, navigate: CounterDownController(model, publish),
            view_builder=CounterDownView,
            actions=("decrement_counter",),
            name="down",
            title="Count down",
        ),
    }


def navigation_routes() -> Dict[str, RouteConfig]:
    return {
        "/": RouteConfig(
            controller_builder=HomeController,
            view_builder=HomeView,
            actions=("increment", "go_to_details"),
            name="home",
            title="Home",
        ),
        "/details": RouteConfig(
            controller_builder=DetailsController,
            view_builder=DetailsView,
            actions=("reset_counter", "go_back"),
            name="details",
            title="Details",
        ),
    }


def build_persistence(config: ApplicationConfig) -> ModelPersistenceBackend[CounterModel]:
    """Create the backend named by the persistence configuration."""
    backend = config.persistence.backend
    if backend == "memory":
        return MemoryBackend(CounterModel())
    if backend == "database":
        return CounterDatabaseBackend(DatabaseAccess(delay=config.persistence.simulated_delay))
    raise ValueError(f"Unknown persistence backend: {backend!r}")


def _wiring(routes: Dict[str, RouteConfig], config: ApplicationConfig) -> AppWiring[CounterModel]:
    return AppWiring(
        persistence=build_persistence(config),
        routes=routes,
        default_model=CounterModel(),
        initial_location=config.web.initial_location,
        persist_changes=config.persistence.persist_changes,
    )


def counter_wiring(config: ApplicationConfig) -> AppWiring[CounterModel]:
    return _wiring(counter_routes(), config)


def navigation_wiring(config: ApplicationConfig) -> AppWiring[CounterModel]:
    return _wiring(navigation_routes(), config)
