"""
Router - path based screen selection.

The current screen is never stored. It is recomputed from the current
location and the latest snapshot every time it is asked for, with a fresh
controller whose publish path leads back to the shared store. Only the
store's snapshot survives a navigation.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

from ..core.capabilities import Navigator, Publisher
from ..core.store import ObservableStore, Subscription

logger = logging.getLogger(__name__)

T = TypeVar("T")

ControllerBuilder = Callable[[Any, Publisher, Navigator], Any]
ViewBuilder = Callable[[Any, Any], Any]


class RouterError(Exception):
    """Base exception for router errors"""
    pass


class RouterConfigError(RouterError):
    """Raised when the route table is invalid"""
    pass


class RouteNotFoundError(RouterError):
    """Raised when navigating to a path that was never declared"""
    pass


class ActionNotFoundError(RouterError):
    """Raised when performing an action the current route does not expose"""
    pass


@dataclass(frozen=True)
class RouteConfig:
    """How to build the controller and view for one path."""
    controller_builder: ControllerBuilder
    view_builder: ViewBuilder
    actions: Tuple[str, ...] = ()
    name: Optional[str] = None
    title: str = ""


@dataclass(frozen=True)
class Screen:
    """The (controller, view) pair active for a location and snapshot."""
    path: str
    route: RouteConfig
    model: Any
    controller: Any
    view: Any = field(default=None, compare=False)


class Router(Generic[T]):
    """
    Maps the current location to a Screen and reports when it changes.

    Listeners are notified whenever the location changes or the store
    publishes a new snapshot.
    """

    def __init__(self, store: ObservableStore[T], routes: Dict[str, RouteConfig],
                 initial_location: Optional[str] = None):
        if not routes:
            raise RouterConfigError("At least one route is required")
        for path in routes:
            if not path.startswith("/"):
                raise RouterConfigError(f"Route path must start with '/': {path!r}")

        initial = initial_location if initial_location is not None else next(iter(routes))
        if initial not in routes:
            raise RouterConfigError(f"Initial location {initial!r} is not a declared route")

        self._store = store
        self._routes = dict(routes)
        self._location = ObservableStore(initial)
        # Bumped on every location or snapshot change
        self._revision = ObservableStore(0)
        self._subscriptions = [
            store.subscribe(self._refresh),
            self._location.subscribe(self._refresh),
        ]

    @property
    def location(self) -> str:
        return self._location.current()

    @property
    def routes(self) -> Dict[str, RouteConfig]:
        return dict(self._routes)

    def navigate(self, path: str) -> None:
        """Make path the current location."""
        if path not in self._routes:
            raise RouteNotFoundError(f"No route declared for {path!r}")
        logger.debug("Navigating %s -> %s", self.location, path)
        self._location.replace(path)

    def screen(self) -> Screen:
        """Build the screen for the current location and latest snapshot."""
        path = self.location
        route = self._routes[path]
        model = self._store.current()
        controller = route.controller_builder(model, self._store.replace, self.navigate)
        view = route.view_builder(model, controller)
        return Screen(path=path, route=route, model=model, controller=controller, view=view)

    def perform(self, action: str) -> Screen:
        """
        Invoke a declared action on a freshly built controller.

        Args:
            action: Name of a controller method listed in the route's actions

        Returns:
            The screen the action was performed on
        """
        screen = self.screen()
        if action not in screen.route.actions:
            raise ActionNotFoundError(f"Route {screen.path!r} has no action {action!r}")
        logger.debug("Performing %s on %s", action, screen.path)
        getattr(screen.controller, action)()
        return screen

    def subscribe(self, callback: Callable[[Screen], Any]) -> Subscription:
        """Call callback with the recomputed Screen after every change."""
        return self._revision.subscribe(lambda _revision: callback(self.screen()), pass_value=True)

    @property
    def listener_count(self) -> int:
        return self._revision.subscriber_count

    def close(self) -> None:
        """Stop following the store."""
        for subscription in self._subscriptions:
            subscription.unsubscribe()

    def _refresh(self) -> None:
        self._revision.replace(self._revision.current() + 1)
