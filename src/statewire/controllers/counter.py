"""
Counter controllers.

Controllers translate a named intention into a pure computation over the
snapshot they were built with, then publish the result. The transitions
themselves are plain functions so they can be tested without a controller.
"""

import logging
from typing import Generic, Optional, TypeVar

from ..core.capabilities import Navigator, Publisher
from ..core.model import CounterModel
from ..core.store import ObservableStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ControllerError(Exception):
    """Raised when a controller is used without the collaborator it needs"""
    pass


def incremented(model: CounterModel) -> CounterModel:
    return model.copy_with(counter=model.counter + 1)


def decremented(model: CounterModel) -> CounterModel:
    return model.copy_with(counter=model.counter - 1)


def reset(model: CounterModel) -> CounterModel:
    return model.copy_with(counter=0)


class Controller(Generic[T]):
    """
    Base controller scoped to one render pass.

    Depends on a publish callback rather than a store, so it can be driven
    by a stub publisher in tests.
    """

    def __init__(self, model: T, on_model_changed: Optional[Publisher] = None,
                 navigate: Optional[Navigator] = None):
        self._model = model
        self.on_model_changed = on_model_changed
        self.navigate = navigate

    @property
    def model(self) -> T:
        return self._model

    def _publish(self, next_model: T) -> None:
        self._model = next_model
        if self.on_model_changed is not None:
            self.on_model_changed(next_model)

    def _go(self, path: str) -> None:
        if self.navigate is None:
            raise ControllerError(f"{self.__class__.__name__} has no navigator to reach {path!r}")
        logger.debug("%s navigating to %s", self.__class__.__name__, path)
        self.navigate(path)


class StoreCounterController:
    """Holds a reference to the store and replaces its snapshot directly."""

    def __init__(self, store: ObservableStore[CounterModel]):
        self._store = store

    def increment_counter(self) -> None:
        self._store.replace(incremented(self._store.current()))


class CounterUpController(Controller[CounterModel]):
    def __init__(self, model: CounterModel, on_model_changed: Publisher):
        super().__init__(model, on_model_changed)

    def increment_counter(self) -> None:
        self._publish(incremented(self._model))


class CounterDownController(Controller[CounterModel]):
    def __init__(self, model: CounterModel, on_model_changed: Publisher):
        super().__init__(model, on_model_changed)

    def decrement_counter(self) -> None:
        self._publish(decremented(self._model))


class HomeController(Controller[CounterModel]):
    """Home screen: counts up and leads to the details screen."""

    def increment(self) -> None:
        self._publish(incremented(self._model))

    def go_to_details(self) -> None:
        self._go("/details")


class DetailsController(Controller[CounterModel]):
    """Details screen: resets the counter and leads back home."""

    def reset_counter(self) -> None:
        self._publish(reset(self._model))

    def go_back(self) -> None:
        self._go("/")
