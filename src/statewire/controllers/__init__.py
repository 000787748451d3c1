from .counter import (
    Controller, ControllerError,
    StoreCounterController, CounterUpController, CounterDownController,
    HomeController, DetailsController,
    incremented, decremented, reset,
)

__all__ = [
    "Controller", "ControllerError",
    "StoreCounterController", "CounterUpController", "CounterDownController",
    "HomeController", "DetailsController",
    "incremented", "decremented", "reset",
]
