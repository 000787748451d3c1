"""
Views - the pages of the application.

A view gets a snapshot and a controller and composes widgets from them,
passing each widget only the data and methods it needs. Views rely on the
capability protocols, not on the concrete model and controller classes.
"""

from fasthtml.common import *

from ..core.capabilities import CounterData, CounterDecrementer, CounterIncrementer, CounterResetter
from .components import ActionButton, BackForthAppBar, CenteredValue, PlusMinusButton, ValueAndButton


def CounterView(model: CounterData, controller: CounterIncrementer):
    return ValueAndButton(model.counter, controller.increment_counter)


def CounterUpView(model: CounterData, controller: CounterIncrementer):
    return Div(
        BackForthAppBar(back="/down"),
        CenteredValue(model.counter),
        PlusMinusButton(on_plus=controller.increment_counter),
    )


def CounterDownView(model: CounterData, controller: CounterDecrementer):
    return Div(
        BackForthAppBar(back="/", forth="/"),
        CenteredValue(model.counter),
        PlusMinusButton(on_minus=controller.decrement_counter),
    )


def HomeView(model: CounterData, controller):
    return Div(
        BackForthAppBar(title="Home"),
        CenteredValue(model.counter, label="Counter"),
        ActionButton("Increment", controller.increment),
        ActionButton("Go to details", controller.go_to_details),
    )


def DetailsView(model: CounterData, controller: CounterResetter):
    return Div(
        BackForthAppBar(title="Details"),
        CenteredValue(model.counter, label="Current counter"),
        ActionButton("Reset counter", controller.reset_counter),
        ActionButton("Back to home", controller.go_back),
    )
