"""
Display and interaction widgets.

Widgets know nothing about models or controllers. They get the exact data
they display and the controller methods they trigger; a method is turned
into a form posting to /actions/<method name>.
"""

from typing import Callable, Optional

from fasthtml.common import *

ACTION_PREFIX = "/actions"


def action_url(handler: Callable) -> str:
    """URL that performs handler on the current screen."""
    return f"{ACTION_PREFIX}/{handler.__name__}"


def ActionButton(label: str, handler: Callable, **kwargs):
    return Form(
        Button(label, type="submit", **kwargs),
        method="post", action=action_url(handler), cls="action",
    )


def CenteredValue(value: int, label: str = "Value"):
    return Div(P(f"{label}: {value}", cls="value"), cls="centered")


def BackForthAppBar(back: Optional[str] = None, forth: Optional[str] = None, title: str = ""):
    """App bar with back/forward links. A missing target renders inert."""
    def arrow(symbol, href, rel):
        if href is None:
            return Span(symbol, cls="disabled")
        return A(symbol, href=href, rel=rel)

    children = [Nav(arrow("←", back, "prev"), arrow("→", forth, "next"))]
    if title:
        children.append(H1(title))
    return Header(*children, cls="app-bar")


def PlusMinusButton(on_plus: Optional[Callable] = None, on_minus: Optional[Callable] = None):
    handler = on_plus or on_minus
    if handler is None:
        raise ValueError("PlusMinusButton needs on_plus or on_minus")
    return ActionButton("+" if on_plus is not None else "−", handler, cls="fab")


def ValueAndButton(value: int, on_pressed: Callable):
    return Div(CenteredValue(value), ActionButton("+", on_pressed, cls="fab"))
