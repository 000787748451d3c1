from fasthtml.common import Script

from .components import (
    ACTION_PREFIX, action_url,
    ActionButton, CenteredValue, BackForthAppBar, PlusMinusButton, ValueAndButton,
)
from .views import CounterView, CounterUpView, CounterDownView, HomeView, DetailsView

datastar_script = Script(src="https://cdn.jsdelivr.net/gh/starfederation/datastar@v1.0.0-beta.11/bundles/datastar.js", type="module")

__all__ = [
    "datastar_script",
    "ACTION_PREFIX", "action_url",
    "ActionButton", "CenteredValue", "BackForthAppBar", "PlusMinusButton", "ValueAndButton",
    "CounterView", "CounterUpView", "CounterDownView", "HomeView", "DetailsView",
]
