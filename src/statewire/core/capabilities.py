"""
Capability interfaces.

Views and widgets depend on these narrow protocols instead of the concrete
model and controller classes, so any object with the right shape can be
rendered or driven.
"""

from typing import Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

# Hands a freshly computed snapshot to whoever owns the state
Publisher = Callable[[T], None]
Navigator = Callable[[str], None]


@runtime_checkable
class CounterData(Protocol):
    """Read-only access to the counter value."""

    @property
    def counter(self) -> int: ...


@runtime_checkable
class CounterIncrementer(Protocol):
    def increment_counter(self) -> None: ...


@runtime_checkable
class CounterDecrementer(Protocol):
    def decrement_counter(self) -> None: ...


@runtime_checkable
class CounterResetter(Protocol):
    def reset_counter(self) -> None: ...
