"""
Domain snapshots.

A snapshot is the entire application state at one instant. Snapshots are
frozen pydantic models: they are never mutated, a new one replaces the old.
"""

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel


class Snapshot(BaseModel):
    """Base class for immutable state snapshots."""
    model_config = {
        "frozen": True,
    }

    namespace: ClassVar[Optional[str]] = None  # class name if None

    def copy_with(self, **changes: Any) -> "Snapshot":
        """Return a new validated snapshot with the given fields changed."""
        return self.__class__.model_validate({**self.model_dump(), **changes})

    @property
    def signals(self) -> Dict[str, Any]:
        return {self.namespace or self.__class__.__name__: self.model_dump()}


class CounterModel(Snapshot):
    """State of the counter application."""

    counter: int = 0
