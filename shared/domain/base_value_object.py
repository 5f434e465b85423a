"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import dataclass, replace
from typing import Any, TypeVar

V = TypeVar('V', bound='ValueObject')


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.

    Subclasses are frozen dataclasses, so they compare and hash by their
    fields. A changed value is a new instance, built with ``evolve``.
    """

    def evolve(self: V, **changes: Any) -> V:
        """Copy with ``changes`` applied. ``__post_init__`` validation runs again."""
        return replace(self, **changes)
