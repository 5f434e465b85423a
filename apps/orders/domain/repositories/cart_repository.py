"""
Cart repository interface.
"""
from abc import ABC, abstractmethod

from ..entities.cart import Cart


class CartRepository(ABC):
    """Abstract repository for the Cart aggregate."""

    @abstractmethod
    def load(self) -> Cart:
        """Load the persisted cart, or a new empty cart if there is none."""
        pass

    @abstractmethod
    def save(self, cart: Cart) -> bool:
        """Persist a cart. Returns False when it could not be persisted."""
        pass
