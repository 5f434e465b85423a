"""
Cart entity (Aggregate Root).
"""
from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional

from shared.domain import AggregateRoot
from .. import pricing
from ..events.cart_updated import CartUpdated
from ..exceptions import InvalidQuantityError
from .line_item import LineItem

DEFAULT_MAX_QUANTITY = 10


@dataclass(eq=False)
class Cart(AggregateRoot):
    """
    Shopping cart entity.

    Invariants: product ids are unique among items and every quantity stays
    within ``[1, max_quantity]``. Totals are always recomputed from items.
    """
    items: List[LineItem] = field(default_factory=list)
    max_quantity: int = DEFAULT_MAX_QUANTITY

    @classmethod
    def create(cls, max_quantity: int = DEFAULT_MAX_QUANTITY) -> 'Cart':
        """Create a new empty cart."""
        return cls(max_quantity=max_quantity)

    @classmethod
    def restore(cls, items: Iterable[LineItem], max_quantity: int = DEFAULT_MAX_QUANTITY) -> 'Cart':
        """Rebuild a cart from stored items, merging duplicates and clamping quantities."""
        cart = cls(max_quantity=max_quantity)
        for item in items:
            if item.quantity < 1:
                continue
            existing = cart._find_item(item.product_id)
            if existing:
                existing.quantity = cart._clamp(existing.quantity + item.quantity)
            else:
                cart.items.append(replace(item, quantity=cart._clamp(item.quantity)))
        return cart

    def add_item(
        self,
        product_id: str,
        name: str,
        unit_price: int,
        quantity: int = 1,
        image_url: str = "",
        color: str = "",
        size: str = "",
    ) -> LineItem:
        """Add an item to the cart or increase its quantity if present. Excess over the cap is dropped."""
        if quantity < 1:
            raise InvalidQuantityError(quantity)

        existing = self._find_item(product_id)
        if existing:
            existing.quantity = self._clamp(existing.quantity + quantity)
        else:
            existing = LineItem(
                product_id=product_id,
                name=name,
                unit_price=unit_price,
                quantity=self._clamp(quantity),
                image_url=image_url,
                color=color,
                size=size,
            )
            self.items.append(existing)
        self._changed("add", product_id, existing.quantity)
        return existing

    def update_item_quantity(self, product_id: str, quantity: int) -> bool:
        """
        Set the quantity of an item.

        Zero or less removes the item; more than the cap is clamped. Returns
        False when the product is not in the cart.
        """
        item = self._find_item(product_id)
        if item is None:
            return False
        if quantity <= 0:
            return self.remove_item(product_id)
        item.quantity = self._clamp(quantity)
        self._changed("update", product_id, item.quantity)
        return True

    def set_variant(self, product_id: str, color: str = "", size: str = "") -> bool:
        """Record the chosen colour and size of an item."""
        item = self._find_item(product_id)
        if item is None:
            return False
        item.color = color
        item.size = size
        self._changed("variant", product_id, item.quantity)
        return True

    def remove_item(self, product_id: str) -> bool:
        """Remove an item from the cart."""
        if self._find_item(product_id) is None:
            return False
        self.items = [item for item in self.items if item.product_id != product_id]
        self._changed("remove", product_id, 0)
        return True

    def clear(self) -> None:
        """Clear all items from the cart."""
        self.items = []
        self._changed("clear", None, 0)

    def get_item(self, product_id: str) -> Optional[LineItem]:
        return self._find_item(product_id)

    def snapshot(self) -> List[LineItem]:
        """Detached copies of the items, safe to hand to consumers."""
        return [replace(item) for item in self.items]

    def _find_item(self, product_id: str) -> Optional[LineItem]:
        """Find an item in the cart by product ID."""
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def _clamp(self, quantity: int) -> int:
        return max(1, min(quantity, self.max_quantity))

    def _changed(self, action: str, product_id: Optional[str], quantity: int) -> None:
        self.touch()
        self.add_domain_event(
            CartUpdated(
                cart_id=self.id,
                action=action,
                product_id=product_id,
                quantity=quantity,
            )
        )

    @property
    def subtotal(self) -> int:
        """Calculate the cart subtotal."""
        return pricing.subtotal(self.items)

    @property
    def item_count(self) -> int:
        """Get the total number of items."""
        return sum(item.quantity for item in self.items)

    @property
    def is_empty(self) -> bool:
        """Check if the cart is empty."""
        return len(self.items) == 0
