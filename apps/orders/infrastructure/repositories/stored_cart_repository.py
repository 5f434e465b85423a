"""
Cart repository backed by the persistent store.
"""
import logging

from shared.infrastructure.storage import LocalStore
from ...domain.entities.cart import Cart, DEFAULT_MAX_QUANTITY
from ...domain.repositories.cart_repository import CartRepository
from ...interfaces.serializers import LineItemSerializer

logger = logging.getLogger(__name__)


class StoredCartRepository(CartRepository):
    """Keeps the cart as a JSON list of line item records under one key."""

    def __init__(
        self,
        store: LocalStore,
        key: str = 'tinystepsbd_cart',
        max_quantity: int = DEFAULT_MAX_QUANTITY,
    ):
        self.store = store
        self.key = key
        self.max_quantity = max_quantity

    def load(self) -> Cart:
        records = self.store.get(self.key, [])
        if not isinstance(records, list):
            logger.warning(f"Ignoring stored cart with unexpected shape: {type(records).__name__}")
            records = []

        items = []
        for record in records:
            serializer = LineItemSerializer(data=record)
            if serializer.is_valid():
                items.append(serializer.save())
            else:
                logger.warning(f"Dropping stored cart item: {serializer.errors}")
        return Cart.restore(items, self.max_quantity)

    def save(self, cart: Cart) -> bool:
        records = LineItemSerializer(
            cart.items,
            many=True,
            context={'max_quantity': cart.max_quantity},
        ).data
        return self.store.set(self.key, records)
