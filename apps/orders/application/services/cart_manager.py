"""
Cart manager.

The single owner of the shopper's cart. Every mutation is persisted before
the method returns, and subscribers receive the recomputed cart state.
"""
import logging
from typing import Callable, List, Optional

from shared.application import UseCaseResult
from shared.domain.exceptions import DomainException, ValidationError
from shared.interfaces import Notifier, handle_domain_exception
from apps.catalog.domain.entities.catalog import Catalog
from ...domain import pricing
from ...domain.entities.cart import Cart
from ...domain.entities.line_item import LineItem
from ...domain.exceptions import InvalidCouponError, QuantityLimitError
from ...domain.repositories.cart_repository import CartRepository
from ...domain.value_objects.delivery_area import DeliveryArea
from ...domain.value_objects.price_summary import PriceSummary
from ...domain.value_objects.pricing_policy import PricingPolicy, DEFAULT_POLICY
from ..dtos.cart_dto import CartDTO

logger = logging.getLogger(__name__)

CartSubscriber = Callable[[CartDTO], None]


class CartManager:
    """
    Owns the in-memory cart and its persisted copy.

    Operations never raise domain errors. A failure is reported through the
    notifier and returned as a failed ``UseCaseResult``; the cart is left as
    it was.
    """

    def __init__(
        self,
        catalog: Catalog,
        repository: CartRepository,
        notifier: Notifier,
        policy: PricingPolicy = DEFAULT_POLICY,
    ):
        self.catalog = catalog
        self.repository = repository
        self.notifier = notifier
        self.policy = policy
        self.coupon_code = ""
        self.delivery_area: Optional[DeliveryArea] = None
        self._subscribers: List[CartSubscriber] = []
        self.cart: Cart = repository.load()
        logger.debug(f"Cart restored with {len(self.cart.items)} items")

    def subscribe(self, callback: CartSubscriber) -> Callable[[], None]:
        """Register a callback for cart changes. Returns its unsubscribe function."""
        self._subscribers.append(callback)
        return lambda: self._subscribers.remove(callback)

    # Mutations

    def add_item(self, product_id: str, quantity: int = 1, color: str = "", size: str = "") -> UseCaseResult[CartDTO]:
        """Add a catalog product, or raise the quantity of the line already in the cart."""
        try:
            product = self.catalog.get(product_id)
            existing = self.cart.get_item(product_id)
            wanted = (existing.quantity if existing else 0) + quantity
            item = self.cart.add_item(
                product_id=product.id,
                name=product.name,
                unit_price=product.price.amount,
                quantity=quantity,
                image_url=product.image_url,
                color=color,
                size=size,
            )
        except DomainException as e:
            return handle_domain_exception(e, self.notifier)

        dto = self._commit()
        if item.quantity < wanted:
            self.notifier.warning(
                f"You can order at most {self.cart.max_quantity} of {product.name}.",
                code="MAX_QUANTITY",
            )
        else:
            self.notifier.success(f"{product.name} added to cart.")
        return UseCaseResult.ok(dto)

    def set_quantity(self, product_id: str, quantity: int) -> UseCaseResult[CartDTO]:
        """Set a line's quantity. Zero removes it; absent products are ignored."""
        if not self.cart.update_item_quantity(product_id, quantity):
            return UseCaseResult.ok(self._dto())
        return UseCaseResult.ok(self._commit())

    def increase(self, product_id: str) -> UseCaseResult[CartDTO]:
        item = self.cart.get_item(product_id)
        if item is None:
            return UseCaseResult.ok(self._dto())
        if item.quantity >= self.cart.max_quantity:
            return handle_domain_exception(
                QuantityLimitError(product_id, self.cart.max_quantity),
                self.notifier,
            )
        return self.set_quantity(product_id, item.quantity + 1)

    def decrease(self, product_id: str) -> UseCaseResult[CartDTO]:
        """Step down by one. At quantity 1 the line is removed."""
        item = self.cart.get_item(product_id)
        if item is None:
            return UseCaseResult.ok(self._dto())
        if item.quantity <= 1:
            return self.remove_item(product_id)
        return self.set_quantity(product_id, item.quantity - 1)

    def set_variant(self, product_id: str, color: str = "", size: str = "") -> UseCaseResult[CartDTO]:
        if not self.cart.set_variant(product_id, color=color, size=size):
            return UseCaseResult.ok(self._dto())
        return UseCaseResult.ok(self._commit())

    def remove_item(self, product_id: str) -> UseCaseResult[CartDTO]:
        item = self.cart.get_item(product_id)
        if item is None:
            return UseCaseResult.ok(self._dto())
        self.cart.remove_item(product_id)
        dto = self._commit()
        self.notifier.info(f"{item.name} removed from cart.")
        return UseCaseResult.ok(dto)

    def clear(self, quiet: bool = False) -> UseCaseResult[CartDTO]:
        """Empty the cart and drop the applied coupon."""
        self.cart.clear()
        self.coupon_code = ""
        dto = self._commit()
        if not quiet:
            self.notifier.info("Your cart is now empty.")
        return UseCaseResult.ok(dto)

    # Pricing inputs

    def apply_coupon(self, code: str) -> UseCaseResult[CartDTO]:
        """Apply a coupon. An unknown code leaves the current coupon in place."""
        try:
            if not (code or "").strip():
                raise ValidationError("Please enter a coupon code.", field="coupon_code")
            applied = pricing.discount(self.cart.subtotal, code, self.policy)
            if applied.is_invalid:
                raise InvalidCouponError(applied.code)
        except DomainException as e:
            return handle_domain_exception(e, self.notifier)

        self.coupon_code = applied.code
        dto = self._publish()
        coupon = self.policy.coupon(applied.code)
        self.notifier.success(f"Coupon {applied.code} applied: {coupon.percent}% off.")
        return UseCaseResult.ok(dto)

    def remove_coupon(self) -> UseCaseResult[CartDTO]:
        self.coupon_code = ""
        return UseCaseResult.ok(self._publish())

    def select_delivery_area(self, area) -> UseCaseResult[CartDTO]:
        parsed = DeliveryArea.parse(area)
        if parsed is None:
            return handle_domain_exception(
                ValidationError("Please select a delivery area.", field="delivery_area"),
                self.notifier,
            )
        self.delivery_area = parsed
        return UseCaseResult.ok(self._publish())

    # Queries

    def summary(self) -> PriceSummary:
        return pricing.summarize(self.cart.items, self.delivery_area, self.coupon_code, self.policy)

    def snapshot(self) -> List[LineItem]:
        return self.cart.snapshot()

    @property
    def item_count(self) -> int:
        return self.cart.item_count

    @property
    def is_empty(self) -> bool:
        return self.cart.is_empty

    # Internals

    def _dto(self) -> CartDTO:
        return CartDTO.from_entity(self.cart, self.summary(), self.coupon_code, self.delivery_area)

    def _commit(self) -> CartDTO:
        """Persist the cart, then publish it."""
        for event in self.cart.clear_domain_events():
            logger.debug(f"{event.event_type} {event.action}: product={event.product_id} quantity={event.quantity}")
        if not self.repository.save(self.cart):
            logger.debug("Cart change kept in memory only")
        return self._publish()

    def _publish(self) -> CartDTO:
        dto = self._dto()
        for callback in list(self._subscribers):
            try:
                callback(dto)
            except Exception:
                logger.exception("Cart subscriber failed")
        return dto
