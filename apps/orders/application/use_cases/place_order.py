"""
Place order use case.
"""
import logging
from dataclasses import asdict
from typing import Dict, List

from shared.application import UseCase, UseCaseResult
from shared.domain.exceptions import DomainException
from shared.interfaces import Notifier, handle_domain_exception
from ...domain import pricing
from ...domain.entities.line_item import LineItem
from ...domain.entities.order import Order
from ...domain.exceptions import EmptyCartError, CheckoutValidationError, CheckoutInProgressError
from ...domain.repositories.order_gateway import OrderGateway
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects.checkout_state import CheckoutState
from ...domain.value_objects.delivery_area import DeliveryArea
from ...domain.value_objects.order_request import OrderRequest
from ...domain.value_objects.phone_number import PhoneNumber
from ...domain.value_objects.shipping_info import ShippingInfo
from ...interfaces.serializers import CheckoutFormSerializer
from ..dtos.checkout_dto import CheckoutFormDTO, OrderConfirmationDTO
from ..services.cart_manager import CartManager

logger = logging.getLogger(__name__)


class PlaceOrderUseCase(UseCase[CheckoutFormDTO, OrderConfirmationDTO]):
    """
    Checkout: validate the form, snapshot the cart, submit, clear on success.

    The cart is only emptied after the endpoint accepted the order. Any
    failure leaves it untouched so the shopper can resubmit.
    """

    def __init__(
        self,
        cart_manager: CartManager,
        gateway: OrderGateway,
        orders: OrderRepository,
        notifier: Notifier,
        require_variants: bool = False,
    ):
        self.cart_manager = cart_manager
        self.gateway = gateway
        self.orders = orders
        self.notifier = notifier
        self.require_variants = require_variants
        self.state = CheckoutState.IDLE

    @property
    def in_progress(self) -> bool:
        return self.state in (CheckoutState.VALIDATING, CheckoutState.SUBMITTING)

    def execute(self, input_dto: CheckoutFormDTO) -> UseCaseResult[OrderConfirmationDTO]:
        if self.in_progress:
            return handle_domain_exception(CheckoutInProgressError(self.state.value), self.notifier)

        try:
            return self._place(input_dto)
        finally:
            # Anything short of success, including an escaping error, ends in Idle.
            if self.state != CheckoutState.SUCCESS:
                self.state = CheckoutState.IDLE

    def _place(self, input_dto: CheckoutFormDTO) -> UseCaseResult[OrderConfirmationDTO]:
        try:
            self.state = CheckoutState.VALIDATING
            request = self.build_request(input_dto)

            self.state = CheckoutState.SUBMITTING
            receipt = self.gateway.submit(request)
        except DomainException as e:
            self.state = CheckoutState.FAILED
            logger.warning(f"Checkout failed [{e.code}]: {e.message}")
            return handle_domain_exception(e, self.notifier)

        order = Order.place(
            request,
            receipt.order_number,
            total_amount=receipt.total_amount,
            confirmed=receipt.confirmed,
        )
        for event in order.clear_domain_events():
            logger.info(f"{event.event_type}: {event.order_number} total={event.total_amount} confirmed={event.confirmed}")
        self.orders.add(order)
        self.cart_manager.clear(quiet=True)
        self.state = CheckoutState.SUCCESS

        if order.confirmed:
            self.notifier.success(f"Order placed! Your order number is {order.order_number}.")
        else:
            self.notifier.warning(
                f"Order sent, but the shop has not confirmed it yet. Reference: {order.order_number}.",
                code="ORDER_UNCONFIRMED",
            )

        return UseCaseResult.ok(
            OrderConfirmationDTO(
                order_number=order.order_number.value,
                total_amount=order.total_amount,
                item_count=order.item_count,
                customer_name=order.customer_name,
                confirmed=order.confirmed,
            )
        )

    def build_request(self, form: CheckoutFormDTO) -> OrderRequest:
        """
        Validate ``form`` against the current cart and snapshot both.

        Raises ``EmptyCartError`` before looking at the form, then
        ``CheckoutValidationError`` listing every failing field.
        """
        items = self.cart_manager.snapshot()
        if not items:
            raise EmptyCartError()

        data = asdict(form)
        if not data['delivery_area']:
            area = self.cart_manager.delivery_area or DeliveryArea.guess_from_address(data['address'])
            if area is not None:
                data['delivery_area'] = area.value

        serializer = CheckoutFormSerializer(data=data)
        errors: Dict[str, List[str]] = {}
        if not serializer.is_valid():
            errors = {name: [str(message) for message in messages] for name, messages in serializer.errors.items()}
        if self.require_variants:
            missing = self._missing_variants(items)
            if missing:
                errors['items'] = missing
        if errors:
            raise CheckoutValidationError(errors)

        validated = serializer.validated_data
        shipping = ShippingInfo(
            customer_name=validated['customer_name'],
            phone=PhoneNumber(validated['phone']),
            address=validated['address'],
            delivery_area=DeliveryArea(validated['delivery_area']),
            email=validated.get('email', ""),
            payment_method=validated.get('payment_method', "cash"),
            special_notes=validated.get('special_notes', ""),
        )
        summary = pricing.summarize(
            items,
            shipping.delivery_area,
            self.cart_manager.coupon_code,
            self.cart_manager.policy,
        )
        return OrderRequest.create(shipping, items, summary)

    @staticmethod
    def _missing_variants(items: List[LineItem]) -> List[str]:
        return [
            f"Please choose a colour and size for {item.name}."
            for item in items
            if not item.has_variant
        ]

    def history(self) -> List[Order]:
        """Orders placed from this device, oldest first."""
        return self.orders.find_all()
