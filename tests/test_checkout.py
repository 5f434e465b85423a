"""
Checkout tests.
"""
from unittest.mock import MagicMock

import pytest

from shared.interfaces import NotificationLevel
from apps.orders.application.dtos import CheckoutFormDTO
from apps.orders.application.use_cases import PlaceOrderUseCase
from apps.orders.domain.exceptions import OrderNetworkError, OrderRejectedError, OrderTimeoutError
from apps.orders.domain.repositories import OrderGateway, SubmissionReceipt
from apps.orders.domain.value_objects import CheckoutState, DeliveryArea, OrderNumber


def valid_form(**overrides):
    data = dict(
        customer_name='Rahim Uddin',
        phone='01712345678',
        address='House 12, Road 5, Dhanmondi, Dhaka',
        delivery_area='inside_dhaka',
    )
    data.update(overrides)
    return CheckoutFormDTO(**data)


@pytest.fixture
def gateway():
    gateway = MagicMock(spec=OrderGateway)
    gateway.submit.return_value = SubmissionReceipt(order_number=OrderNumber('TS-1001'), total_amount=1080)
    return gateway


@pytest.fixture
def checkout(cart_manager, gateway, order_repository, notifier):
    return PlaceOrderUseCase(
        cart_manager=cart_manager,
        gateway=gateway,
        orders=order_repository,
        notifier=notifier,
    )


class TestEmptyCart:
    def test_rejected_without_network(self, checkout, gateway):
        result = checkout.execute(valid_form())

        assert not result.success
        assert result.error_code == 'EMPTY_CART'
        gateway.submit.assert_not_called()
        assert checkout.state == CheckoutState.IDLE


class TestValidation:
    def test_short_phone(self, checkout, cart_manager, gateway):
        cart_manager.add_item('P1')

        result = checkout.execute(valid_form(phone='0171234567'))

        assert not result.success
        assert result.error_code == 'VALIDATION_ERROR'
        assert list(result.details['errors']) == ['phone']
        gateway.submit.assert_not_called()

    def test_every_failing_field_is_reported(self, checkout, cart_manager):
        cart_manager.add_item('P1')

        result = checkout.execute(CheckoutFormDTO(customer_name='R', phone='12345', address='Dhaka', delivery_area='moon'))

        assert set(result.details['errors']) == {'customer_name', 'phone', 'address', 'delivery_area'}

    def test_invalid_email(self, checkout, cart_manager):
        cart_manager.add_item('P1')

        result = checkout.execute(valid_form(email='not-an-email'))

        assert list(result.details['errors']) == ['email']

    @pytest.mark.parametrize('phone', ['+8801712345678', '8801712345678', '017-1234-5678'])
    def test_accepted_phone_formats(self, checkout, cart_manager, gateway, phone):
        cart_manager.add_item('P1')

        assert checkout.execute(valid_form(phone=phone)).success
        request = gateway.submit.call_args.args[0]
        assert request.shipping.phone.value == '01712345678'

    def test_area_chosen_in_cart_is_used(self, checkout, cart_manager, gateway):
        cart_manager.add_item('P1')
        cart_manager.select_delivery_area('outside_divisional')

        assert checkout.execute(valid_form(delivery_area='')).success
        assert gateway.submit.call_args.args[0].delivery_fee == 200

    def test_area_guessed_from_dhaka_address(self, checkout, cart_manager, gateway):
        cart_manager.add_item('P1')

        assert checkout.execute(valid_form(delivery_area='', address='Flat 4B, Road 11, Banani')).success
        assert gateway.submit.call_args.args[0].shipping.delivery_area == DeliveryArea.INSIDE_DHAKA

    def test_missing_area_without_a_guess(self, checkout, cart_manager):
        cart_manager.add_item('P1')

        result = checkout.execute(valid_form(delivery_area='', address='Station Road, Rajshahi'))

        assert list(result.details['errors']) == ['delivery_area']

    def test_variants_required_when_enabled(self, checkout, cart_manager, gateway):
        checkout.require_variants = True
        cart_manager.add_item('P1')

        result = checkout.execute(valid_form())

        assert list(result.details['errors']) == ['items']
        gateway.submit.assert_not_called()

        cart_manager.set_variant('P1', color='Blue', size='0-3M')
        assert checkout.execute(valid_form()).success


class TestSubmission:
    def test_success_clears_cart_and_records_order(self, checkout, cart_manager, gateway, store, order_repository, notifier):
        cart_manager.add_item('P1', quantity=2)
        cart_manager.apply_coupon('TINY10')

        result = checkout.execute(valid_form(special_notes='Call before delivery'))

        assert result.success
        assert result.data.order_number == 'TS-1001'
        assert result.data.item_count == 2
        assert checkout.state == CheckoutState.SUCCESS
        assert cart_manager.is_empty
        assert cart_manager.coupon_code == ''
        assert store.get('tinystepsbd_cart') == []
        assert notifier.last.level == NotificationLevel.SUCCESS

        request = gateway.submit.call_args.args[0]
        assert request.subtotal == 1000
        assert request.delivery_fee == 80
        assert request.discount == 100
        assert request.total_amount == 980
        assert request.shipping.special_notes == 'Call before delivery'

        history = order_repository.find_all()
        assert [order.order_number.value for order in history] == ['TS-1001']
        assert history[0].confirmed
        assert order_repository.find_by_number('TS-1001').total_amount == 1080
        assert order_repository.find_by_number('TS-9999') is None

    @pytest.mark.parametrize('error, code', [
        (OrderTimeoutError(15), 'TIMEOUT'),
        (OrderNetworkError('offline'), 'NETWORK_ERROR'),
        (OrderRejectedError('Sheet is locked'), 'ORDER_REJECTED'),
    ])
    def test_failure_keeps_cart(self, checkout, cart_manager, gateway, store, order_repository, error, code):
        cart_manager.add_item('P1', quantity=2)
        gateway.submit.side_effect = error

        result = checkout.execute(valid_form())

        assert not result.success
        assert result.error_code == code
        assert checkout.state == CheckoutState.IDLE
        assert cart_manager.item_count == 2
        assert store.get('tinystepsbd_cart')[0]['quantity'] == 2
        assert order_repository.find_all() == []

    def test_resubmit_after_timeout(self, checkout, cart_manager, gateway):
        cart_manager.add_item('P1')
        gateway.submit.side_effect = [
            OrderTimeoutError(15),
            SubmissionReceipt(order_number=OrderNumber('TS-1002'), total_amount=580),
        ]

        assert not checkout.execute(valid_form()).success
        result = checkout.execute(valid_form())

        assert result.success
        assert result.data.order_number == 'TS-1002'
        assert gateway.submit.call_count == 2

    def test_unexpected_error_releases_checkout(self, checkout, cart_manager, gateway):
        cart_manager.add_item('P1')
        gateway.submit.side_effect = [
            RuntimeError("boom"),
            SubmissionReceipt(order_number=OrderNumber('TS-1004'), total_amount=580),
        ]

        with pytest.raises(RuntimeError):
            checkout.execute(valid_form())

        assert checkout.state == CheckoutState.IDLE
        assert cart_manager.item_count == 1
        result = checkout.execute(valid_form())
        assert result.success
        assert result.data.order_number == 'TS-1004'

    def test_each_submission_snapshots_again(self, checkout, cart_manager, gateway):
        cart_manager.add_item('P1')
        gateway.submit.side_effect = [OrderNetworkError('offline'), gateway.submit.return_value]

        checkout.execute(valid_form())
        cart_manager.add_item('P1')
        checkout.execute(valid_form())

        first, second = [c.args[0] for c in gateway.submit.call_args_list]
        assert first.lines[0].quantity == 1
        assert second.lines[0].quantity == 2

    def test_submission_while_in_flight_is_refused(self, checkout, cart_manager, gateway):
        cart_manager.add_item('P1')
        nested = []

        def submit(request):
            nested.append(checkout.execute(valid_form()))
            return SubmissionReceipt(order_number=OrderNumber('TS-1003'), total_amount=request.total_amount)

        gateway.submit.side_effect = submit

        assert checkout.execute(valid_form()).success
        assert nested[0].error_code == 'INVALID_OPERATION'
        assert gateway.submit.call_count == 1

    def test_unconfirmed_order(self, checkout, cart_manager, gateway, order_repository, notifier):
        cart_manager.add_item('P1')
        gateway.submit.return_value = SubmissionReceipt(
            order_number=OrderNumber.generate_local(),
            total_amount=580,
            confirmed=False,
        )

        result = checkout.execute(valid_form())

        assert result.success
        assert not result.data.confirmed
        assert result.data.order_number.startswith('LOCAL-')
        assert cart_manager.is_empty
        assert notifier.last.code == 'ORDER_UNCONFIRMED'
        assert order_repository.find_all()[0].confirmed is False
