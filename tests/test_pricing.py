"""
Pricing calculator tests.
"""
import pytest

from apps.orders.domain import pricing
from apps.orders.domain.entities import LineItem
from apps.orders.domain.value_objects import CouponStatus, DeliveryArea, PricingPolicy


def item(product_id='P1', price=500, quantity=1):
    return LineItem(product_id=product_id, name=product_id, unit_price=price, quantity=quantity)


class TestSubtotal:
    def test_sums_price_times_quantity(self):
        assert pricing.subtotal([item('A', 500, 2), item('B', 300, 1)]) == 1300

    def test_empty_cart(self):
        assert pricing.subtotal([]) == 0


class TestDeliveryFee:
    @pytest.mark.parametrize('area, expected', [
        ('inside_dhaka', 80),
        ('outside_dhaka', 150),
        ('outside_divisional', 200),
        (DeliveryArea.INSIDE_DHAKA, 80),
    ])
    def test_area_fees(self, area, expected):
        assert pricing.delivery_fee(area, 1800) == expected

    def test_free_at_threshold(self):
        assert pricing.delivery_fee('outside_divisional', 2000) == 0

    def test_charged_just_below_threshold(self):
        assert pricing.delivery_fee('inside_dhaka', 1999) == 80

    @pytest.mark.parametrize('area', [None, '', 'mars'])
    def test_unknown_area_pays_outside_dhaka_fee(self, area):
        assert pricing.delivery_fee(area, 100) == 150


class TestDiscount:
    def test_known_coupon(self):
        applied = pricing.discount(1000, 'WELCOME15')
        assert applied.amount == 150
        assert applied.status == CouponStatus.APPLIED

    def test_code_is_case_insensitive(self):
        applied = pricing.discount(1000, ' tiny10 ')
        assert applied.amount == 100
        assert applied.code == 'TINY10'

    def test_unknown_coupon_is_invalid_not_an_error(self):
        applied = pricing.discount(1000, 'BOGUS')
        assert applied.amount == 0
        assert applied.is_invalid

    def test_no_code(self):
        applied = pricing.discount(1000, None)
        assert applied.amount == 0
        assert applied.status == CouponStatus.NOT_APPLIED

    def test_rounds_half_up(self):
        assert pricing.discount(1005, 'TINY10').amount == 101
        assert pricing.discount(1010, 'TINYSTEP5').amount == 51


class TestTotal:
    def test_total(self):
        assert pricing.total(1800, 150, 180) == 1770

    def test_never_negative(self):
        assert pricing.total(100, 0, 500) == 0


class TestSummarize:
    def test_all_figures(self):
        summary = pricing.summarize([item('A', 900, 2)], 'outside_dhaka', 'TINY10')

        assert summary.subtotal == 1800
        assert summary.delivery_fee == 150
        assert summary.discount == 180
        assert summary.total == 1770
        assert summary.item_count == 2
        assert summary.coupon_status == CouponStatus.APPLIED
        assert summary.amount_to_free_delivery == 200

    def test_free_delivery(self):
        summary = pricing.summarize([item('A', 1000, 2)], 'inside_dhaka')

        assert summary.delivery_fee == 0
        assert summary.has_free_delivery
        assert summary.total == 2000

    def test_does_not_mutate_items(self):
        items = [item('A', 900, 2)]
        pricing.summarize(items, 'inside_dhaka', 'TINY10')
        pricing.summarize(items, 'inside_dhaka', 'TINY10')

        assert items == [item('A', 900, 2)]


class TestPricingPolicy:
    def test_custom_fees_and_threshold(self):
        policy = PricingPolicy.from_mappings(
            delivery_fees={'inside_dhaka': 60},
            free_delivery_threshold=3000,
        )

        assert pricing.delivery_fee('inside_dhaka', 2500, policy) == 60
        assert pricing.delivery_fee('outside_dhaka', 2500, policy) == 150

    def test_custom_coupons_replace_defaults(self):
        policy = PricingPolicy.from_mappings(coupon_rates={'EID20': '0.20'})

        assert pricing.discount(1000, 'EID20', policy).amount == 200
        assert pricing.discount(1000, 'TINY10', policy).is_invalid

    def test_unknown_area_in_settings(self):
        with pytest.raises(ValueError):
            PricingPolicy.from_mappings(delivery_fees={'chittagong': 100})
