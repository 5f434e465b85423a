"""
Value object tests.
"""
import re

import pytest

from apps.catalog.domain.value_objects import Money
from apps.orders.domain.exceptions import InvalidPhoneNumberError
from apps.orders.domain.value_objects import Coupon, DeliveryArea, OrderNumber, PhoneNumber


class TestMoney:
    def test_bengali_format(self):
        assert Money(amount=1200).formatted == '১২০০ ৳'

    def test_latin_format(self):
        assert Money(amount=1200).latin == '৳1,200'

    def test_arithmetic(self):
        assert Money(amount=500).multiply(3).add(Money(amount=80)) == Money(amount=1580)


class TestPhoneNumber:
    @pytest.mark.parametrize('raw', ['01712345678', '+8801712345678', '8801712345678', '01712 345678'])
    def test_normalized_to_local_form(self, raw):
        assert PhoneNumber(raw).value == '01712345678'

    @pytest.mark.parametrize('raw', ['0171234567', '01212345678', '+4401712345678', ''])
    def test_invalid(self, raw):
        with pytest.raises(InvalidPhoneNumberError):
            PhoneNumber(raw)

    def test_formats(self):
        phone = PhoneNumber('01712345678')
        assert phone.formatted == '01712-345678'
        assert phone.international == '+8801712345678'


class TestDeliveryArea:
    def test_parse(self):
        assert DeliveryArea.parse(' Inside_Dhaka ') == DeliveryArea.INSIDE_DHAKA
        assert DeliveryArea.parse('nowhere') is None
        assert DeliveryArea.parse(None) is None

    @pytest.mark.parametrize('address', ['House 3, Mirpur 10', 'বাড়ি ৫, ধানমন্ডি', 'Gulshan-2, DHAKA'])
    def test_guess_inside_dhaka(self, address):
        assert DeliveryArea.guess_from_address(address) == DeliveryArea.INSIDE_DHAKA

    def test_no_guess_outside_dhaka(self):
        assert DeliveryArea.guess_from_address('Agrabad, Chattogram') is None


class TestCoupon:
    def test_percent(self):
        assert Coupon(code='tiny10', rate='0.10').percent == 10

    def test_code_is_normalized(self):
        assert Coupon(code=' welcome15 ', rate='0.15').code == 'WELCOME15'

    def test_rate_out_of_range(self):
        with pytest.raises(ValueError):
            Coupon(code='BAD', rate='1.5')


class TestOrderNumber:
    def test_local_number(self):
        number = OrderNumber.generate_local()

        assert re.fullmatch(r'LOCAL-\d{8}-[A-Z0-9]{6}', number.value)
        assert number.is_local

    def test_server_number(self):
        assert not OrderNumber('TS-1001').is_local
        assert str(OrderNumber('TS-1001')) == 'TS-1001'


def test_evolve_revalidates():
    phone = PhoneNumber('01712345678')

    assert phone.evolve(value='+8801812345678').value == '01812345678'
    with pytest.raises(InvalidPhoneNumberError):
        phone.evolve(value='123')
