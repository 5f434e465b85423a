# Value objects
from .checkout_state import CheckoutState
from .coupon import Coupon, CouponStatus
from .delivery_area import DeliveryArea
from .order_number import OrderNumber
from .order_request import OrderLine, OrderRequest
from .phone_number import PhoneNumber
from .price_summary import Discount, PriceSummary
from .pricing_policy import PricingPolicy, DEFAULT_POLICY
from .shipping_info import ShippingInfo

__all__ = [
    'CheckoutState',
    'Coupon',
    'CouponStatus',
    'DeliveryArea',
    'OrderNumber',
    'OrderLine',
    'OrderRequest',
    'PhoneNumber',
    'Discount',
    'PriceSummary',
    'PricingPolicy',
    'DEFAULT_POLICY',
    'ShippingInfo',
]
