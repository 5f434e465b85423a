"""
Checkout state value object.
"""
from enum import Enum


class CheckoutState(str, Enum):
    """Idle -> Validating -> Submitting -> Success | Failed; Failed returns to Idle."""
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"
