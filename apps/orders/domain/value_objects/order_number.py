"""
Order number value object.
"""
import random
import string
from dataclasses import dataclass

from django.utils import timezone

from shared.domain import ValueObject

LOCAL_PREFIX = "LOCAL"


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """Order number value object."""
    value: str

    @classmethod
    def generate_local(cls) -> 'OrderNumber':
        """Generate a placeholder number for an order the server never confirmed."""
        date_part = timezone.now().strftime("%Y%m%d")
        random_part = ''.join(random.choices(string.ascii_uppercase + string.digits, k=6))
        return cls(value=f"{LOCAL_PREFIX}-{date_part}-{random_part}")

    @property
    def is_local(self) -> bool:
        return self.value.startswith(f"{LOCAL_PREFIX}-")

    def __str__(self) -> str:
        return self.value
