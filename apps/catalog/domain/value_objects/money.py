"""
Money value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject

BENGALI_DIGITS = str.maketrans('0123456789', '০১২৩৪৫৬৭৮৯')


@dataclass(frozen=True)
class Money(ValueObject):
    """Whole-taka amount. BDT prices carry no fractional part."""
    amount: int
    currency: str = "BDT"

    def __post_init__(self):
        if not isinstance(self.amount, int):
            object.__setattr__(self, 'amount', int(round(self.amount)))

    def add(self, other: 'Money') -> 'Money':
        """Add two money values."""
        if self.currency != other.currency:
            raise ValueError("Cannot add different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: 'Money') -> 'Money':
        """Subtract money value."""
        if self.currency != other.currency:
            raise ValueError("Cannot subtract different currencies")
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def multiply(self, factor: int) -> 'Money':
        """Multiply money by a factor."""
        return Money(amount=self.amount * factor, currency=self.currency)

    @property
    def formatted(self) -> str:
        """Bengali numerals followed by the taka sign, e.g. ``১২০০ ৳``."""
        if self.currency == "BDT":
            return f"{str(self.amount).translate(BENGALI_DIGITS)} ৳"
        return f"{self.currency} {self.amount:,}"

    @property
    def latin(self) -> str:
        """Latin digits with thousands separators, e.g. ``৳1,200``."""
        if self.currency == "BDT":
            return f"৳{self.amount:,}"
        return f"{self.currency} {self.amount:,}"
