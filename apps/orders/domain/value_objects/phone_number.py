"""
Phone number value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidPhoneNumberError

MOBILE_PATTERN = re.compile(r'^(?:\+?88)?(01[3-9]\d{8})$')


@dataclass(frozen=True)
class PhoneNumber(ValueObject):
    """Bangladeshi mobile number, stored in local 11-digit form."""
    value: str

    def __post_init__(self):
        match = MOBILE_PATTERN.match(self._normalize(self.value))
        if match is None:
            raise InvalidPhoneNumberError(self.value)
        # Use object.__setattr__ for frozen dataclass
        object.__setattr__(self, 'value', match.group(1))

    @staticmethod
    def _normalize(phone: str) -> str:
        """Strip spaces, dashes and brackets."""
        return re.sub(r'[\s\-()]', '', phone or '')

    @classmethod
    def is_valid(cls, phone: str) -> bool:
        return MOBILE_PATTERN.match(cls._normalize(phone)) is not None

    @property
    def formatted(self) -> str:
        """Format as 01XXX-XXXXXX."""
        return f"{self.value[:5]}-{self.value[5:]}"

    @property
    def international(self) -> str:
        return f"+88{self.value}"
