"""
Phone number value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidPhoneNumberError

# Bangladeshi mobile numbers: 01 + operator digit 3-9 + 8 digits
_MOBILE_PATTERN = re.compile(r'^01[3-9]\d{8}$')


@dataclass(frozen=True)
class PhoneNumber(ValueObject):
    """Phone number value object with validation."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise InvalidPhoneNumberError(str(self.value))
        normalized = self._normalize(self.value)
        if not _MOBILE_PATTERN.match(normalized):
            raise InvalidPhoneNumberError(self.value)
        # Use object.__setattr__ for frozen dataclass
        object.__setattr__(self, 'value', normalized)

    @staticmethod
    def _normalize(phone: str) -> str:
        """Drop spaces and dashes, then fold the country code into a leading 0."""
        phone = re.sub(r'[\s\-]', '', phone)
        if phone.startswith('+880'):
            return '0' + phone[4:]
        if phone.startswith('880'):
            return '0' + phone[3:]
        return phone

    @property
    def masked(self) -> str:
        """Phone number with the middle digits hidden, e.g. ``017*****678``."""
        return f"{self.value[:3]}{'*' * (len(self.value) - 6)}{self.value[-3:]}"

    def __str__(self) -> str:
        return self.value
