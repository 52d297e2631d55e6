"""
Customer and delivery information value object.
"""
from dataclasses import dataclass
from typing import Any

from shared.domain import FieldErrors, ValueObject
from .phone_number import PhoneNumber

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
AREA_MAX_LENGTH = 100
ADDRESS_MAX_LENGTH = 500


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


@dataclass(frozen=True)
class CustomerInfo(ValueObject):
    """Who receives the order and where it is delivered."""
    name: str
    phone: PhoneNumber
    district: str
    address: str
    thana: str = ""

    @classmethod
    def create(
        cls,
        name: Any,
        phone: Any,
        district: Any,
        address: Any,
        thana: Any = "",
    ) -> 'CustomerInfo':
        """Validate every field and report all failures together.

        Error keys match the request fields: ``customer_name``, ``phone``,
        ``district``, ``thana`` and ``address``.
        """
        errors = FieldErrors()

        name = _text(name)
        if len(name) < NAME_MIN_LENGTH:
            errors.add('customer_name', f"Name must be at least {NAME_MIN_LENGTH} characters.")
        elif len(name) > NAME_MAX_LENGTH:
            errors.add('customer_name', f"Name must be at most {NAME_MAX_LENGTH} characters.")

        phone_number = errors.collect(PhoneNumber, phone if phone is not None else "")

        district = _text(district)
        if not district:
            errors.add('district', "District is required.")
        elif len(district) > AREA_MAX_LENGTH:
            errors.add('district', f"District must be at most {AREA_MAX_LENGTH} characters.")

        thana = _text(thana)
        if len(thana) > AREA_MAX_LENGTH:
            errors.add('thana', f"Thana must be at most {AREA_MAX_LENGTH} characters.")

        address = _text(address)
        if not address:
            errors.add('address', "Address is required.")
        elif len(address) > ADDRESS_MAX_LENGTH:
            errors.add('address', f"Address must be at most {ADDRESS_MAX_LENGTH} characters.")

        errors.raise_if_any("Invalid customer information")
        return cls(name=name, phone=phone_number, district=district, address=address, thana=thana)

    @property
    def masked_phone(self) -> str:
        return self.phone.masked
