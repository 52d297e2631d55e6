"""
Payment info value object.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional

from shared.domain import FieldErrors, ValueObject

TRANSACTION_ID_MAX_LENGTH = 100


class PaymentMethod(str, Enum):
    """Accepted payment methods. Mobile wallets plus cash on delivery."""
    BKASH = 'bkash'
    NAGAD = 'nagad'
    ROCKET = 'rocket'
    COD = 'cod'

    @classmethod
    def values(cls):
        return [method.value for method in cls]


@dataclass(frozen=True)
class PaymentInfo(ValueObject):
    """What the customer declared about payment. Nothing is settled here."""
    method: PaymentMethod
    amount: Decimal
    transaction_id: str = ""

    @classmethod
    def create(
        cls,
        method: Any,
        total: Optional[Decimal],
        amount: Any = None,
        transaction_id: Optional[str] = None,
    ) -> 'PaymentInfo':
        """Validate payment fields against the order total.

        ``amount`` defaults to the full total and must lie in ``[0, total]``.
        A ``total`` of None means it could not be computed; the range check
        is skipped and the caller is expected to report its own errors.
        """
        errors = FieldErrors()

        try:
            payment_method = PaymentMethod(method)
        except ValueError:
            payment_method = None
            errors.add('payment_method', f"Payment method must be one of: {', '.join(PaymentMethod.values())}.")

        if amount is None:
            paid = total
        else:
            try:
                paid = Decimal(str(amount))
            except InvalidOperation:
                paid = None
                errors.add('payment_amount', "A valid number is required.")
            if paid is not None and not paid.is_finite():
                paid = None
                errors.add('payment_amount', "A valid number is required.")
            if paid is not None and (paid < 0 or (total is not None and paid > total)):
                errors.add('payment_amount', f"Amount must be between 0 and {total}.")

        transaction_id = (transaction_id or "").strip()
        if len(transaction_id) > TRANSACTION_ID_MAX_LENGTH:
            errors.add('transaction_id', f"Transaction id must be at most {TRANSACTION_ID_MAX_LENGTH} characters.")

        errors.raise_if_any("Invalid payment information")
        return cls(method=payment_method, amount=paid, transaction_id=transaction_id)
