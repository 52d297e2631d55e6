"""
Customization brief value object for custom orders.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Tuple

from shared.domain import FieldErrors, ValueObject
from .customization import MAX_IMAGES, MAX_IMAGE_REF_LENGTH

MAX_INSTRUCTIONS_LENGTH = 2000


@dataclass(frozen=True)
class CustomizationBrief(ValueObject):
    """Free-form instructions, reference images and the agreed surcharge.

    Unlike cart customizations, image order is meaningful here and kept.
    """
    instructions: str
    images: Tuple[str, ...] = ()
    cost: Decimal = Decimal('0')

    def __post_init__(self):
        errors = FieldErrors()

        instructions = self.instructions.strip() if isinstance(self.instructions, str) else ""
        if not instructions:
            errors.add('customization_instructions', "Customization instructions are required.")
        elif len(instructions) > MAX_INSTRUCTIONS_LENGTH:
            errors.add(
                'customization_instructions',
                f"Instructions must be at most {MAX_INSTRUCTIONS_LENGTH} characters.",
            )
        object.__setattr__(self, 'instructions', instructions)

        images = []
        for ref in self.images or ():
            if not isinstance(ref, str) or not ref.strip() or len(ref.strip()) > MAX_IMAGE_REF_LENGTH:
                errors.add('customization_images', "Image references must be non-empty strings.")
                continue
            images.append(ref.strip())
        if len(images) > MAX_IMAGES:
            errors.add('customization_images', f"At most {MAX_IMAGES} images can be attached.")
        object.__setattr__(self, 'images', tuple(images))

        cost = self._to_decimal(self.cost)
        if cost is None or cost < 0:
            errors.add('customization_cost', "Customization cost must be a non-negative number.")
        object.__setattr__(self, 'cost', cost if cost is not None else Decimal('0'))

        errors.raise_if_any("Invalid customization")

    @staticmethod
    def _to_decimal(value: Any):
        if value is None:
            return Decimal('0')
        try:
            number = Decimal(str(value))
        except InvalidOperation:
            return None
        return number if number.is_finite() else None
