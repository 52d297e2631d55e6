"""
Customization value object.
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from shared.domain import FieldErrors, ValueObject
from ..exceptions import InvalidCustomizationError

MAX_OPTION_LENGTH = 50
MAX_TEXT_LENGTH = 500
MAX_IMAGES = 5
MAX_IMAGE_REF_LENGTH = 500


def _clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        return value
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class Customization(ValueObject):
    """Buyer-chosen options attached to a cart line.

    Two customizations are equal when their canonical forms are equal, which
    is what lets the cart merge repeated additions into a single line.
    Images form a set: they are stored sorted and de-duplicated.
    """
    size: Optional[str] = None
    color: Optional[str] = None
    custom_text: Optional[str] = None
    images: Tuple[str, ...] = ()

    def __post_init__(self):
        errors = FieldErrors()
        for name, limit in (('size', MAX_OPTION_LENGTH), ('color', MAX_OPTION_LENGTH),
                            ('custom_text', MAX_TEXT_LENGTH)):
            value = _clean_text(getattr(self, name))
            if value is not None and not isinstance(value, str):
                errors.add(f'customization.{name}', "Must be a string.")
            elif value is not None and len(value) > limit:
                errors.add(f'customization.{name}', f"Ensure this field has no more than {limit} characters.")
            object.__setattr__(self, name, value)

        object.__setattr__(self, 'images', self._normalize_images(self.images, errors))
        if errors:
            raise InvalidCustomizationError(errors.as_dict())

    @staticmethod
    def _normalize_images(images: Iterable[Any], errors: FieldErrors) -> Tuple[str, ...]:
        if images is None:
            return ()
        if not isinstance(images, (list, tuple, set, frozenset)):
            errors.add('customization.images', "Must be a list of image references.")
            return ()
        refs = set()
        for ref in images:
            if not isinstance(ref, str) or not ref.strip():
                errors.add('customization.images', "Image references must be non-empty strings.")
                continue
            ref = ref.strip()
            if len(ref) > MAX_IMAGE_REF_LENGTH:
                errors.add('customization.images', f"Image references are limited to {MAX_IMAGE_REF_LENGTH} characters.")
                continue
            refs.add(ref)
        if len(refs) > MAX_IMAGES:
            errors.add('customization.images', f"At most {MAX_IMAGES} images can be attached.")
        return tuple(sorted(refs))

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['Customization']:
        """Build a customization from request or stored data.

        Returns None when nothing was chosen, so "no customization" has a
        single representation.
        """
        if not data:
            return None
        customization = cls(
            size=data.get('size'),
            color=data.get('color'),
            custom_text=data.get('custom_text'),
            images=data.get('images') or (),
        )
        return None if customization.is_empty else customization

    @property
    def is_empty(self) -> bool:
        return not (self.size or self.color or self.custom_text or self.images)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'size': self.size,
            'color': self.color,
            'custom_text': self.custom_text,
            'images': list(self.images),
        }

    def canonical(self) -> str:
        """Compact, key-sorted JSON used for identity comparisons."""
        return json.dumps(self.to_dict(), sort_keys=True, separators=(',', ':'), ensure_ascii=False)


def canonical_customization(customization: Optional[Customization]) -> str:
    """Canonical form of an optional customization ("" when absent)."""
    return customization.canonical() if customization else ''
