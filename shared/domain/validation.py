"""
Field-by-field validation helpers.
"""
from typing import Any, Callable, Dict, List, Optional, TypeVar

from .exceptions import ValidationError

T = TypeVar('T')

NON_FIELD_ERRORS = 'non_field_errors'


class FieldErrors:
    """Accumulates validation failures so they can be reported together."""

    def __init__(self):
        self._errors: Dict[str, List[str]] = {}

    def add(self, field: str, message: str) -> None:
        self._errors.setdefault(field, []).append(message)

    def collect(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> Optional[T]:
        """Call ``func`` and record any ValidationError it raises.

        Returns the call result, or None when validation failed.
        """
        try:
            return func(*args, **kwargs)
        except ValidationError as exc:
            self.merge(exc)
            return None

    def merge(self, exc: ValidationError) -> None:
        if exc.errors:
            for field, messages in exc.errors.items():
                for message in messages:
                    self.add(field, message)
        else:
            self.add(exc.field or NON_FIELD_ERRORS, exc.message)

    def has(self, field: str) -> bool:
        return field in self._errors

    def __bool__(self) -> bool:
        return bool(self._errors)

    def as_dict(self) -> Dict[str, List[str]]:
        return {field: list(messages) for field, messages in self._errors.items()}

    def raise_if_any(self, message: str = "Invalid input") -> None:
        if not self._errors:
            return
        fields = list(self._errors)
        raise ValidationError(
            message=message,
            field=fields[0] if len(fields) == 1 else None,
            errors=self.as_dict(),
        )
