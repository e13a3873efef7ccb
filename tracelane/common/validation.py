"""Local checks run before any request is built."""

from enum import Enum
from typing import Any, Optional, Sized, Type, TypeVar

from tracelane.exceptions import ValidationException

E = TypeVar("E", bound=Enum)


def require(value: Any, field: str) -> None:
    """Raise if ``value`` is ``None`` or empty."""
    if value is None or (isinstance(value, Sized) and len(value) == 0):
        raise ValidationException.required(field)


def coerce_enum(enum_cls: Type[E], value: Any, field: str) -> E:
    """Convert ``value`` to a member of ``enum_cls`` or raise naming ``field``."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(str(member.value) for member in enum_cls)
        raise ValidationException(f"invalid '{field}': {value}, must be one of [{allowed}]", field=field) from None


def coerce_optional_enum(enum_cls: Type[E], value: Any, field: str) -> Optional[E]:
    """Like :func:`coerce_enum`, but ``None`` and ``""`` mean "not set"."""
    if value is None or value == "":
        return None
    return coerce_enum(enum_cls, value, field)
