# File: tracelane/exceptions/validation.py

from typing import Optional

from .base import TracelaneException


class ValidationException(TracelaneException, ValueError):
    """
    Raised when a request fails local validation, before anything is sent.

    Attributes:
        message (str): Human-readable explanation naming the offending field.
        field (Optional[str]): Wire name of the field that failed validation.
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.field: Optional[str] = field

    @classmethod
    def required(cls, field: str) -> "ValidationException":
        return cls(f"'{field}' is required", field=field)
