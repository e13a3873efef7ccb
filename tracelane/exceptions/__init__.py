# File: tracelane/exceptions/__init__.py

from .api import APIException
from .base import TracelaneException
from .validation import ValidationException

__all__ = ["TracelaneException", "ValidationException", "APIException"]
