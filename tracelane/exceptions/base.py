# File: tracelane/exceptions/base.py


class TracelaneException(Exception):
    """Base class for every error raised by the Tracelane SDK itself."""
