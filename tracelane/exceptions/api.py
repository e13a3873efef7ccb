# File: tracelane/exceptions/api.py

from typing import Optional

from .base import TracelaneException


class APIException(TracelaneException):
    """
    Raised when the API answers with a status code outside the 2xx range,
    or with a 2xx body that cannot be decoded.

    Attributes:
        message (str): Human-readable explanation, always including the status code.
        status_code (int): HTTP status code returned by the server.
        body (Optional[str]): Raw response body, if any.
        method (Optional[str]): HTTP method of the failed request.
        path (Optional[str]): Request path relative to the API base URL, without the query string.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Optional[str] = None,
        method: Optional[str] = None,
        path: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.status_code: int = status_code
        self.body: Optional[str] = body
        self.method: Optional[str] = method
        self.path: Optional[str] = path
