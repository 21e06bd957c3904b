# nc_news/core/errors.py
from typing import Optional


class ApiError(Exception):
    """An error that maps directly onto an HTTP response.

    Raised from the data access and validation layers and translated to
    ``{"message": ...}`` by the exception handlers registered in ``main``.
    """

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def __repr__(self):
        return f"{type(self).__name__}(status_code={self.status_code}, message={self.message!r})"


class BadRequestError(ApiError):
    """Malformed identifier, missing field or bad query parameter."""

    status_code = 400


class NotFoundError(ApiError):
    """Well-formed reference to something that does not exist."""

    status_code = 404
