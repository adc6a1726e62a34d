"""Domain errors raised by the service layer.

Services never build HTTP responses. Each error carries the status code the
API layer should answer with, and ``main.py`` translates them in one place.
"""
from typing import Dict, Optional


class ShelfLifeError(Exception):
    status_code = 500
    default_message = "Unexpected error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(ShelfLifeError):
    status_code = 400
    default_message = "Validation failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.errors = errors


class Unauthenticated(ShelfLifeError):
    status_code = 401
    default_message = "Not authenticated"


class NotFound(ShelfLifeError):
    status_code = 404
    default_message = "Not found"


class Conflict(ShelfLifeError):
    status_code = 409
    default_message = "Conflict"
