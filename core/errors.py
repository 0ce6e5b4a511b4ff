"""
Exceptions raised while shaping browser requests.

Upstream failures are never raised; they travel back as UpstreamResult.
"""

from models import ErrorType


class RelayError(Exception):
    """Base error rendered to the browser as a JSON failure."""

    status_code = 500
    error_type = ErrorType.UNKNOWN

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {
            "success": False,
            "error": self.message,
            "error_type": self.error_type.value,
        }


class ValidationError(RelayError):
    """A required field is missing or malformed."""

    status_code = 400
    error_type = ErrorType.VALIDATION
