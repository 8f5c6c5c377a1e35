"""Base exceptions for backend-domain.

All exceptions inherit from BackendDomainError and carry an error code and
a details mapping so application boundaries can render them uniformly.
"""

from typing import Any, Dict, Optional


class BackendDomainError(Exception):
    """Base exception for all backend-domain errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception using the status mapper."""
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: BackendDomainError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The backend-domain exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
