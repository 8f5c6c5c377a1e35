"""Exceptions module for backend-domain.

Provides the complete exception hierarchy, split into the base error,
domain errors and HTTP status mapping.
"""

from .base import (
    BackendDomainError,
    get_http_status_code,
    create_error_response,
)

from .domain import (
    # Configuration Errors
    ConfigurationError,

    # Validation Errors
    ValidationError,
    DomainValidationError,

    # Business Logic Errors
    BusinessLogicError,
    BusinessRuleViolationError,
    InvalidOperationError,
    ResourceNotFoundError,
    DuplicateResourceError,
    ConcurrencyConflictError,
)

from .http_mapping import (
    HTTP_STATUS_MAP,
    HttpStatusMapper,
    get_mapper,
    set_status_overrides,
)

__all__ = [
    "BackendDomainError",
    "get_http_status_code",
    "create_error_response",
    "ConfigurationError",
    "ValidationError",
    "DomainValidationError",
    "BusinessLogicError",
    "BusinessRuleViolationError",
    "InvalidOperationError",
    "ResourceNotFoundError",
    "DuplicateResourceError",
    "ConcurrencyConflictError",
    "HTTP_STATUS_MAP",
    "HttpStatusMapper",
    "get_mapper",
    "set_status_overrides",
]
