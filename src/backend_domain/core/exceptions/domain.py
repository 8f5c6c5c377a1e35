"""Domain exceptions for backend-domain.

Validation errors come from guard clauses and value objects, business logic
errors from rule enforcement and aggregate state transitions.
"""

from typing import Any, Dict, List, Optional, Sequence

from .base import BackendDomainError


# Configuration Errors
class ConfigurationError(BackendDomainError):
    """Raised when there's a configuration issue."""
    pass


# Validation Errors
class ValidationError(BackendDomainError):
    """Base class for input validation errors."""
    pass


class DomainValidationError(ValidationError, ValueError):
    """Raised when a guard clause or value object rejects its input.

    Also a ValueError so dataclass ``__post_init__`` validation reads
    naturally to callers catching the builtin.
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = details or {}
        if field_name:
            enhanced_details["field_name"] = field_name

        super().__init__(
            message=message,
            error_code=error_code or "DOMAIN_VALIDATION_FAILED",
            details=enhanced_details
        )
        self.field_name = field_name


# Business Logic Errors
class BusinessLogicError(BackendDomainError):
    """Raised when business logic validation fails."""
    pass


class BusinessRuleViolationError(BusinessLogicError):
    """Raised when one or more business rules are broken.

    ``broken_rules`` holds the individual rule messages; ``message`` is the
    aggregated, human-readable form.
    """

    def __init__(
        self,
        message: str,
        broken_rules: Optional[Sequence[str]] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        rules: List[str] = list(broken_rules) if broken_rules else [message]
        enhanced_details = details or {}
        enhanced_details["broken_rules"] = rules

        super().__init__(
            message=message,
            error_code=error_code or "BUSINESS_RULE_VIOLATION",
            details=enhanced_details
        )
        self.broken_rules = rules


class InvalidOperationError(BusinessLogicError, RuntimeError):
    """Raised when an operation is invalid in the aggregate's current state."""
    pass


class ResourceNotFoundError(BusinessLogicError):
    """Raised when required resource is not found."""

    def __init__(self, resource: str, key: Any, message: Optional[str] = None):
        super().__init__(
            message=message or f"{resource} with key {key} was not found.",
            error_code="RESOURCE_NOT_FOUND",
            details={"resource": resource, "key": str(key)}
        )
        self.resource = resource
        self.key = key


class DuplicateResourceError(BusinessLogicError):
    """Raised when attempting to create duplicate resource."""
    pass


class ConcurrencyConflictError(BusinessLogicError):
    """Raised when a save finds a different stored version than was loaded.

    Callers recover by re-reading the aggregate and re-applying the change.
    """

    def __init__(
        self,
        aggregate_type: str,
        aggregate_id: Any,
        expected_version: Optional[int],
        actual_version: Optional[int] = None
    ):
        super().__init__(
            message=(
                f"{aggregate_type} {aggregate_id} was modified concurrently "
                f"(expected version {expected_version}, found {actual_version})"
            ),
            error_code="CONCURRENCY_CONFLICT",
            details={
                "aggregate_type": aggregate_type,
                "aggregate_id": str(aggregate_id),
                "expected_version": expected_version,
                "actual_version": actual_version,
            }
        )
        self.aggregate_type = aggregate_type
        self.aggregate_id = aggregate_id
        self.expected_version = expected_version
        self.actual_version = actual_version
