"""Guard clauses used by value objects and aggregates.

Each guard raises DomainValidationError immediately so no half-built
object is ever observable.
"""

from typing import Any, Optional

from ..exceptions import DomainValidationError


def against_null_or_empty(value: Optional[str], name: str) -> str:
    """Reject None, empty and whitespace-only strings.

    Args:
        value: Candidate string
        name: Field name used in the error message

    Returns:
        The value unchanged, for use in assignments
    """
    if value is None or not isinstance(value, str) or not value.strip():
        raise DomainValidationError(f"{name} cannot be empty.", field_name=name)
    return value


def against(condition: bool, message: str, name: Optional[str] = None) -> None:
    """Raise when ``condition`` holds."""
    if condition:
        raise DomainValidationError(message, field_name=name)


def against_none(value: Any, name: str) -> Any:
    """Reject None values."""
    if value is None:
        raise DomainValidationError(f"{name} is required.", field_name=name)
    return value
