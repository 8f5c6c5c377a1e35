"""Utility helpers for backend-domain."""

from .datetime import ensure_utc, utc_now, years_between
from .digits import to_ascii_digits
from .uuid import generate_uuid_v7

__all__ = [
    "ensure_utc",
    "utc_now",
    "years_between",
    "to_ascii_digits",
    "generate_uuid_v7",
]
