"""Digit normalization for user-entered numbers."""

# Persian (U+06F0..U+06F9) and Arabic-Indic (U+0660..U+0669) digits
_LOCAL_DIGITS = str.maketrans(
    "۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩",
    "01234567890123456789",
)


def to_ascii_digits(value: str) -> str:
    """Replace Persian and Arabic-Indic digits with their ASCII equivalents."""
    return value.translate(_LOCAL_DIGITS)
