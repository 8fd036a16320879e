"""
Formatting utilities for form fields
"""

from .formatter import format_value
from .phone_utils import (
    US_PHONE_NUMBER_FORMAT,
    format_us_phone_number,
    is_valid_us_phone_number,
    normalize_us_phone,
)

__all__ = [
    "format_value",
    "US_PHONE_NUMBER_FORMAT",
    "format_us_phone_number",
    "is_valid_us_phone_number",
    "normalize_us_phone",
]
