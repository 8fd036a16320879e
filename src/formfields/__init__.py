"""
Validation and formatting helpers for form fields
"""

from .config import Settings, settings
from .core.exceptions import FormFieldsException, PatternDefinitionError
from .core.models import CharSegment, ExactlySegment, FormattingResult, build_pattern
from .core.utils import (
    US_PHONE_NUMBER_FORMAT,
    format_us_phone_number,
    format_value,
    is_valid_us_phone_number,
    normalize_us_phone,
)
from .core.validators import (
    MATCH_US_ZIP_CODE,
    Validator,
    combine_validations,
    is_valid_email,
    is_valid_zip_code,
    validate_email,
    validate_phone,
    validate_required,
    validate_zip_code,
)
from .log_config import configure_logging

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "settings",
    "configure_logging",
    "FormFieldsException",
    "PatternDefinitionError",
    "CharSegment",
    "ExactlySegment",
    "FormattingResult",
    "build_pattern",
    "format_value",
    "US_PHONE_NUMBER_FORMAT",
    "format_us_phone_number",
    "is_valid_us_phone_number",
    "normalize_us_phone",
    "MATCH_US_ZIP_CODE",
    "Validator",
    "combine_validations",
    "is_valid_email",
    "is_valid_zip_code",
    "validate_email",
    "validate_phone",
    "validate_required",
    "validate_zip_code",
]
