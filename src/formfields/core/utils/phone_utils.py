"""
美國電話號碼格式化工具

- 即時格式化：5551234567 -> (555) 123-4567
- 驗證：完整 10 碼或尚未輸入（0 碼）視為有效
- 正規化：使用 Google 的 libphonenumber 庫（Python 版本：phonenumbers）輸出儲存用格式
"""

from typing import Optional

import phonenumbers
import structlog
from phonenumbers import NumberParseException, PhoneNumberFormat

from ..models.pattern import FormattingResult, build_pattern
from .formatter import format_value

logger = structlog.get_logger()


US_REGION = "US"
US_PHONE_DIGITS = 10

# 電話號碼格式 (999) 999-9999
US_PHONE_NUMBER_FORMAT = build_pattern([
    {"exactly": "("},
    {"char": r"\d", "repeat": 3},
    {"exactly": ")"},
    {"exactly": " "},
    {"char": r"\d", "repeat": 3},
    {"exactly": "-"},
    {"char": r"\d", "repeat": 4},
])

FORMAT_MAP = {
    "e164": PhoneNumberFormat.E164,
    "international": PhoneNumberFormat.INTERNATIONAL,
    "national": PhoneNumberFormat.NATIONAL,
    "rfc3966": PhoneNumberFormat.RFC3966,
}


def format_us_phone_number(value: Optional[str]) -> FormattingResult:
    """把輸入格式化為美國電話號碼，支援部分輸入"""
    return format_value(value, US_PHONE_NUMBER_FORMAT)


def is_valid_us_phone_number(value: Optional[str]) -> bool:
    """
    檢查是否為美國電話號碼

    空欄位視為有效，必填檢查請另外使用 validate_required。
    """
    digits = len(format_us_phone_number(value).raw)
    return digits == US_PHONE_DIGITS or digits == 0


def normalize_us_phone(value: Optional[str], format_type: str = "e164") -> Optional[str]:
    """
    正規化已完整輸入的美國電話號碼

    Args:
        value: 欄位值
        format_type: 輸出格式
            - "e164": +16502530000（適合儲存）
            - "international": +1 650-253-0000
            - "national": (650) 253-0000
            - "rfc3966": tel:+1-650-253-0000

    Returns:
        正規化後的電話號碼，空白、未完成或無效則返回 None
    """
    raw = format_us_phone_number(value).raw
    if len(raw) != US_PHONE_DIGITS:
        return None

    try:
        parsed = phonenumbers.parse(raw, US_REGION)
    except NumberParseException as e:
        logger.debug("Failed to parse phone number", error=str(e))
        return None

    if not phonenumbers.is_valid_number(parsed):
        logger.debug("Invalid phone number", area_code=raw[:3])
        return None

    fmt = FORMAT_MAP.get(format_type, PhoneNumberFormat.E164)
    return phonenumbers.format_number(parsed, fmt)


__all__ = [
    "US_PHONE_NUMBER_FORMAT",
    "format_us_phone_number",
    "is_valid_us_phone_number",
    "normalize_us_phone",
]
