"""
表單欄位驗證函式

偵測函式（is_valid_*）回傳 bool；驗證函式（validate_*）回傳錯誤訊息，
沒有錯誤時回傳 None。所有函式都不會拋出異常。
"""

import re
from typing import Callable, Optional

from .utils.phone_utils import is_valid_us_phone_number

Validator = Callable[[Optional[str]], Optional[str]]

REQUIRED_MESSAGE = "Required"
INVALID_EMAIL_MESSAGE = "Invalid email address"
INVALID_PHONE_MESSAGE = "Invalid phone number"
INVALID_ZIP_CODE_MESSAGE = "Invalid ZIP code"

# 5 碼或 ZIP+4（12345、12345-6789、12345 6789、123456789）
MATCH_US_ZIP_CODE = re.compile(r"^\d{5}(?:[- ]?\d{4})?\Z", re.ASCII)

# 寬鬆格式，接受含 Unicode 的 email；行結束字元不算任意字元
_LINE_CHAR = r"[^\n\r\u2028\u2029]"
_EMAIL_PATTERN = re.compile(rf"{_LINE_CHAR}+@{_LINE_CHAR}+\.{_LINE_CHAR}+", re.IGNORECASE)


def combine_validations(*validators: Validator) -> Validator:
    """依序執行驗證函式，回傳第一個錯誤訊息"""

    def validate(value: Optional[str]) -> Optional[str]:
        for validator in validators:
            error = validator(value)
            if error:
                return error
        return None

    return validate


def is_valid_email(value: Optional[str]) -> bool:
    if not value:
        return False
    return _EMAIL_PATTERN.search(value) is not None


def is_valid_zip_code(value: Optional[str]) -> bool:
    if not value:
        return False
    return MATCH_US_ZIP_CODE.fullmatch(value) is not None


def validate_email(value: Optional[str]) -> Optional[str]:
    return None if is_valid_email(value) else INVALID_EMAIL_MESSAGE


def validate_phone(value: Optional[str]) -> Optional[str]:
    return None if is_valid_us_phone_number(value) else INVALID_PHONE_MESSAGE


def validate_required(value: Optional[str]) -> Optional[str]:
    """
    必填檢查

    欄位值一律是字串：None 或空字串視為未填，只有空白的字串不算未填。
    """
    if value is None or value == "":
        return REQUIRED_MESSAGE
    return None


def validate_zip_code(value: Optional[str]) -> Optional[str]:
    # 空欄位交給 validate_required
    if not value or is_valid_zip_code(value):
        return None
    return INVALID_ZIP_CODE_MESSAGE


__all__ = [
    "Validator",
    "MATCH_US_ZIP_CODE",
    "combine_validations",
    "is_valid_email",
    "is_valid_zip_code",
    "validate_email",
    "validate_phone",
    "validate_required",
    "validate_zip_code",
]
