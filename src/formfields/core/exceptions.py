"""
自定義異常類別

欄位驗證本身從不拋出異常；這裡的異常只用於開發者定義格式樣式時的錯誤。
"""

from typing import Optional, Dict, Any


class FormFieldsException(Exception):
    """基礎異常類別"""

    def __init__(self, message: str, user_message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.user_message = user_message  # 顯示給使用者的訊息
        self.details = details or {}  # 額外的除錯資訊


# ==================== 格式樣式相關異常 ====================


class PatternDefinitionError(FormFieldsException):
    """格式樣式定義錯誤"""

    def __init__(self, reason: str, index: Optional[int] = None, details: Optional[Dict[str, Any]] = None):
        if index is None:
            message = f"Invalid format pattern: {reason}"
        else:
            message = f"Invalid format pattern segment #{index}: {reason}"
        user_message = "⚠️ 欄位格式設定有誤，請通知開發人員檢查格式樣式"
        details = dict(details or {})
        details.setdefault("reason", reason)
        if index is not None:
            details.setdefault("index", index)
        super().__init__(message, user_message, details)
        self.reason = reason
        self.index = index
