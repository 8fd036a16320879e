"""
樣式格式化工具

依照片段樣式（固定字元 / 重複字元類別）將使用者輸入重新排版，
常用於輸入框的即時格式化，例如把 ``5551234567`` 顯示為 ``(555) 123-4567``。

規則：
- 固定字元片段：若下一個輸入字元正好是該字元則吃掉它；
  只要還有輸入，就把固定字元加入輸出（尚無後續輸入的結尾固定字元會省略）
- 字元類別片段：持續讀取輸入，符合者加入 formatted 與 raw，不符合者丟棄，
  直到收滿 repeat 個或輸入用完
- 樣式用完後剩餘的輸入會被捨棄
"""

from typing import Optional

import structlog

from ..models.pattern import CharSegment, ExactlySegment, FormatPattern, FormattingResult

logger = structlog.get_logger()


def format_value(value: Optional[str], pattern: FormatPattern) -> FormattingResult:
    """
    依樣式格式化字串

    Args:
        value: 使用者輸入，可為 None 或空字串
        pattern: 由 build_pattern 建立的片段 tuple

    Returns:
        FormattingResult(formatted, raw)
    """
    if not value:
        return FormattingResult(formatted="", raw="")

    formatted = []
    raw = []
    pos = 0
    length = len(value)

    for segment in pattern:
        if pos >= length:
            break

        if isinstance(segment, ExactlySegment):
            if value[pos] == segment.exactly:
                pos += 1
            formatted.append(segment.exactly)
            continue

        if isinstance(segment, CharSegment):
            collected = 0
            while collected < segment.repeat and pos < length:
                ch = value[pos]
                pos += 1
                if segment.accepts(ch):
                    formatted.append(ch)
                    raw.append(ch)
                    collected += 1

    if pos < length:
        logger.debug("Discarded input beyond pattern", discarded=length - pos)

    return FormattingResult(formatted="".join(formatted), raw="".join(raw))


__all__ = ["format_value"]
