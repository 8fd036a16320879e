import re
from re import Pattern
from typing import Any, Iterable, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..exceptions import PatternDefinitionError


class ExactlySegment(BaseModel):
    """固定字元片段，例如電話號碼中的括號與破折號"""

    model_config = ConfigDict(frozen=True)

    exactly: str = Field(..., min_length=1, max_length=1, description="要插入的字元")


class CharSegment(BaseModel):
    """重複字元類別片段，例如「3 個數字」"""

    model_config = ConfigDict(frozen=True)

    char: Pattern[str] = Field(..., description="單一字元需符合的正規表示式")
    repeat: int = Field(1, ge=1, description="需要收集的字元數")

    @field_validator("char", mode="before")
    @classmethod
    def compile_char(cls, v):
        # \d 只接受 ASCII 數字，避免全形數字混入 raw
        if isinstance(v, str):
            try:
                return re.compile(v, re.ASCII)
            except re.error as e:
                raise ValueError(f"cannot compile {v!r}: {e}") from e
        return v

    def accepts(self, ch: str) -> bool:
        return self.char.fullmatch(ch) is not None


Segment = Union[ExactlySegment, CharSegment]
FormatPattern = Tuple[Segment, ...]


class FormattingResult(BaseModel):
    """格式化結果"""

    model_config = ConfigDict(frozen=True)

    formatted: str = Field("", description="依樣式重新排版後的字串")
    raw: str = Field("", description="只保留符合字元類別的原始內容")


def _build_segment(index: int, part: Any) -> Segment:
    if isinstance(part, (ExactlySegment, CharSegment)):
        return part

    if not isinstance(part, Mapping):
        raise PatternDefinitionError(f"unsupported segment type {type(part).__name__}", index)

    keys = set(part)
    try:
        if keys == {"exactly"}:
            return ExactlySegment(**part)
        if keys in ({"char"}, {"char", "repeat"}):
            return CharSegment(**part)
    except ValidationError as e:
        raise PatternDefinitionError(
            e.errors()[0]["msg"], index, details={"errors": e.errors(include_url=False)}
        ) from e

    raise PatternDefinitionError(f"unknown segment keys {sorted(keys)}", index)


def build_pattern(parts: Iterable[Any]) -> FormatPattern:
    """
    建立格式樣式

    Args:
        parts: 片段定義，可以是 dict（``{"exactly": "("}``、
            ``{"char": r"\\d", "repeat": 3}``）或已建立的片段物件

    Returns:
        不可變的片段 tuple

    Raises:
        PatternDefinitionError: 片段定義無效
    """
    pattern = tuple(_build_segment(i, part) for i, part in enumerate(parts))
    if not pattern:
        raise PatternDefinitionError("pattern has no segments")
    return pattern
