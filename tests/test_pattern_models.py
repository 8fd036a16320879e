"""格式樣式模型測試"""

import re

import pytest
from pydantic import ValidationError

from formfields.core.exceptions import FormFieldsException, PatternDefinitionError
from formfields.core.models.pattern import (
    CharSegment,
    ExactlySegment,
    FormattingResult,
    build_pattern,
)


class TestSegments:
    """片段模型測試"""

    def test_exactly_segment(self):
        """測試固定字元片段"""
        segment = ExactlySegment(exactly="(")
        assert segment.exactly == "("

    def test_exactly_segment_rejects_multiple_characters(self):
        """測試固定字元只能有一個字元"""
        with pytest.raises(ValidationError):
            ExactlySegment(exactly="()")

        with pytest.raises(ValidationError):
            ExactlySegment(exactly="")

    def test_char_segment_compiles_string(self):
        """測試字元類別字串會被編譯"""
        segment = CharSegment(char=r"\d", repeat=3)
        assert isinstance(segment.char, re.Pattern)
        assert segment.repeat == 3
        assert segment.accepts("7")
        assert not segment.accepts("a")

    def test_char_segment_default_repeat(self):
        """測試 repeat 預設為 1"""
        assert CharSegment(char=r"[a-z]").repeat == 1

    def test_char_segment_ascii_digits_only(self):
        """測試全形數字不符合 \\d"""
        segment = CharSegment(char=r"\d")
        assert not segment.accepts("５")

    def test_char_segment_accepts_compiled_pattern(self):
        """測試直接傳入已編譯的樣式"""
        compiled = re.compile(r"[A-F]")
        segment = CharSegment(char=compiled, repeat=2)
        assert segment.char.pattern == "[A-F]"
        assert segment.accepts("B")

    def test_char_segment_rejects_zero_repeat(self):
        """測試 repeat 必須至少為 1"""
        with pytest.raises(ValidationError):
            CharSegment(char=r"\d", repeat=0)

    def test_segments_are_frozen(self):
        """測試片段不可修改"""
        segment = ExactlySegment(exactly="-")
        with pytest.raises(ValidationError):
            segment.exactly = "+"


class TestFormattingResult:
    """格式化結果測試"""

    def test_defaults(self):
        result = FormattingResult()
        assert result.formatted == ""
        assert result.raw == ""

    def test_equality(self):
        assert FormattingResult(formatted="(1", raw="1") == FormattingResult(formatted="(1", raw="1")


class TestBuildPattern:
    """build_pattern 測試"""

    def test_build_from_dicts(self):
        """測試從 dict 建立樣式"""
        pattern = build_pattern([
            {"exactly": "("},
            {"char": r"\d", "repeat": 3},
            {"exactly": ")"},
        ])

        assert isinstance(pattern, tuple)
        assert len(pattern) == 3
        assert isinstance(pattern[0], ExactlySegment)
        assert isinstance(pattern[1], CharSegment)
        assert pattern[1].repeat == 3

    def test_build_keeps_segment_instances(self):
        """測試已建立的片段原樣保留"""
        dash = ExactlySegment(exactly="-")
        pattern = build_pattern([dash, {"char": r"\d"}])
        assert pattern[0] is dash

    def test_empty_pattern(self):
        """測試空樣式"""
        with pytest.raises(PatternDefinitionError) as exc_info:
            build_pattern([])
        assert exc_info.value.index is None

    def test_invalid_regex(self):
        """測試無法編譯的正規表示式"""
        with pytest.raises(PatternDefinitionError) as exc_info:
            build_pattern([{"exactly": "("}, {"char": "[", "repeat": 2}])

        error = exc_info.value
        assert error.index == 1
        assert "#1" in str(error)
        assert error.details["index"] == 1
        assert "errors" in error.details

    def test_invalid_repeat(self):
        """測試 repeat 小於 1"""
        with pytest.raises(PatternDefinitionError) as exc_info:
            build_pattern([{"char": r"\d", "repeat": 0}])
        assert exc_info.value.index == 0

    def test_unknown_keys(self):
        """測試未知的片段欄位"""
        with pytest.raises(PatternDefinitionError) as exc_info:
            build_pattern([{"exactly": "(", "repeat": 2}])
        assert "unknown segment keys" in exc_info.value.reason

    def test_unsupported_type(self):
        """測試不支援的片段型別"""
        with pytest.raises(PatternDefinitionError) as exc_info:
            build_pattern(["("])
        assert "str" in exc_info.value.reason

    def test_error_is_namespaced_exception(self):
        """測試異常繼承基礎類別並帶有使用者訊息"""
        with pytest.raises(FormFieldsException) as exc_info:
            build_pattern([{"exactly": "ab"}])
        assert exc_info.value.user_message
