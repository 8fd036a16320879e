import os
import sys

import pytest

# 添加 src 目錄到 Python 路徑
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from formfields.core.models.pattern import build_pattern


@pytest.fixture
def zip_pattern():
    """ZIP+4 格式樣式 99999-9999"""
    return build_pattern([
        {"char": r"\d", "repeat": 5},
        {"exactly": "-"},
        {"char": r"\d", "repeat": 4},
    ])


@pytest.fixture
def clean_env(monkeypatch):
    """清除 FORMFIELDS_ 環境變數"""
    for key in list(os.environ):
        if key.startswith("FORMFIELDS_"):
            monkeypatch.delenv(key)
    yield monkeypatch
