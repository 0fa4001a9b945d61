# tests/conftest.py
import sys
from pathlib import Path

import pytest

# 项目根目录：tests/ 的上一级
ROOT = Path(__file__).resolve().parents[1]
PACKAGES_DIR = ROOT / "packages"

# 关键：把 packages 放到 sys.path 顶部
sys.path.insert(0, str(PACKAGES_DIR))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("POKER_EVAL", raising=False)
    monkeypatch.delenv("POKER_PARSE_ATOMIC", raising=False)
    from poker_showdown.providers.selector import get_evaluator

    get_evaluator.cache_clear()
    yield
    get_evaluator.cache_clear()
