"""
选择合适的评估器。

- 默认使用 PokerKit 评估器
- 支持环境变量控制：POKER_EVAL=pokerkit 或 POKER_EVAL=fallback
- 未知取值直接抛错（显式暴露问题），不做静默回退
"""

import os
from functools import lru_cache

from .interfaces import HandEvaluator
from .simple_fallback import SimpleFallbackEvaluator

EVALUATORS = ("pokerkit", "fallback")


def _new_pokerkit() -> HandEvaluator:
    from .pokerkit_adapter import PokerKitEvaluator

    return PokerKitEvaluator()


def make_evaluator(name: str) -> HandEvaluator:
    want = (name or "").strip().lower() or "pokerkit"
    if want == "pokerkit":
        return _new_pokerkit()
    if want == "fallback":
        return SimpleFallbackEvaluator()
    raise ValueError(f"unknown evaluator {name!r}; expected one of {EVALUATORS}")


@lru_cache(maxsize=1)
def get_evaluator() -> HandEvaluator:
    return make_evaluator(os.getenv("POKER_EVAL") or "")
