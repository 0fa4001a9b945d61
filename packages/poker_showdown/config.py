"""Configuration snapshot built from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ShowdownConfig:
    # pokerkit | fallback；None 表示交给 providers.selector（读取 POKER_EVAL）
    evaluator: str | None = None
    atomic_parse: bool = False

    @classmethod
    def build(cls) -> ShowdownConfig:
        return cls(atomic_parse=_env_enabled("POKER_PARSE_ATOMIC"))


def _env_enabled(name: str) -> bool:
    # only "1" enables
    return (os.getenv(name) or "").strip() == "1"


__all__ = ["ShowdownConfig"]
