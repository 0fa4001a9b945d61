# packages/poker_showdown/session_types.py
from __future__ import annotations

from dataclasses import dataclass

from .hand import Hand


@dataclass(frozen=True)
class Rejection:
    line_no: int  # 本轮内的行号（从 1 开始）
    line: str
    error_type: str
    message: str


@dataclass(frozen=True)
class RoundView:
    round_no: int  # 第几轮（从 1 开始）
    hands: tuple[Hand, ...]  # 已排名，按 (standing, owner_id) 排列
    rejected: tuple[Rejection, ...] = ()
