"""Validation errors raised while parsing and ranking a round.

All of them are recoverable by the caller; none is retried internally.
"""

from __future__ import annotations

from typing import Any


class ValidationError(ValueError):
    """统一校验异常：`error_type` 为稳定的错误码，`detail` 为出错的 token/值。"""

    error_type = "invalid"
    default_msg = "validation failed"

    def __init__(self, detail: Any = None, message: str | None = None):
        self.detail = detail
        self.message = message or self._format(detail)
        super().__init__(f"{self.error_type}: {self.message}")

    def _format(self, detail: Any) -> str:
        if detail is None:
            return self.default_msg
        return f"{self.default_msg} ({detail!r})"


class EmptyInput(ValidationError):
    error_type = "empty_input"
    default_msg = "input may not be empty"


class WrongTokenCount(ValidationError):
    error_type = "wrong_token_count"
    default_msg = "input requires 6 whitespace-delimited tokens"


class InvalidOwnerId(ValidationError):
    error_type = "invalid_owner_id"
    default_msg = "first token must be an integer player id"


class DuplicateOwner(ValidationError):
    error_type = "duplicate_owner"
    default_msg = "player id already in use this round"


class InvalidCardToken(ValidationError):
    error_type = "invalid_card_token"
    default_msg = "invalid card token"


class DuplicateCard(ValidationError):
    error_type = "duplicate_card"
    default_msg = "card already dealt this round"


class Unclassified(ValidationError):
    error_type = "unclassified"
    default_msg = "hand has no category"


__all__ = [
    "DuplicateCard",
    "DuplicateOwner",
    "EmptyInput",
    "InvalidCardToken",
    "InvalidOwnerId",
    "Unclassified",
    "ValidationError",
    "WrongTokenCount",
]
