from __future__ import annotations

from typing import Sequence


class QuoteError(Exception):
    """Base class for quote service errors."""


class QuoteValidationError(QuoteError):
    def __init__(self, messages: Sequence[str]) -> None:
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class QuoteNotFoundError(QuoteError, KeyError):
    def __init__(self, quote_id: str) -> None:
        self.quote_id = quote_id
        super().__init__(f"Quote not found: {quote_id}")

    def __str__(self) -> str:
        return self.args[0]


class QuoteStateError(QuoteError):
    def __init__(self, quote_id: str, status: str, action: str) -> None:
        self.quote_id = quote_id
        self.status = status
        self.action = action
        super().__init__(f"Cannot {action} quote {quote_id} with status {status}")


__all__ = ["QuoteError", "QuoteValidationError", "QuoteNotFoundError", "QuoteStateError"]
