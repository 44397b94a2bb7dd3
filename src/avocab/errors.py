"""Exceptions raised by the vocabulary registry."""

from __future__ import annotations


class VocabError(Exception):
    """Base class for vocabulary errors."""


class UnknownTokenError(VocabError, KeyError):
    def __init__(self, token: str, message: str | None = None) -> None:
        self.token = token
        super().__init__(message or f"token {token!r} is not in the vocabulary")

    def __str__(self) -> str:
        return str(self.args[0])


class IndexOutOfRangeError(VocabError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"index {index} is outside the vocabulary range [1, {size}]")


class EmbeddingFormatError(VocabError, ValueError):
    """An embeddings file line could not be parsed into a vector."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"cannot parse embedding on line {line_number}: {reason} ({line!r})")
