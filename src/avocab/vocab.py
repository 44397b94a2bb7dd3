"""Bidirectional token/index registry with occurrence counts."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from pathlib import Path

import torch

from .embeddings import DEFAULT_EMBEDDING_DIM, DEFAULT_INIT_RANGE, load_pretrained
from .errors import IndexOutOfRangeError, UnknownTokenError

DEFAULT_UNK = "UNK"


class Vocabulary:
    """Maps tokens to stable 1-based indices and tracks how often each was added.

    ``unk`` selects the out-of-vocabulary behaviour: leave it out to get the
    conventional ``"UNK"`` sentinel, pass another string to use that instead,
    or pass ``None`` to disable the fallback so that lookups of absent tokens
    raise :class:`UnknownTokenError`. A configured sentinel always holds
    index 1 and starts with a count of 0.
    """

    def __init__(self, unk: str | None = DEFAULT_UNK) -> None:
        self._unk = unk
        self.index_to_token: list[str] = []
        self.token_to_index: dict[str, int] = {}
        self.counter: dict[str, int] = {}
        if unk is not None:
            self.add(unk, 0)

    @property
    def unk(self) -> str | None:
        return self._unk

    @property
    def unk_index(self) -> int | None:
        if self._unk is None:
            return None
        return self.token_to_index[self._unk]

    def describe(self) -> str:
        return f"Vocab({self.size()} words, unk={self._unk})"

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return self.describe()

    def contains(self, token: str) -> bool:
        return token in self.token_to_index

    def __contains__(self, token: object) -> bool:
        return token in self.token_to_index

    def count(self, token: str) -> int:
        if not self.contains(token):
            raise UnknownTokenError(
                token,
                f"attempted to get count of token {token!r} which is not in the vocabulary",
            )
        return self.counter[token]

    def total_count(self) -> int:
        return sum(self.counter.values())

    def size(self) -> int:
        return len(self.index_to_token)

    def __len__(self) -> int:
        return len(self.index_to_token)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.index_to_token))

    def items(self) -> Iterator[tuple[str, int]]:
        """Yield ``(token, count)`` pairs in index order."""

        for token in list(self.index_to_token):
            yield token, self.counter[token]

    def add(self, token: str, count: int = 1) -> int:
        """Add ``token`` ``count`` times and return its index.

        Known tokens keep their index and only have their count bumped; new
        tokens are appended and receive the next index.
        """

        if self.contains(token):
            self.counter[token] += count
        else:
            self.counter[token] = count
            self.index_to_token.append(token)
            self.token_to_index[token] = self.size()
        return self.token_to_index[token]

    def extend(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            self.add(token)

    def index_of(self, token: str, add: bool = False) -> int:
        """Return the index of ``token``.

        With ``add`` the token is counted (and inserted if missing) exactly like
        :meth:`add`. Otherwise an absent token resolves to the unknown token's
        index, or raises :class:`UnknownTokenError` when no fallback is set.
        """

        if add:
            return self.add(token, 1)
        if token in self.token_to_index:
            return self.token_to_index[token]
        if self._unk is None or self._unk not in self.token_to_index:
            raise UnknownTokenError(
                token,
                f"token {token!r} is not in the vocabulary and there is no unknown token to fall back to",
            )
        return self.token_to_index[self._unk]

    def row_of(self, token: str) -> int:
        """Row of ``token`` in a matrix materialized from this vocabulary."""

        return self.index_of(token) - 1

    def word_at(self, index: int) -> str:
        index = operator.index(index)
        if index < 1 or index > self.size():
            raise IndexOutOfRangeError(index, self.size())
        return self.index_to_token[index - 1]

    def indices_of(self, tokens: Iterable[str], add: bool = False) -> list[int]:
        return [self.index_of(token, add) for token in tokens]

    def tensor_indices_of(self, tokens: Iterable[str], add: bool = False) -> torch.Tensor:
        return torch.tensor(self.indices_of(tokens, add), dtype=torch.long)

    def words_at(self, indices: Iterable[int]) -> list[str]:
        return [self.word_at(index) for index in indices]

    def tensor_words_at(self, indices: torch.Tensor) -> list[str]:
        if indices.dim() != 1:
            raise ValueError(f"expected a 1-D tensor of indices, got shape {tuple(indices.shape)}")
        return self.words_at(indices.tolist())

    def copy_and_prune_rares(self, cutoff: int) -> Vocabulary:
        """Return a new vocabulary without tokens seen fewer than ``cutoff`` times.

        Survivors are re-added in index order, so they keep their relative
        order but are renumbered without gaps. The unknown token is always
        kept. This vocabulary is left untouched.
        """

        pruned = type(self)(self._unk)
        for token, count in self.items():
            if count >= cutoff or token == self._unk:
                pruned.add(token, count)
        return pruned

    @classmethod
    def from_counts(
        cls,
        pairs: Iterable[tuple[str, int]],
        unk: str | None = DEFAULT_UNK,
    ) -> Vocabulary:
        vocab = cls(unk)
        for token, count in pairs:
            vocab.add(token, count)
        return vocab

    def pretrained(
        self,
        folder: Path | str,
        *,
        dim: int = DEFAULT_EMBEDDING_DIM,
        init_range: float = DEFAULT_INIT_RANGE,
        validate_all: bool = True,
        generator: torch.Generator | None = None,
        log_interval: int | None = None,
    ) -> torch.Tensor:
        """Embedding matrix aligned to this vocabulary, see :func:`load_pretrained`."""

        return load_pretrained(
            self,
            Path(folder),
            dim=dim,
            init_range=init_range,
            validate_all=validate_all,
            generator=generator,
            log_interval=log_interval,
        )
