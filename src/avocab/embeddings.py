"""Hydrate embedding matrices from a pretrained word-vector folder.

A pretrained folder holds two line-aligned files:

* ``words.lst`` - one token per line; line ``k`` is source index ``k``.
* ``embeddings.txt`` - one whitespace separated vector per line, in the same
  order as the word list.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import torch

from .errors import EmbeddingFormatError
from .text_io import iter_lines

if TYPE_CHECKING:
    from .vocab import Vocabulary

WORDS_FILENAME = "words.lst"
EMBEDDINGS_FILENAME = "embeddings.txt"
DEFAULT_EMBEDDING_DIM = 50
DEFAULT_INIT_RANGE = 0.1


def load_word_list(path: Path) -> list[str]:
    return list(iter_lines(path))


def parse_embedding_line(line: str, dim: int, line_number: int) -> np.ndarray:
    fields = line.split()
    if len(fields) != dim:
        raise EmbeddingFormatError(line_number, line, f"expected {dim} values, found {len(fields)}")
    try:
        return np.asarray(fields, dtype=np.float32)
    except ValueError as exc:
        raise EmbeddingFormatError(line_number, line, "non-numeric value") from exc


def _require_file(path: Path, what: str) -> None:
    if not path.is_file():
        raise FileNotFoundError(f"{what} does not exist at {path}")


def load_pretrained(
    vocab: Vocabulary,
    folder: Path,
    *,
    dim: int = DEFAULT_EMBEDDING_DIM,
    init_range: float = DEFAULT_INIT_RANGE,
    validate_all: bool = True,
    generator: torch.Generator | None = None,
    log_interval: int | None = None,
) -> torch.Tensor:
    """Build a ``[len(vocab), dim]`` matrix aligned to ``vocab``'s indices.

    Every row starts out uniformly random in ``[-init_range, init_range]``.
    Rows of tokens found in the pretrained word list are then overwritten
    with the matching vector; row ``i - 1`` belongs to vocabulary index ``i``.

    With ``validate_all`` every embeddings line must parse into ``dim``
    numbers. Without it, lines whose token is not in ``vocab`` are skipped
    unread. The vocabulary itself is never modified.
    """

    folder = Path(folder)
    words_path = folder / WORDS_FILENAME
    embeddings_path = folder / EMBEDDINGS_FILENAME
    _require_file(words_path, "word list")
    _require_file(embeddings_path, "embeddings file")

    words = load_word_list(words_path)
    matrix = torch.empty(len(vocab), dim).uniform_(-init_range, init_range, generator=generator)

    matched = 0
    line_number = 0
    for line_number, line in enumerate(iter_lines(embeddings_path), start=1):
        if line_number > len(words):
            if not line.strip():
                continue
            raise EmbeddingFormatError(
                line_number,
                line,
                f"embeddings file is longer than the {len(words)}-line word list",
            )
        word = words[line_number - 1]
        known = word in vocab
        if not known and not validate_all:
            continue
        vector = parse_embedding_line(line, dim, line_number)
        if known:
            matrix[vocab.row_of(word)] = torch.from_numpy(vector)
            matched += 1
        if log_interval and log_interval > 0 and line_number % log_interval == 0:
            print(f"[vocab] embeddings lines={line_number:,} matched={matched:,}", flush=True)

    if log_interval and log_interval > 0:
        print(
            f"[vocab] loaded {matched:,}/{len(vocab):,} rows from {line_number:,} pretrained vectors",
            flush=True,
        )
    return matrix


def save_pretrained(words: Sequence[str], matrix: torch.Tensor, folder: Path) -> None:
    if matrix.dim() != 2 or matrix.shape[0] != len(words):
        raise ValueError(
            f"matrix of shape {tuple(matrix.shape)} does not match {len(words)} words"
        )
    folder = Path(folder)
    folder.mkdir(parents=True, exist_ok=True)
    with (folder / WORDS_FILENAME).open("w", encoding="utf-8") as writer:
        for word in words:
            writer.write(word + "\n")
    with (folder / EMBEDDINGS_FILENAME).open("w", encoding="utf-8") as writer:
        for row in matrix.tolist():
            writer.write(" ".join(f"{value:.6g}" for value in row) + "\n")
