"""Line readers for word lists, embedding files and pre-tokenized corpora."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from pathlib import Path


def iter_lines(path: Path) -> Iterator[str]:
    with Path(path).open("r", encoding="utf-8") as handle:
        for line in handle:
            yield line.rstrip("\n")


def iter_token_lines(paths: Sequence[Path]) -> Iterator[list[str]]:
    """Yield the whitespace separated tokens of every line in ``paths``.

    The input is expected to be tokenized already; blank lines are skipped.
    """

    for path in paths:
        for line in iter_lines(path):
            tokens = line.split()
            if tokens:
                yield tokens
