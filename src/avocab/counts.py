"""Counting corpora into vocabularies and persisting the counts."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

import torch

from .config import VocabConfig
from .text_io import iter_token_lines
from .vocab import DEFAULT_UNK, Vocabulary


def build_vocab(
    token_lines: Iterable[list[str]],
    *,
    unk: str | None = DEFAULT_UNK,
    cutoff: int = 1,
    log_interval: int | None = None,
) -> Vocabulary:
    vocab = Vocabulary(unk)
    lines = 0
    for tokens in token_lines:
        vocab.indices_of(tokens, add=True)
        lines += 1
        if log_interval and log_interval > 0 and lines % log_interval == 0:
            print(f"[vocab] lines={lines:,} types={len(vocab):,}", flush=True)

    if cutoff > 1:
        before = len(vocab)
        vocab = vocab.copy_and_prune_rares(cutoff)
        if log_interval and log_interval > 0:
            print(
                f"[vocab] pruned {before - len(vocab):,} types below cutoff={cutoff}",
                flush=True,
            )
    if log_interval and log_interval > 0:
        print(f"[vocab] finished with {vocab}", flush=True)
    return vocab


def save_counts(vocab: Vocabulary, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {"unk": vocab.unk, "tokens": [[token, count] for token, count in vocab.items()]}
    path.write_text(json.dumps(data, ensure_ascii=False, indent=2))


def load_counts(path: Path) -> Vocabulary:
    data = json.loads(Path(path).read_text())
    return Vocabulary.from_counts(
        ((token, int(count)) for token, count in data["tokens"]),
        unk=data.get("unk"),
    )


def cli_build_vocab(
    input_paths: list[str],
    output_path: str,
    *,
    config: VocabConfig | None = None,
    log_interval: int | None = None,
) -> Vocabulary:
    config = config or VocabConfig()
    vocab = build_vocab(
        iter_token_lines([Path(p) for p in input_paths]),
        unk=config.unk,
        cutoff=config.cutoff,
        log_interval=log_interval,
    )
    save_counts(vocab, Path(output_path))
    return vocab


def cli_export_embeddings(
    counts_path: str,
    output_path: str,
    *,
    config: VocabConfig | None = None,
    folder: str | None = None,
    log_interval: int | None = None,
) -> torch.Tensor:
    config = config or VocabConfig()
    emb = config.embeddings
    folder = folder or emb.folder
    if not folder:
        raise ValueError("no pretrained embeddings folder given")
    generator = None
    if emb.seed is not None:
        generator = torch.Generator().manual_seed(emb.seed)

    vocab = load_counts(Path(counts_path))
    matrix = vocab.pretrained(
        folder,
        dim=emb.dim,
        init_range=emb.init_range,
        validate_all=emb.validate_all,
        generator=generator,
        log_interval=log_interval,
    )
    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    torch.save(matrix, out)
    return matrix
