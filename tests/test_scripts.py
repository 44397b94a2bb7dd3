import sys
from pathlib import Path

import torch

from avocab import load_counts
from scripts import build_vocab, export_embeddings


def test_build_then_export(tmp_path: Path, monkeypatch) -> None:
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("dog bird dog\n", encoding="utf-8")
    counts = tmp_path / "counts.json"
    monkeypatch.setattr(
        sys,
        "argv",
        ["build_vocab.py", "--input", str(corpus), "--out", str(counts), "--log-interval", "0"],
    )
    build_vocab.main()
    vocab = load_counts(counts)
    assert list(vocab) == ["UNK", "dog", "bird"]

    glove = tmp_path / "glove"
    glove.mkdir()
    (glove / "words.lst").write_text("cat\ndog\n", encoding="utf-8")
    (glove / "embeddings.txt").write_text(
        " ".join(["1"] * 50) + "\n" + " ".join(["2"] * 50) + "\n", encoding="utf-8"
    )
    out = tmp_path / "emb.pt"
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "export_embeddings.py",
            "--counts",
            str(counts),
            "--pretrained",
            str(glove),
            "--out",
            str(out),
            "--seed",
            "3",
            "--log-interval",
            "0",
        ],
    )
    export_embeddings.main()
    matrix = torch.load(out)
    assert matrix.shape == (3, 50)
    assert torch.all(matrix[vocab.row_of("dog")] == 2.0)
