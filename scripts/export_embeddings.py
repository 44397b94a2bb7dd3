#!/usr/bin/env python3
"""CLI for materializing a pretrained embedding matrix for a saved vocabulary."""

from __future__ import annotations

import argparse
from pathlib import Path

from avocab import VocabConfig, cli_export_embeddings, load_vocab_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Export an embedding matrix aligned to a vocabulary")
    parser.add_argument("--counts", required=True, help="Counts JSON written by build_vocab.py")
    parser.add_argument("--pretrained", help="Folder holding words.lst and embeddings.txt")
    parser.add_argument("--out", required=True, help="Output path for the torch.save'd matrix")
    parser.add_argument("--config", help="Optional vocabulary YAML config")
    parser.add_argument("--seed", type=int, help="Seed for the random row initialization")
    parser.add_argument(
        "--log-interval",
        type=int,
        default=50000,
        help="Print status every N embedding lines (default: 50000)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = load_vocab_config(Path(args.config)) if args.config else VocabConfig()
    if args.seed is not None:
        config.embeddings.seed = args.seed
    cli_export_embeddings(
        args.counts,
        args.out,
        config=config,
        folder=args.pretrained,
        log_interval=args.log_interval,
    )


if __name__ == "__main__":
    main()
