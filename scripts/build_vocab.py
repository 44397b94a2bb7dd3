#!/usr/bin/env python3
"""CLI for counting a pre-tokenized corpus into a vocabulary."""

from __future__ import annotations

import argparse
from pathlib import Path

from avocab import VocabConfig, cli_build_vocab, load_vocab_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a vocabulary from whitespace-tokenized text")
    parser.add_argument("--input", nargs="+", required=True, help="Pre-tokenized input text files")
    parser.add_argument("--out", required=True, help="Output counts JSON path")
    parser.add_argument("--config", help="Optional vocabulary YAML config")
    parser.add_argument(
        "--cutoff",
        type=int,
        help="Drop tokens seen fewer than this many times (overrides the config)",
    )
    parser.add_argument(
        "--log-interval",
        type=int,
        default=100000,
        help="Print status every N lines (default: 100000)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = load_vocab_config(Path(args.config)) if args.config else VocabConfig()
    if args.cutoff is not None:
        config.cutoff = args.cutoff
    cli_build_vocab(args.input, args.out, config=config, log_interval=args.log_interval)


if __name__ == "__main__":
    main()
