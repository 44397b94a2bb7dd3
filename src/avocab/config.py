"""Dataclasses and loader for vocabulary configuration."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .embeddings import DEFAULT_EMBEDDING_DIM, DEFAULT_INIT_RANGE
from .vocab import DEFAULT_UNK

# ${VAR} or ${VAR:-default}
_ENV_WITH_DEFAULT = re.compile(r"\$\{(?P<var>\w+)(?::-(?P<default>[^}]*))?\}")


@dataclass
class EmbeddingConfig:
    folder: Optional[str] = None
    dim: int = DEFAULT_EMBEDDING_DIM
    init_range: float = DEFAULT_INIT_RANGE
    validate_all: bool = True
    seed: Optional[int] = None


@dataclass
class VocabConfig:
    unk: Optional[str] = DEFAULT_UNK
    cutoff: int = 1
    embeddings: EmbeddingConfig = field(default_factory=EmbeddingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VocabConfig:
        emb = dict(data.get("embeddings") or {})
        if emb.get("folder") is not None:
            emb["folder"] = _expand_path(emb["folder"])
        fields = {k: v for k, v in data.items() if k != "embeddings"}
        return cls(embeddings=EmbeddingConfig(**emb), **fields)


def _expand_path(value: object) -> str:
    if not isinstance(value, (str, os.PathLike)):
        raise ValueError(f"embeddings.folder must be a path, got {value!r}")
    text = os.fspath(value)
    match = _ENV_WITH_DEFAULT.fullmatch(text)
    if match:
        return os.environ.get(match["var"], match["default"] or "")
    return os.path.expanduser(os.path.expandvars(text))


def load_vocab_config(path: Path) -> VocabConfig:
    data = yaml.safe_load(Path(path).read_text()) or {}
    return VocabConfig.from_dict(data)
