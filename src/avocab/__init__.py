"""Token/index vocabulary registry with pretrained embedding hydration."""

from .config import EmbeddingConfig, VocabConfig, load_vocab_config
from .counts import build_vocab, cli_build_vocab, cli_export_embeddings, load_counts, save_counts
from .embeddings import (
    DEFAULT_EMBEDDING_DIM,
    EMBEDDINGS_FILENAME,
    WORDS_FILENAME,
    load_pretrained,
    save_pretrained,
)
from .errors import EmbeddingFormatError, IndexOutOfRangeError, UnknownTokenError, VocabError
from .vocab import DEFAULT_UNK, Vocabulary

__all__ = [
    "DEFAULT_EMBEDDING_DIM",
    "DEFAULT_UNK",
    "EMBEDDINGS_FILENAME",
    "WORDS_FILENAME",
    "EmbeddingConfig",
    "EmbeddingFormatError",
    "IndexOutOfRangeError",
    "UnknownTokenError",
    "VocabConfig",
    "VocabError",
    "Vocabulary",
    "build_vocab",
    "cli_build_vocab",
    "cli_export_embeddings",
    "load_counts",
    "load_pretrained",
    "load_vocab_config",
    "save_counts",
    "save_pretrained",
]
