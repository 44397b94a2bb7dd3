from pathlib import Path

import pytest

from avocab import VocabConfig, load_vocab_config


def test_load_vocab_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("GLOVE_DIR", str(tmp_path / "glove"))
    path = tmp_path / "vocab.yaml"
    path.write_text(
        """
        unk: "<unk>"
        cutoff: 3
        embeddings:
          folder: ${GLOVE_DIR}
          dim: 100
          seed: 11
        """
    )
    config = load_vocab_config(path)
    assert config.unk == "<unk>"
    assert config.cutoff == 3
    assert config.embeddings.folder == str(tmp_path / "glove")
    assert config.embeddings.dim == 100
    assert config.embeddings.init_range == 0.1
    assert config.embeddings.validate_all is True


def test_null_unk_disables_fallback(tmp_path: Path) -> None:
    path = tmp_path / "vocab.yaml"
    path.write_text("unk: null\n")
    assert load_vocab_config(path).unk is None


def test_defaults() -> None:
    config = VocabConfig.from_dict({})
    assert config.unk == "UNK"
    assert config.cutoff == 1
    assert config.embeddings.dim == 50
    assert config.embeddings.folder is None


def test_env_default_used_when_unset(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv("AVOCAB_GLOVE", raising=False)
    config = VocabConfig.from_dict({"embeddings": {"folder": "${AVOCAB_GLOVE:-/data/glove}"}})
    assert config.embeddings.folder == "/data/glove"

    monkeypatch.setenv("AVOCAB_GLOVE", str(tmp_path))
    config = VocabConfig.from_dict({"embeddings": {"folder": "${AVOCAB_GLOVE:-/data/glove}"}})
    assert config.embeddings.folder == str(tmp_path)


def test_non_path_folder_rejected() -> None:
    with pytest.raises(ValueError, match="embeddings.folder"):
        VocabConfig.from_dict({"embeddings": {"folder": 5}})
