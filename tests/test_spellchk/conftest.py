"""
Shared fixtures for the spellchk test suite.
"""

import pytest

from spellchk.config import SpellchkConfig
from spellchk.dictionary import Dictionary


SAMPLE_WORDS = [
    "this", "is", "a", "test", "testing", "tests", "the", "quick", "brown", "fox",
    "jumps", "over", "lazy", "dog", "hello", "world", "help", "helper", "held",
    "word", "words", "spelling", "spell", "check", "checker", "comment", "string",
    "function", "returns", "value", "camel", "case", "snake", "kebab", "name",
    "example", "file", "line", "code", "text", "with", "and", "some", "in",
    "receive", "separate", "definitely", "to", "of", "not",
]


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point every spellchk directory at a temporary location."""
    data = tmp_path / "data"
    conf = tmp_path / "config"
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("SPELLCHK_DATA_DIR", str(data))
    monkeypatch.setenv("SPELLCHK_CONFIG_DIR", str(conf))
    for var in ("SPELLCHK_LANGUAGE", "SPELLCHK_MAX_SUGGESTIONS", "SPELLCHK_PERSONAL_DICT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(work)
    return {'data': data, 'config': conf, 'work': work}


@pytest.fixture
def dictionary() -> Dictionary:
    """Small in-memory dictionary."""
    return Dictionary.from_words(SAMPLE_WORDS, language="en_US")


@pytest.fixture
def config(tmp_path) -> SpellchkConfig:
    """Default configuration with a personal dictionary in the temp dir."""
    return SpellchkConfig(
        personal_dictionary=tmp_path / "personal.txt",
        data_dir=tmp_path / "data",
    )


@pytest.fixture
def write_file(isolated_dirs):
    """Write a file in the working directory and return its path."""
    def _write(name: str, content: str):
        path = isolated_dirs['work'] / name
        path.write_text(content, encoding='utf-8')
        return path
    return _write


@pytest.fixture
def installed(isolated_dirs):
    """Install the sample word list as the en_US dictionary."""
    Dictionary.build_from_words(SAMPLE_WORDS, isolated_dirs['data'] / "en_US.dict")
    return isolated_dirs
