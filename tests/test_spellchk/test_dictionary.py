"""
Tests for Dictionary
====================
Tests for membership, prefix enumeration, the on-disk format and bootstrap.
"""

import gzip
import json

import pytest

from config_logging import DictionaryError
from spellchk.dictionary import Dictionary, dictionary_path
from spellchk.wordlist import get_basic_wordlist


def write_dict_file(path, payload):
    with gzip.open(path, 'wt', encoding='utf-8') as f:
        json.dump(payload, f)


class TestDictionaryQueries:
    """Tests for in-memory lookups."""

    def test_contains(self, dictionary):
        assert dictionary.contains("hello")
        assert not dictionary.contains("helo")
        assert "world" in dictionary
        assert 42 not in dictionary

    def test_case_sensitive(self, dictionary):
        """Callers lowercase before asking."""
        assert not dictionary.contains("Hello")

    def test_deduplicated_and_sorted(self):
        d = Dictionary.from_words(["beta", "alpha", "beta", "", "gamma"])
        assert d.all_words() == ("alpha", "beta", "gamma")
        assert len(d) == 3
        assert d.word_count == 3

    def test_words_with_prefix(self, dictionary):
        assert dictionary.words_with_prefix("hel") == ["held", "hello", "help", "helper"]
        assert dictionary.words_with_prefix("zzz") == []

    def test_empty_prefix_returns_everything(self, dictionary):
        assert dictionary.words_with_prefix("") == list(dictionary.all_words())

    def test_every_prefix_finds_word(self, dictionary):
        for word in dictionary.all_words():
            assert dictionary.contains(word)
            for k in range(len(word) + 1):
                assert word in dictionary.words_with_prefix(word[:k])


class TestDictionaryFile:
    """Tests for build_from_words / load_from_path."""

    def test_round_trip(self, tmp_path):
        words = ["zebra", "apple", "mango", "apple", "kiwi"]
        path = tmp_path / "xx.dict"

        count = Dictionary.build_from_words(words, path)
        loaded = Dictionary.load_from_path(path)

        assert count == 4
        assert loaded.all_words() == ("apple", "kiwi", "mango", "zebra")
        for word in set(words):
            assert loaded.contains(word)
        assert not loaded.contains("banana")

    def test_file_format(self, tmp_path):
        path = tmp_path / "en_US.dict"
        Dictionary.build_from_words(["b", "a"], path)

        with gzip.open(path, 'rt', encoding='utf-8') as f:
            data = json.load(f)
        assert data == {"format": "spellchk-dict", "version": 1, "word_count": 2,
                        "words": ["a", "b"]}

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "en_US.dict"
        Dictionary.build_from_words(["word"], path)
        assert path.exists()

    def test_not_gzip(self, tmp_path):
        path = tmp_path / "bad.dict"
        path.write_bytes(b"this is not a dictionary")
        with pytest.raises(DictionaryError, match="corrupt"):
            Dictionary.load_from_path(path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.dict"
        with gzip.open(path, 'wt') as f:
            f.write("{not json")
        with pytest.raises(DictionaryError, match="corrupt"):
            Dictionary.load_from_path(path)

    @pytest.mark.parametrize("payload", [
        {"format": "other", "version": 1, "word_count": 0, "words": []},
        {"format": "spellchk-dict", "version": 99, "word_count": 0, "words": []},
        {"format": "spellchk-dict", "version": 1, "word_count": 5, "words": ["a"]},
        {"format": "spellchk-dict", "version": 1, "word_count": 2, "words": ["b", "a"]},
        {"format": "spellchk-dict", "version": 1, "word_count": 2, "words": ["a", "a"]},
        {"format": "spellchk-dict", "version": 1, "word_count": 1, "words": [3]},
        ["a", "b"],
    ])
    def test_structural_corruption(self, tmp_path, payload):
        path = tmp_path / "bad.dict"
        write_dict_file(path, payload)
        with pytest.raises(DictionaryError):
            Dictionary.load_from_path(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DictionaryError, match="not found"):
            Dictionary.load_from_path(tmp_path / "missing.dict")

    def test_error_details(self, tmp_path):
        path = tmp_path / "bad.dict"
        path.write_bytes(b"garbage")
        with pytest.raises(DictionaryError) as exc_info:
            Dictionary.load_from_path(path)
        assert exc_info.value.code == "DICTIONARY_ERROR"
        assert exc_info.value.details['path'] == str(path)


class TestBootstrap:
    """Tests for Dictionary.load falling back to the embedded word list."""

    def test_bootstrap_written_and_loaded(self, tmp_path):
        d = Dictionary.load("en_US", tmp_path)

        assert dictionary_path("en_US", tmp_path).exists()
        assert d.language == "en_US"
        assert d.contains("the")
        assert d.contains("function")
        assert len(d) == len(get_basic_wordlist("en_US"))

    def test_existing_file_preferred(self, tmp_path):
        Dictionary.build_from_words(["custom", "words"], dictionary_path("en_US", tmp_path))
        d = Dictionary.load("en_US", tmp_path)
        assert d.all_words() == ("custom", "words")

    def test_non_english_gets_minimal_list(self, tmp_path):
        d = Dictionary.load("fr_FR", tmp_path)
        assert d.contains("the")
        assert len(d) < len(get_basic_wordlist("en_US"))

    def test_default_data_dir_from_environment(self, isolated_dirs):
        Dictionary.load("en_GB")
        assert (isolated_dirs['data'] / "en_GB.dict").exists()

    def test_bootstrap_write_failure(self, tmp_path):
        """A data directory that cannot be created is fatal."""
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("file")
        with pytest.raises(DictionaryError, match="Cannot write"):
            Dictionary.load("en_US", blocker)

    def test_corrupt_existing_file_not_replaced(self, tmp_path):
        path = dictionary_path("en_US", tmp_path)
        path.write_bytes(b"garbage")
        with pytest.raises(DictionaryError):
            Dictionary.load("en_US", tmp_path)
        assert path.read_bytes() == b"garbage"


class TestWordlist:
    """Tests for the embedded word list."""

    def test_lowercase_sorted_unique(self):
        words = get_basic_wordlist("en_US")
        assert words == sorted(set(words))
        assert all(w == w.lower() for w in words)
        assert all(" " not in w for w in words)
