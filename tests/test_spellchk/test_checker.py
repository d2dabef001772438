"""
Tests for the Checker
=====================
Tests for the personal dictionary, ignore patterns, per-span filtering,
replacement semantics and the fix modes.
"""

import pytest

from config_logging import FileError
from spellchk.checker import (
    ADD_TO_DICTIONARY,
    IgnorePatterns,
    PersonalWordSet,
    Replacement,
    SpellChecker,
    apply_replacements,
    match_case,
)
from spellchk.config import SpellchkConfig
from spellchk.dictionary import Dictionary
from spellchk.models import TextSpan


@pytest.fixture
def checker(config, dictionary) -> SpellChecker:
    return SpellChecker(config, dictionary=dictionary)


class TestPersonalWordSet:
    """Tests for PersonalWordSet."""

    def test_load_skips_comments_and_blanks(self, tmp_path):
        path = tmp_path / "personal.txt"
        path.write_text("# my words\nKubernetes\n\n  spellchk  \n", encoding='utf-8')

        words = PersonalWordSet.load(path)
        assert "kubernetes" in words
        assert "Spellchk" in words
        assert "my" not in words
        assert len(words) == 2

    def test_missing_file_is_empty(self, tmp_path):
        words = PersonalWordSet.load(tmp_path / "none.txt")
        assert len(words) == 0

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(FileError):
            PersonalWordSet.load(tmp_path)

    def test_add_and_flush(self, tmp_path):
        path = tmp_path / "personal.txt"
        path.write_text("existing", encoding='utf-8')
        words = PersonalWordSet.load(path)

        assert words.add("NewWord")
        assert not words.add("newword")
        assert "newword" in words
        assert words.flush() == 1
        assert path.read_text(encoding='utf-8') == "existing\nnewword\n"
        assert words.flush() == 0

    def test_flush_creates_file(self, tmp_path):
        path = tmp_path / "sub" / "personal.txt"
        words = PersonalWordSet(path=path)
        words.add("alpha")
        words.flush()
        assert path.read_text(encoding='utf-8') == "alpha\n"


class TestIgnorePatterns:
    """Tests for IgnorePatterns."""

    def test_builtin_rules(self):
        patterns = IgnorePatterns()
        assert patterns.matches("x")
        assert patterns.matches("12345")
        assert not patterns.matches("word")

    def test_default_patterns(self):
        patterns = IgnorePatterns(SpellchkConfig().ignore_patterns)
        assert patterns.matches("README")
        assert patterns.matches("https://example.com/path")
        assert patterns.matches("d41d8cd98f00b204e9800998ecf8427e")
        assert patterns.matches("someone@example.com")
        assert not patterns.matches("Hello")

    def test_invalid_pattern_dropped(self):
        patterns = IgnorePatterns(["[unclosed", "^ok$"])
        assert len(patterns.patterns) == 1
        assert patterns.matches("ok")

    def test_covered_ranges_merged(self):
        patterns = IgnorePatterns([r"ab", r"bc"])
        assert patterns.covered_ranges("xabcx ab") == [(1, 4), (6, 8)]


class TestCheckContent:
    """Tests for the filtering pipeline."""

    def test_end_to_end_example(self, config):
        d = Dictionary.from_words(["this", "is", "a", "test"])
        result = SpellChecker(config, dictionary=d).check_content("doc.txt", "This is a tst.")

        assert result.error_count == 1
        error = result.errors[0]
        assert (error.word, error.line, error.column) == ("tst", 1, 11)
        assert error.suggestions[0] == "test"

    def test_errors_in_document_order(self, checker):
        result = checker.check_content("doc.txt", "wrld is\nthe helo")
        assert [(e.word, e.line) for e in result.errors] == [("wrld", 1), ("helo", 2)]

    def test_personal_dictionary_skips(self, tmp_path, dictionary):
        path = tmp_path / "personal.txt"
        path.write_text("wrld\n", encoding='utf-8')
        checker = SpellChecker(SpellchkConfig(personal_dictionary=path), dictionary=dictionary)

        assert checker.check_content("doc.txt", "hello wrld").error_count == 0

    def test_case_insensitive_lookup(self, checker):
        assert checker.check_content("doc.txt", "HELLO Hello hello").error_count == 0

    def test_all_caps_ignored(self, checker):
        assert checker.check_content("doc.txt", "the FOOBAR and QWERTY").error_count == 0

    def test_url_in_prose_ignored(self, checker):
        result = checker.check_content("doc.txt", "see https://qwzx.example.org/blarg now")
        words = [e.word for e in result.errors]
        assert "qwzx" not in words
        assert "blarg" not in words
        assert "see" in words

    def test_email_ignored(self, checker):
        result = checker.check_content("doc.txt", "mail jdoe@qwzx.org")
        assert [e.word for e in result.errors] == ["mail"]

    def test_custom_pattern(self, tmp_path, dictionary):
        config = SpellchkConfig(ignore_patterns=(r"^qw",), data_dir=tmp_path)
        checker = SpellChecker(config, dictionary=dictionary)
        assert checker.check_content("doc.txt", "qwzx hello").error_count == 0

    def test_markdown_code_not_checked(self, checker):
        content = "hello world\n\n```\nqwzx blarg\n```\n"
        assert checker.check_content("doc.md", content).error_count == 0

    def test_source_code_only_comments(self, checker):
        content = "let qwzx = 1; // wrld\n"
        result = checker.check_content("main.rs", content)
        assert [e.word for e in result.errors] == ["wrld"]

    def test_camel_case_parts_checked(self, checker):
        result = checker.check_content("app.py", "# camelCase snake_case wrongPrt\n")
        assert [e.word for e in result.errors] == ["wrong", "prt"]

    def test_suggestion_limit(self, tmp_path, dictionary):
        config = SpellchkConfig(max_suggestions=1, data_dir=tmp_path)
        checker = SpellChecker(config, dictionary=dictionary)
        result = checker.check_content("doc.txt", "helo")
        assert len(result.errors[0].suggestions) == 1

    def test_check_reads_file(self, checker, write_file):
        path = write_file("notes.txt", "hello wrld\n")
        result = checker.check(path)
        assert result.error_count == 1
        assert result.fixed_count == 0

    def test_check_missing_file(self, checker, tmp_path):
        with pytest.raises(FileError):
            checker.check(tmp_path / "missing.txt")

    def test_loads_dictionary_from_config(self, config):
        Dictionary.build_from_words(["hello"], config.data_dir / "en_US.dict")
        checker = SpellChecker(config)
        assert checker.check_content("a.txt", "hello world").errors[0].word == "world"


class TestReplacements:
    """Tests for apply_replacements and match_case."""

    def test_match_case(self):
        assert match_case("teh", "the") == "the"
        assert match_case("Teh", "the") == "The"
        assert match_case("TEH", "the") == "THE"

    def test_offset_replacement_back_to_front(self):
        content = "aa bb aa"
        spans = [TextSpan("aa", 1, 1, start=0, end=2), TextSpan("aa", 1, 7, start=6, end=8)]
        new, failed = apply_replacements(content, [
            Replacement(spans[0], "first"), Replacement(spans[1], "second")
        ])

        assert new == "first bb second"
        assert failed == []

    def test_fallback_first_occurrence(self):
        span = TextSpan("teh", 3, 5)
        new, failed = apply_replacements("teh one teh two", [Replacement(span, "the")])
        assert new == "the one teh two"
        assert failed == []

    def test_stale_offsets_fall_back(self):
        span = TextSpan("wrd", 1, 1, start=0, end=3)
        new, _ = apply_replacements("xx wrd", [Replacement(span, "word")])
        assert new == "xx word"

    def test_not_found(self):
        span = TextSpan("gone", 1, 1)
        new, failed = apply_replacements("nothing here", [Replacement(span, "went")])
        assert new == "nothing here"
        assert len(failed) == 1


class TestFixAuto:
    """Tests for automatic fixing."""

    def test_end_to_end_example(self, config, write_file):
        d = Dictionary.from_words(["this", "is", "a", "test"])
        path = write_file("doc.txt", "This is a tst.")

        result = SpellChecker(config, dictionary=d).fix_auto(path)

        assert result.fixed_count == 1
        assert result.error_count == 0
        assert path.read_text(encoding='utf-8') == "This is a test."

    def test_repeated_word_each_occurrence(self, checker, write_file):
        path = write_file("doc.txt", "teh dog\nteh fox\n")
        result = checker.fix_auto(path)

        assert result.fixed_count == 2
        assert path.read_text(encoding='utf-8') == "the dog\nthe fox\n"

    def test_capitalisation_kept(self, checker, write_file):
        path = write_file("doc.txt", "Teh dog barks")
        checker.fix_auto(path)
        assert path.read_text(encoding='utf-8').startswith("The dog")

    def test_no_suggestion_left_as_error(self, checker, write_file):
        path = write_file("doc.txt", "hello qqqqqqqqqqqq")
        result = checker.fix_auto(path)

        assert result.fixed_count == 0
        assert [e.word for e in result.errors] == ["qqqqqqqqqqqq"]

    def test_unchanged_file_not_rewritten(self, checker, write_file):
        path = write_file("doc.txt", "hello world\n")
        before = path.stat().st_mtime_ns
        result = checker.fix_auto(path)

        assert result.fixed_count == 0
        assert path.stat().st_mtime_ns == before

    def test_crlf_preserved(self, checker, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_bytes(b"hello wrod\r\nworld\r\n")
        checker.fix_auto(path)
        assert path.read_bytes() == b"hello word\r\nworld\r\n"

    def test_source_code_comment_fixed(self, checker, write_file):
        path = write_file("main.go", "x := 1 // teh wrod\n")
        checker.fix_auto(path)
        assert path.read_text(encoding='utf-8') == "x := 1 // the word\n"

    def test_markdown_code_span_left_alone(self, config, write_file):
        d = Dictionary.from_words(["use", "here", "word"])
        path = write_file("doc.md", "Use `wrod\nx` wrod here\n")

        result = SpellChecker(config, dictionary=d).fix_auto(path)

        assert result.fixed_count == 1
        assert path.read_text(encoding='utf-8') == "Use `wrod\nx` word here\n"

    def test_markdown_link_target_left_alone(self, config, write_file):
        d = Dictionary.from_words(["link", "word"])
        path = write_file("doc.md", "[link](<wrod x>) wrod\n")

        SpellChecker(config, dictionary=d).fix_auto(path)

        assert path.read_text(encoding='utf-8') == "[link](<wrod x>) word\n"


class TestFixInteractive:
    """Tests for interactive fixing with a scripted prompt."""

    @staticmethod
    def scripted(*answers):
        calls = []
        answers = list(answers)

        def prompt(span, suggestions):
            calls.append((span.text, list(suggestions)))
            return answers.pop(0)
        prompt.calls = calls
        return prompt

    def test_replace_with_choice(self, checker, write_file):
        path = write_file("doc.txt", "helo wrld")
        prompt = self.scripted("help", "word")
        result = checker.fix_interactive(path, prompt)

        assert path.read_text(encoding='utf-8') == "help word"
        assert result.fixed_count == 2
        assert [c[0] for c in prompt.calls] == ["helo", "wrld"]

    def test_skip_counts_as_error(self, checker, write_file):
        path = write_file("doc.txt", "helo wrld")
        result = checker.fix_interactive(path, self.scripted(None, "world"))

        assert path.read_text(encoding='utf-8') == "helo world"
        assert result.fixed_count == 1
        assert [e.word for e in result.errors] == ["helo"]

    def test_add_to_dictionary(self, checker, config, write_file):
        path = write_file("doc.txt", "qwzx and qwzx with")
        prompt = self.scripted(ADD_TO_DICTIONARY)
        result = checker.fix_interactive(path, prompt)

        assert len(prompt.calls) == 1
        assert result.error_count == 0
        assert result.fixed_count == 0
        assert "qwzx" in config.personal_dictionary.read_text(encoding='utf-8')
        assert checker.check_content("doc.txt", "qwzx").error_count == 0

    def test_quit_propagates(self, checker, write_file):
        path = write_file("doc.txt", "helo wrld")

        def prompt(span, suggestions):
            raise SystemExit(0)

        with pytest.raises(SystemExit):
            checker.fix_interactive(path, prompt)
        assert path.read_text(encoding='utf-8') == "helo wrld"


class TestAddWords:
    """Tests for SpellChecker.add_words."""

    def test_add_words_persisted(self, checker, config):
        assert checker.add_words(["Kubernetes", "kubernetes", "helm"]) == 2
        content = config.personal_dictionary.read_text(encoding='utf-8')
        assert content.splitlines() == ["kubernetes", "helm"]
        assert checker.check_content("a.txt", "Kubernetes helm").error_count == 0
