"""
Tests for the Command Line
==========================
Tests for exit codes, output formats, fix modes and the dict subcommand.
"""

import json

import pytest

from spellchk.cli import main


class TestCheckCommand:
    """Tests for checking files."""

    def test_clean_file(self, installed, write_file, capsys):
        path = write_file("ok.txt", "hello world\n")
        assert main([str(path)]) == 0
        assert "No spelling errors found" in capsys.readouterr().out

    def test_errors_exit_one(self, installed, write_file, capsys):
        path = write_file("bad.txt", "hello wrld\n")
        assert main([str(path)]) == 1

        out = capsys.readouterr().out
        assert "wrld" in out
        assert "1 errors found in 1 files" in out

    def test_suggestions_shown(self, installed, write_file, capsys):
        path = write_file("bad.txt", "the wrod\n")
        main([str(path)])
        assert "→ word" in capsys.readouterr().out

    def test_no_fail(self, installed, write_file):
        path = write_file("bad.txt", "hello wrld\n")
        assert main([str(path), "--no-fail"]) == 0

    def test_json_output(self, installed, write_file, capsys):
        path = write_file("bad.txt", "hello wrod\n")
        assert main([str(path), "-o", "json"]) == 1

        document = json.loads(capsys.readouterr().out)
        assert document['files_checked'] == 1
        assert document['total_errors'] == 1
        error = document['errors'][0]
        assert error['file'] == str(path)
        assert (error['line'], error['column'], error['word']) == (1, 7, "wrod")
        assert error['suggestions'][0] == "word"
        assert "wrod" in error['context']

    def test_several_files(self, installed, write_file, capsys):
        first = write_file("a.txt", "wrld\n")
        second = write_file("b.md", "# Title\n\nqwzx here\n")
        assert main([str(first), str(second), "-o", "json"]) == 1

        document = json.loads(capsys.readouterr().out)
        assert document['files_checked'] == 2
        assert {e['file'] for e in document['errors']} == {str(first), str(second)}

    def test_missing_file_reported_and_skipped(self, installed, write_file, capsys):
        good = write_file("good.txt", "hello\n")
        assert main(["missing.txt", str(good)]) == 0
        assert "missing.txt" in capsys.readouterr().out

    def test_ignore_pattern(self, installed, write_file):
        path = write_file("bad.txt", "hello wrld\n")
        assert main([str(path), "--ignore-pattern", "^wr"]) == 0

    def test_language_bootstrap(self, isolated_dirs, write_file):
        path = write_file("doc.txt", "the document\n")
        assert main([str(path), "-l", "en_GB"]) == 0
        assert (isolated_dirs['data'] / "en_GB.dict").exists()


class TestFixCommand:
    """Tests for --fix."""

    def test_fix(self, installed, write_file, capsys):
        path = write_file("bad.txt", "teh wrod\n")
        assert main([str(path), "--fix"]) == 0

        assert path.read_text(encoding='utf-8') == "the word\n"
        assert "2 corrections applied to 1 files" in capsys.readouterr().out

    def test_nothing_to_fix(self, installed, write_file, capsys):
        path = write_file("ok.txt", "hello world\n")
        assert main([str(path), "--fix"]) == 0
        assert "No corrections needed" in capsys.readouterr().out

    def test_fix_never_fails(self, installed, write_file):
        path = write_file("bad.txt", "qqqqqqqqqq\n")
        assert main([str(path), "--fix"]) == 0

    def test_interactive_requires_fix(self, installed, write_file):
        path = write_file("bad.txt", "teh\n")
        with pytest.raises(SystemExit) as exc_info:
            main([str(path), "--interactive"])
        assert exc_info.value.code == 2

    def test_interactive(self, installed, write_file, monkeypatch):
        path = write_file("bad.txt", "teh wrod\n")
        answers = iter(["1", "s"])
        monkeypatch.setattr("rich.prompt.Prompt.ask", lambda *a, **k: next(answers))

        assert main([str(path), "--fix", "--interactive"]) == 0
        assert path.read_text(encoding='utf-8') == "the wrod\n"

    def test_interactive_add(self, installed, write_file, monkeypatch):
        path = write_file("bad.txt", "qwzx\n")
        monkeypatch.setattr("rich.prompt.Prompt.ask", lambda *a, **k: "a")

        assert main([str(path), "--fix", "--interactive"]) == 0
        personal = installed['config'] / "personal.txt"
        assert "qwzx" in personal.read_text(encoding='utf-8')

    def test_interactive_quit(self, installed, write_file, monkeypatch):
        path = write_file("bad.txt", "teh wrod\n")
        monkeypatch.setattr("rich.prompt.Prompt.ask", lambda *a, **k: "q")

        with pytest.raises(SystemExit) as exc_info:
            main([str(path), "--fix", "--interactive"])
        assert exc_info.value.code == 0
        assert path.read_text(encoding='utf-8') == "teh wrod\n"


class TestOptions:
    """Tests for the remaining options and failure exits."""

    def test_no_files(self, installed):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_add_to_dict(self, installed, capsys):
        assert main(["--add-to-dict", "Kubernetes", "--add-to-dict", "helm"]) == 0

        personal = installed['config'] / "personal.txt"
        words = [w for w in personal.read_text(encoding='utf-8').splitlines() if not w.startswith("#")]
        assert words == ["kubernetes", "helm"]

    def test_personal_dictionary_created(self, installed, write_file):
        path = write_file("doc.txt", "hello world\n")
        assert main([str(path)]) == 0
        assert (installed['config'] / "personal.txt").exists()

    def test_add_to_dict_then_check(self, installed, write_file):
        path = write_file("doc.txt", "hello qwzx\n")
        assert main([str(path), "--add-to-dict", "qwzx"]) == 0

    def test_personal_dict_option(self, installed, write_file, tmp_path):
        words = tmp_path / "words.txt"
        words.write_text("wrld\n", encoding='utf-8')
        path = write_file("doc.txt", "hello wrld\n")
        assert main([str(path), "--personal-dict", str(words)]) == 0

    def test_invalid_max_suggestions(self, installed, write_file, capsys):
        path = write_file("doc.txt", "hello\n")
        assert main([str(path), "--max-suggestions", "0"]) == 2
        assert "max_suggestions" in capsys.readouterr().err

    def test_corrupt_dictionary(self, isolated_dirs, write_file):
        isolated_dirs['data'].mkdir(parents=True)
        (isolated_dirs['data'] / "en_US.dict").write_bytes(b"garbage")
        path = write_file("doc.txt", "hello\n")
        assert main([str(path)]) == 2

    def test_malformed_local_config(self, installed, write_file):
        write_file(".spellchk.json", "{broken")
        path = write_file("doc.txt", "hello\n")
        assert main([str(path)]) == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "spellchk" in capsys.readouterr().out


class TestDictCommand:
    """Tests for the dict subcommand."""

    def test_build_list_info(self, isolated_dirs, tmp_path, capsys):
        wordlist = tmp_path / "words.txt"
        wordlist.write_text("Alpha\nbeta\nx\ngamma\n", encoding='utf-8')

        assert main(["dict", "build", "xx_XX", str(wordlist)]) == 0
        assert (isolated_dirs['data'] / "xx_XX.dict").exists()

        assert main(["dict", "list"]) == 0
        assert "xx_XX" in capsys.readouterr().out

        assert main(["dict", "info", "xx_XX"]) == 0
        assert "3" in capsys.readouterr().out

    def test_list_empty(self, isolated_dirs, capsys):
        assert main(["dict", "list"]) == 0
        assert "No dictionaries installed" in capsys.readouterr().out

    def test_info_missing(self, isolated_dirs):
        assert main(["dict", "info", "zz_ZZ"]) == 2

    def test_download_unsupported_language(self, isolated_dirs):
        assert main(["dict", "download", "tlh"]) == 2

    def test_action_required(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["dict"])
        assert exc_info.value.code == 2
