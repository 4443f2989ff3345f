"""Unit tests for the CLI module (line_rewriter.cli.main)."""

from __future__ import annotations

import json
import pytest
from unittest.mock import patch

from line_rewriter.cli.main import (
    build_parser,
    build_options,
    expand_paths,
    resolve_handler_names,
    main,
    DEFAULT_EXCLUDE_PATTERNS,
    ENV_ENCODING,
    ENV_HANDLERS,
    EXIT_SUCCESS,
    EXIT_INVALID_INPUT,
    EXIT_PROCESSING_ERROR,
    EXIT_IO_ERROR,
    EXIT_UNEXPECTED,
    EXIT_KEYBOARD_INTERRUPT,
)
from line_rewriter.exceptions import InvalidVerdictError
from line_rewriter.handlers import registry


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@pytest.fixture()
def sample_file(tmp_path):
    """A file with trailing spaces and an umlaut."""
    path = tmp_path / "sample.txt"
    path.write_text("Äpfel  \nBirnen", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(ENV_HANDLERS, raising=False)
    monkeypatch.delenv(ENV_ENCODING, raising=False)


# ---------------------------------------------------------------------------
# TestBuildParser
# ---------------------------------------------------------------------------
class TestBuildParser:
    def test_parser_positional_args(self):
        args = build_parser().parse_args(["a.txt", "src"])
        assert args.paths == ["a.txt", "src"]

    def test_parser_repeated_handlers_keep_order(self):
        args = build_parser().parse_args(
            ["a.txt", "--handler", "remove-comments", "--handler", "replace-umlauts"]
        )
        assert args.handlers == ["remove-comments", "replace-umlauts"]

    def test_parser_all_preview_flags(self):
        args = build_parser().parse_args([
            "a.txt",
            "--preview",
            "--unified",
            "--show-spaces",
            "--hide-original-lines",
            "--show-unchanged-lines",
            "--keep-original-indentation",
            "--hide-deleted-lines",
            "--hide-unchanged-log",
        ])
        options = build_options(args)
        assert options.preview is True
        assert options.unified_diff is True
        assert options.hide_log_of_unchanged_file is True
        assert options.preview_options.show_spaces is True
        assert options.preview_options.hide_original_lines is True
        assert options.preview_options.show_unchanged_lines is True
        assert options.preview_options.keep_original_indentation is True
        assert options.preview_options.hide_deleted_lines is True

    def test_parser_defaults(self):
        args = build_parser().parse_args(["a.txt"])
        assert args.handlers == []
        assert args.preview is False
        assert args.unified is False
        assert args.encoding == "utf-8"
        assert args.output_json is False
        assert args.dry_run is False
        assert args.verbose is False

    def test_encoding_from_env(self, monkeypatch):
        monkeypatch.setenv(ENV_ENCODING, "latin-1")
        args = build_parser().parse_args(["a.txt"])
        assert args.encoding == "latin-1"


# ---------------------------------------------------------------------------
# TestInputs
# ---------------------------------------------------------------------------
class TestInputs:
    def test_handler_names_from_env(self, monkeypatch):
        monkeypatch.setenv(ENV_HANDLERS, "remove-comments, replace-umlauts,")
        args = build_parser().parse_args(["a.txt"])
        assert resolve_handler_names(args) == ["remove-comments", "replace-umlauts"]

    def test_flag_wins_over_env(self, monkeypatch):
        monkeypatch.setenv(ENV_HANDLERS, "remove-comments")
        args = build_parser().parse_args(["a.txt", "--handler", "replace-umlauts"])
        assert resolve_handler_names(args) == ["replace-umlauts"]

    def test_expand_directory(self, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "b.txt").write_text("b")
        (tmp_path / "a.txt").write_text("a")
        for excluded in DEFAULT_EXCLUDE_PATTERNS:
            (tmp_path / excluded).mkdir()
            (tmp_path / excluded / "skip.txt").write_text("x")
        files = expand_paths([str(tmp_path)])
        assert [f.replace(str(tmp_path), "") for f in files] == [
            "/a.txt",
            "/sub/b.txt",
        ]

    def test_expand_nonexistent(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            expand_paths(["/nonexistent/path/xyz_abc_123"])
        assert exc_info.value.code == EXIT_INVALID_INPUT
        assert "not a valid file or directory" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# TestDryRun
# ---------------------------------------------------------------------------
class TestDryRun:
    def test_dry_run_exits_zero(self, sample_file, capsys):
        rc = main([str(sample_file), "--handler", "replace-umlauts", "--dry-run"])
        assert rc == EXIT_SUCCESS
        assert "Configuration:" in capsys.readouterr().out
        assert sample_file.read_text(encoding="utf-8") == "Äpfel  \nBirnen"

    def test_dry_run_json_output(self, sample_file, capsys):
        rc = main([
            str(sample_file), "--handler", "replace-umlauts",
            "--preview", "--show-spaces", "--dry-run", "--output-json",
        ])
        assert rc == EXIT_SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["files"] == [str(sample_file)]
        assert data["handlers"] == ["replace-umlauts"]
        assert data["preview"] is True
        assert data["preview_options"]["show_spaces"] is True


# ---------------------------------------------------------------------------
# TestListHandlers
# ---------------------------------------------------------------------------
class TestListHandlers:
    def test_lists_registered_names(self, capsys):
        assert main(["--list-handlers"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.split() == registry.names()


# ---------------------------------------------------------------------------
# TestErrorHandling
# ---------------------------------------------------------------------------
class TestErrorHandling:
    def test_main_no_paths(self, capsys):
        assert main(["--handler", "replace-umlauts"]) == EXIT_INVALID_INPUT
        assert "no file or directory" in capsys.readouterr().err

    def test_main_no_handler(self, sample_file, capsys):
        assert main([str(sample_file)]) == EXIT_INVALID_INPUT
        assert "no handler given" in capsys.readouterr().err

    def test_main_unknown_handler(self, sample_file, capsys):
        rc = main([str(sample_file), "--handler", "does-not-exist"])
        assert rc == EXIT_INVALID_INPUT
        assert "Invalid handler" in capsys.readouterr().err

    def test_main_nonexistent_path(self):
        rc = main(["/nonexistent/path/xyz", "--handler", "replace-umlauts"])
        assert rc == EXIT_INVALID_INPUT

    @patch("line_rewriter.engine.process_file", side_effect=InvalidVerdictError("boom"))
    def test_main_processing_error(self, _mock, sample_file, capsys):
        rc = main([str(sample_file), "--handler", "replace-umlauts"])
        assert rc == EXIT_PROCESSING_ERROR
        assert "Processing error: boom" in capsys.readouterr().err

    @patch("line_rewriter.engine.process_file", side_effect=PermissionError("denied"))
    def test_main_io_error(self, _mock, sample_file):
        rc = main([str(sample_file), "--handler", "replace-umlauts"])
        assert rc == EXIT_IO_ERROR

    @patch("line_rewriter.engine.process_file", side_effect=KeyboardInterrupt)
    def test_main_keyboard_interrupt(self, _mock, sample_file):
        rc = main([str(sample_file), "--handler", "replace-umlauts"])
        assert rc == EXIT_KEYBOARD_INTERRUPT

    @patch("line_rewriter.engine.process_file", side_effect=RuntimeError("oops"))
    def test_main_unexpected_error(self, _mock, sample_file, capsys):
        rc = main([str(sample_file), "--handler", "replace-umlauts", "--verbose"])
        assert rc == EXIT_UNEXPECTED
        err = capsys.readouterr().err
        assert "Unexpected error: oops" in err
        assert "Traceback" in err


# ---------------------------------------------------------------------------
# TestMainHappyPath
# ---------------------------------------------------------------------------
class TestMainHappyPath:
    def test_rewrites_file(self, sample_file, capsys):
        rc = main([
            str(sample_file),
            "--handler", "replace-umlauts",
            "--handler", "remove-trailing-spaces",
        ])
        assert rc == EXIT_SUCCESS
        assert sample_file.read_text(encoding="utf-8") == "Aepfel\nBirnen"
        assert f"[INFO] Replacing file: '{sample_file}'" in capsys.readouterr().out

    def test_handlers_from_env(self, sample_file, monkeypatch):
        monkeypatch.setenv(ENV_HANDLERS, "replace-umlauts")
        assert main([str(sample_file)]) == EXIT_SUCCESS
        assert sample_file.read_text(encoding="utf-8") == "Aepfel  \nBirnen"

    def test_directory(self, tmp_path):
        (tmp_path / "nested").mkdir()
        first = tmp_path / "one.txt"
        second = tmp_path / "nested" / "two.txt"
        first.write_text("über", encoding="utf-8")
        second.write_text("Öl", encoding="utf-8")
        assert main([str(tmp_path), "--handler", "replace-umlauts"]) == EXIT_SUCCESS
        assert first.read_text(encoding="utf-8") == "ueber"
        assert second.read_text(encoding="utf-8") == "Oel"

    def test_preview_does_not_write(self, sample_file, capsys):
        rc = main([str(sample_file), "--handler", "replace-umlauts", "--preview"])
        assert rc == EXIT_SUCCESS
        assert sample_file.read_text(encoding="utf-8") == "Äpfel  \nBirnen"
        out = capsys.readouterr().out
        assert f"[INFO] Preview: '{sample_file}'" in out
        assert "1   ┌  Äpfel  " in out
        assert "  M └▷ Aepfel  " in out

    def test_unified_preview(self, sample_file, capsys):
        rc = main([
            str(sample_file), "--handler", "replace-umlauts", "--preview", "--unified",
        ])
        assert rc == EXIT_SUCCESS
        assert sample_file.read_text(encoding="utf-8") == "Äpfel  \nBirnen"
        out = capsys.readouterr().out
        assert "-Äpfel  " in out
        assert "+Aepfel  " in out

    def test_unified_preview_unchanged(self, tmp_path, capsys):
        path = tmp_path / "plain.txt"
        path.write_text("plain", encoding="utf-8")
        main([str(path), "--handler", "replace-umlauts", "--preview", "--unified"])
        assert capsys.readouterr().out == f"[INFO] Nothing changed in file: '{path}'\n"

    def test_hide_unchanged_log(self, tmp_path, capsys):
        path = tmp_path / "plain.txt"
        path.write_text("plain", encoding="utf-8")
        rc = main([str(path), "--handler", "replace-umlauts", "--hide-unchanged-log"])
        assert rc == EXIT_SUCCESS
        assert capsys.readouterr().out == ""
