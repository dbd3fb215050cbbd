"""Tests for cifra.cli — argument parsing and command behaviour."""

from __future__ import annotations

import io
import json
import logging

import pytest

from cifra.__version__ import __version__
from cifra.cli import format_table, main, parse_args
from cifra.core.translator import Direction


class TestParseArgs:

    def test_defaults_no_args(self):
        args = parse_args([])
        assert args.text == []
        assert args.direction is None
        assert args.table is False
        assert args.gui is False
        assert args.debug is False

    def test_decipher_flag(self):
        assert parse_args(["-d", "x"]).direction is Direction.SYMBOL_TO_LETTER

    def test_cipher_flag(self):
        assert parse_args(["--cipher", "x"]).direction is Direction.LETTER_TO_SYMBOL

    def test_direction_option(self):
        assert parse_args(["--direction", "letter_to_symbol"]).direction is Direction.LETTER_TO_SYMBOL

    def test_bad_direction_option_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--direction", "sideways"])
        assert exc_info.value.code == 2
        assert "sideways" in capsys.readouterr().err

    def test_cipher_and_decipher_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["-c", "-d"])

    def test_text_starting_with_dash(self):
        args = parse_args(["-d", "-!"])
        assert args.direction is Direction.SYMBOL_TO_LETTER
        assert args.text == ["-!"]

    def test_dash_text_keeps_word_order(self):
        args = parse_args(["-'", "-d", "!", "--config", "cfg.json", "-;"])
        assert args.text == ["-'", "!", "-;"]
        assert args.config == "cfg.json"
        assert args.direction is Direction.SYMBOL_TO_LETTER

    def test_double_dash_ends_options(self):
        args = parse_args(["--", "-c", "--table"])
        assert args.text == ["-c", "--table"]
        assert args.direction is None
        assert args.table is False

    def test_option_value_with_equals(self):
        args = parse_args(["--direction=cipher", "-"])
        assert args.direction is Direction.LETTER_TO_SYMBOL
        assert args.text == ["-"]

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMain:

    def test_translates_arguments(self, capsys):
        assert main(["]÷#=["]) == 0
        assert capsys.readouterr().out == "pedro\n"

    def test_words_joined_with_spaces(self, capsys):
        assert main(["-c", "ola", "MUNDO"]) == 0
        assert capsys.readouterr().out == "[(! ?<,#[\n"

    def test_deciphers_word_starting_with_z(self, capsys):
        assert main(["-d", "-!"]) == 0
        assert capsys.readouterr().out == "za\n"

    def test_deciphers_after_double_dash(self, capsys):
        assert main(["-d", "--", "-!", "'!"]) == 0
        assert capsys.readouterr().out == "za xa\n"

    def test_reads_stdin_when_no_text(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("]÷#=[\n!@#\n"))
        assert main(["-d"]) == 0
        assert capsys.readouterr().out == "pedro\nasd\n"

    def test_stdin_keeps_missing_final_newline(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("pedro"))
        assert main(["--cipher"]) == 0
        assert capsys.readouterr().out == "]÷#=["

    def test_default_direction_from_config(self, tmp_path, capsys):
        cfg = tmp_path / "config.json"
        cfg.write_text(json.dumps({"default_direction": "cipher"}), encoding="utf-8")
        assert main(["--config", str(cfg), "pedro"]) == 0
        assert capsys.readouterr().out == "]÷#=[\n"

    def test_flag_overrides_config(self, tmp_path, capsys):
        cfg = tmp_path / "config.json"
        cfg.write_text(json.dumps({"default_direction": "cipher"}), encoding="utf-8")
        assert main(["--config", str(cfg), "-d", "]÷#=["]) == 0
        assert capsys.readouterr().out == "pedro\n"

    def test_table_only(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("should not be read"))
        assert main(["--table"]) == 0
        out = capsys.readouterr().out
        assert out == format_table() + "\n"

    def test_table_and_text(self, capsys):
        assert main(["--table", "+"]) == 0
        assert capsys.readouterr().out.endswith("\nq\n")

    def test_writes_log_file(self, tmp_path, capsys):
        log_file = tmp_path / "logs" / "cifra.log"
        assert main(["--debug", "--logfile", str(log_file), "+"]) == 0
        for handler in logging.getLogger("cifra").handlers:
            handler.flush()
        assert "Direction: symbol_to_letter" in log_file.read_text(encoding="utf-8")

    def test_gui_import_error_returns_1(self, monkeypatch, capsys):
        import cifra.app

        def boom(self):
            raise ImportError("No module named 'PyQt5'")

        monkeypatch.setattr(cifra.app.CifraApp, "run", boom)
        assert main(["--gui"]) == 1

    def test_gui_receives_direction_and_text(self, monkeypatch):
        import cifra.app

        seen = {}

        def fake_run(self):
            seen["direction"] = self.session.direction
            seen["output"] = self.session.output_text
            return 0

        monkeypatch.setattr(cifra.app.CifraApp, "run", fake_run)
        assert main(["--gui", "-c", "pedro"]) == 0
        assert seen == {"direction": Direction.LETTER_TO_SYMBOL, "output": "]÷#=["}

    def test_keyboard_interrupt_returns_130(self, monkeypatch):
        class _Interrupting:
            def __iter__(self):
                raise KeyboardInterrupt

        monkeypatch.setattr("sys.stdin", _Interrupting())
        assert main([]) == 130


def test_format_table_lists_every_row():
    text = format_table()
    blocks = text.split("\n\n")
    assert len(blocks) == 3
    assert blocks[0].startswith("QWERTY row\n")
    assert "+ → q" in blocks[0]
    assert ") → ç" in blocks[1]
    assert ". → ." in blocks[2]
