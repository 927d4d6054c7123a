"""Tests for the ``clivo`` console script (cli/app.py).

Coverage:
* Option declarations (``NAME[:LETTER[:LABEL]]``).
* Token hand-off after ``--`` and JSON / table output.
* The ``cli()`` error boundary and its exit codes.
"""

from __future__ import annotations

import json
from unittest.mock import MagicMock, patch

import pytest

from clivo.cli import exit_codes
from clivo.cli.app import cli, main, parse_option_declaration
from clivo.core.models import OptionSpec
from clivo.exceptions import DuplicateOptionNameError, InvalidOptionDeclarationError


def _run_json(argv: list[str], capsys: pytest.CaptureFixture[str]) -> dict[str, list[str]]:
    assert main(argv) == exit_codes.SUCCESS
    return json.loads(capsys.readouterr().out)


# ---------------------------------------------------------------------------
# Option declarations
# ---------------------------------------------------------------------------

class TestParseOptionDeclaration:
    def test_name_only(self) -> None:
        assert parse_option_declaration("order") == OptionSpec(name="order")

    def test_name_and_letter(self) -> None:
        assert parse_option_declaration("order:o") == OptionSpec(name="order", letter="o")

    def test_full(self) -> None:
        assert parse_option_declaration("order:o:Food order") == OptionSpec(
            name="order", letter="o", label="Food order",
        )

    def test_label_without_letter(self) -> None:
        assert parse_option_declaration("order::Food") == OptionSpec(name="order", label="Food")

    def test_label_may_contain_colons(self) -> None:
        assert parse_option_declaration("at:a:12:30").label == "12:30"

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(InvalidOptionDeclarationError):
            parse_option_declaration(":o")


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:
    def test_positional_tokens(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_json(["a", "b"], capsys) == {"_": ["a", "b"]}

    def test_no_tokens(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _run_json([], capsys) == {}

    def test_tokens_after_separator(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = _run_json(
            ["-o", "order:o", "-o", "takeout:t", "--", "-t", "--order=burger", "cola"],
            capsys,
        )
        assert result == {"takeout": ["yes"], "order": ["burger", "cola"]}

    def test_mixed_own_and_separated_tokens(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = _run_json(["-o", "n:n", "pos", "--", "-n", "v"], capsys)
        assert result == {"_": ["pos"], "n": ["v"]}

    def test_strict_equals_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = _run_json(["--strict-equals", "-o", "x", "--", "--x", "v"], capsys)
        assert result == {"x": ["yes"], "_": ["v"]}

    def test_accept_unspecified_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        result = _run_json(["--accept-unspecified", "--", "--free=1"], capsys)
        assert result == {"free": ["1"]}

    def test_duplicate_declaration_raises(self) -> None:
        with pytest.raises(DuplicateOptionNameError):
            main(["-o", "x", "-o", "x"])

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_table_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--table", "-o", "order:o:Food", "--", "-o", "fries"]) == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert "Parsed options" in out
        assert "fries" in out

    def test_verbose_configures_logging(self) -> None:
        with patch("clivo.cli.app.logging.basicConfig") as basic_config:
            main(["-v", "x"])
        basic_config.assert_called_once()

    def test_quiet_by_default(self) -> None:
        with patch("clivo.cli.app.logging.basicConfig") as basic_config:
            main(["x"])
        basic_config.assert_not_called()


# ---------------------------------------------------------------------------
# cli() error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _exit_code(self, side_effect: object) -> int:
        with patch("clivo.cli.app.main", side_effect=side_effect):
            with patch("clivo.cli.app.console") as mock_console:
                with pytest.raises(SystemExit) as exc_info:
                    cli()
        self.console: MagicMock = mock_console
        return int(exc_info.value.code)

    def test_success(self) -> None:
        assert self._exit_code([exit_codes.SUCCESS]) == exit_codes.SUCCESS

    def test_clivo_error(self) -> None:
        code = self._exit_code(DuplicateOptionNameError("x"))
        assert code == exit_codes.GENERAL_ERROR
        printed = " ".join(
            " ".join(str(arg) for arg in call.args)
            for call in self.console.print_labelled.call_args_list
        )
        assert "Duplicate option name: x" in printed
        assert "Hint:" in printed

    def test_keyboard_interrupt(self) -> None:
        assert self._exit_code(KeyboardInterrupt()) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(self) -> None:
        assert self._exit_code(RuntimeError("boom")) == exit_codes.UNEXPECTED_ERROR

    def test_bracketed_option_name_is_printed_verbatim(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.argv", ["clivo", "-o", "a[/x]", "-o", "a[/x]"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Duplicate option name: a[/x]" in err
        assert "Hint:" in err

    def test_bracketed_unexpected_error_is_printed_verbatim(
        self,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch("clivo.cli.app.main", side_effect=RuntimeError("bad [/y] value")):
            with pytest.raises(SystemExit) as exc_info:
                cli()
        assert exc_info.value.code == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: bad [/y] value" in capsys.readouterr().err
