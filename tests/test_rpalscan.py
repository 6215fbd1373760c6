# =============================================================================
# test_rpalscan.py - rpalscan CLI Tests
# =============================================================================
# Tests for the rpalscan command-line tool: output formats, screening,
# options and exit codes.
# =============================================================================

import json

import pytest
from click.testing import CliRunner
from rpal_scanner.cli.rpalscan import main


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "prog.rpal"
    path.write_text("// add one\nlet f x = x + 1 in Print (f 2)\n")
    return path


class TestRpalscanCLI:
    """Tests for the rpalscan CLI tool."""

    def test_cli_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Scan an RPAL source file" in result.output

    def test_cli_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "rpalscan" in result.output

    def test_screened_output(self, program):
        runner = CliRunner()
        result = runner.invoke(main, [str(program)])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split() == ["2:1", "RESERVED", "'let'"]
        assert "COMMENT" not in result.output
        assert "WHITESPACE" not in result.output

    def test_all_tokens(self, program):
        runner = CliRunner()
        result = runner.invoke(main, ["--all", str(program)])

        assert result.exit_code == 0
        assert "COMMENT" in result.output
        assert "WHITESPACE" in result.output

    def test_json_output(self, program):
        runner = CliRunner()
        result = runner.invoke(main, ["--json", str(program)])

        assert result.exit_code == 0
        tokens = json.loads(result.output)
        assert tokens[0] == {"kind": "RESERVED", "value": "let", "line": 2, "column": 1}
        assert tokens[-1]["kind"] == "R_PAREN"

    def test_keep_comment_newline(self, program):
        runner = CliRunner()
        result = runner.invoke(main, ["--json", "--all", "--keep-comment-newline", str(program)])

        assert result.exit_code == 0
        tokens = json.loads(result.output)
        assert tokens[0]["kind"] == "COMMENT"
        assert tokens[1] == {"kind": "WHITESPACE", "value": "\n", "line": 1, "column": 11}

    def test_keep_comment_newline_from_env(self, program, monkeypatch):
        monkeypatch.setenv("RPAL_SCANNER_KEEP_COMMENT_NEWLINE", "1")
        runner = CliRunner()
        result = runner.invoke(main, ["--json", "--all", str(program)])

        assert result.exit_code == 0
        assert json.loads(result.output)[1]["kind"] == "WHITESPACE"

    def test_unterminated_string_exit_code(self, tmp_path):
        path = tmp_path / "bad.rpal"
        path.write_text("let s = 'oops\n")
        runner = CliRunner()
        result = runner.invoke(main, [str(path)])

        assert result.exit_code == 1
        assert "unterminated string literal" in result.output

    def test_missing_file_exit_code(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path / "missing.rpal")])

        assert result.exit_code == 2
