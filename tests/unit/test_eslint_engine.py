"""Tests for the ESLint subprocess engine."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from es5guard.configs import bundled_config_path
from es5guard.detector.base import LintConfig, LintEngine
from es5guard.detector.models import FileLintResult
from es5guard.errors import CheckerIOError, ConfigError
from es5guard.lint.eslint import EslintEngine


def _completed(returncode: int, stdout: str = "", stderr: str = "") -> MagicMock:
    proc = MagicMock()
    proc.returncode = returncode
    proc.stdout = stdout
    proc.stderr = stderr
    return proc


ESLINT_JSON = json.dumps(
    [
        {
            "filePath": "/dist/main.js",
            "messages": [
                {
                    "ruleId": "es5/no-arrow-functions",
                    "severity": 2,
                    "message": "Unexpected arrow function.",
                    "line": 3,
                    "column": 9,
                },
                {
                    "ruleId": None,
                    "fatal": True,
                    "severity": 2,
                    "message": "Parsing error: Unexpected token",
                    "line": 7,
                    "column": 2,
                },
            ],
            "errorCount": 2,
            "warningCount": 0,
        },
        {"filePath": "/dist/vendor.js", "messages": [], "errorCount": 0, "warningCount": 0},
    ]
)


def test_satisfies_protocol():
    assert isinstance(EslintEngine(), LintEngine)


class TestLoadConfig:
    def test_bundled_config_has_no_parser_entry(self):
        text = bundled_config_path().read_text()
        assert "@babel/eslint-parser" not in text
        config = EslintEngine().load_config(bundled_config_path())
        assert config.parser == "@babel/eslint-parser"

    def test_existing_file(self, tmp_path: Path):
        cfg = tmp_path / ".eslintrc.dist.js"
        cfg.write_text("module.exports = {};\n")
        config = EslintEngine().load_config(cfg)
        assert config.path == cfg.resolve()

    def test_relative_to_cwd(self, tmp_path: Path):
        (tmp_path / "rules.js").write_text("module.exports = {};\n")
        config = EslintEngine(cwd=tmp_path).load_config(Path("rules.js"))
        assert config.path == (tmp_path / "rules.js").resolve()

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(CheckerIOError, match="not found"):
            EslintEngine().load_config(tmp_path / "nope.js")

    def test_directory_raises(self, tmp_path: Path):
        with pytest.raises(CheckerIOError):
            EslintEngine().load_config(tmp_path)


class TestLintFiles:
    @patch("es5guard.lint.eslint.subprocess.run")
    def test_builds_command(self, mock_run: MagicMock, tmp_path: Path):
        mock_run.return_value = _completed(0, "[]")
        engine = EslintEngine(command=["eslint"], cwd=tmp_path)

        engine.lint_files(LintConfig(path=Path("/cfg/rules.js")), [Path("/dist/a.js")])

        args = mock_run.call_args.args[0]
        assert args == [
            "eslint",
            "--no-eslintrc",
            "--config",
            "/cfg/rules.js",
            "--resolve-plugins-relative-to",
            str(tmp_path),
            "--format",
            "json",
            "/dist/a.js",
        ]
        assert "--fix" not in args
        assert mock_run.call_args.kwargs["env"]["ESLINT_USE_FLAT_CONFIG"] == "false"

    @patch("es5guard.lint.eslint.subprocess.run")
    def test_bundled_config_passes_parser_on_command_line(self, mock_run: MagicMock):
        mock_run.return_value = _completed(0, "[]")
        engine = EslintEngine(command=["eslint"])

        config = engine.load_config(bundled_config_path())
        engine.lint_files(config, [Path("/dist/a.js")])

        args = mock_run.call_args.args[0]
        parser_at = args.index("--parser")
        assert args[parser_at + 1] == "@babel/eslint-parser"
        assert args[-1] == "/dist/a.js"

    @patch("es5guard.lint.eslint.subprocess.run")
    def test_custom_config_keeps_its_own_parser(self, mock_run: MagicMock, tmp_path: Path):
        mock_run.return_value = _completed(0, "[]")
        cfg = tmp_path / "rules.js"
        cfg.write_text("module.exports = {};\n")
        engine = EslintEngine(command=["eslint"])

        engine.lint_files(engine.load_config(cfg), [Path("/dist/a.js")])

        assert "--parser" not in mock_run.call_args.args[0]

    @patch("es5guard.lint.eslint.subprocess.run")
    def test_parses_report(self, mock_run: MagicMock):
        mock_run.return_value = _completed(1, ESLINT_JSON)

        reports = EslintEngine().lint_files(
            LintConfig(path=Path("/cfg/rules.js")),
            [Path("/dist/main.js"), Path("/dist/vendor.js")],
        )

        assert [r.file_path for r in reports] == [Path("/dist/main.js"), Path("/dist/vendor.js")]
        main = reports[0]
        assert main.error_count == 2
        assert [m.rule_id for m in main.messages] == ["es5/no-arrow-functions", None]
        assert (main.messages[0].line, main.messages[0].column) == (3, 9)
        assert main.messages[0].message == "Unexpected arrow function."
        assert reports[1].messages == []

    @patch("es5guard.lint.eslint.subprocess.run")
    def test_parse_error_is_logged(self, mock_run: MagicMock, caplog):
        mock_run.return_value = _completed(1, ESLINT_JSON)
        with caplog.at_level("WARNING", logger="es5guard.lint.eslint"):
            EslintEngine().lint_files(LintConfig(path=Path("/c.js")), [Path("/dist/main.js")])
        assert "Parsing error" in caplog.text

    @patch("es5guard.lint.eslint.subprocess.run")
    def test_exit_status_two_is_config_error(self, mock_run: MagicMock):
        mock_run.return_value = _completed(
            2, "", "ESLint couldn't find the plugin \"eslint-plugin-es5\"."
        )
        with pytest.raises(ConfigError, match="eslint-plugin-es5"):
            EslintEngine().lint_files(LintConfig(path=Path("/c.js")), [Path("/dist/a.js")])

    @patch("es5guard.lint.eslint.subprocess.run")
    def test_exit_status_two_without_stderr(self, mock_run: MagicMock):
        mock_run.return_value = _completed(2)
        with pytest.raises(ConfigError, match="status 2"):
            EslintEngine().lint_files(LintConfig(path=Path("/c.js")), [Path("/dist/a.js")])

    @patch("es5guard.lint.eslint.subprocess.run")
    def test_garbage_output_is_config_error(self, mock_run: MagicMock):
        mock_run.return_value = _completed(0, "Oops, not json")
        with pytest.raises(ConfigError, match="Unreadable"):
            EslintEngine().lint_files(LintConfig(path=Path("/c.js")), [Path("/dist/a.js")])

    @patch("es5guard.lint.eslint.subprocess.run")
    def test_missing_executable(self, mock_run: MagicMock):
        mock_run.side_effect = FileNotFoundError("npx")
        with pytest.raises(ConfigError, match="not found"):
            EslintEngine().lint_files(LintConfig(path=Path("/c.js")), [Path("/dist/a.js")])

    @patch("es5guard.lint.eslint.subprocess.run")
    def test_command_not_executable(self, mock_run: MagicMock):
        mock_run.side_effect = PermissionError(13, "Permission denied")
        with pytest.raises(CheckerIOError, match="Permission denied"):
            EslintEngine().lint_files(LintConfig(path=Path("/c.js")), [Path("/dist/a.js")])


def test_format_uses_stylish():
    text = EslintEngine().format([FileLintResult(file_path=Path("/dist/a.js"))])
    assert text == ""
