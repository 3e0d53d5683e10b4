"""End-to-end tests for CLI commands."""

import json

import pytest
from typer.testing import CliRunner

from style_rank import __version__
from style_rank.cli.main import app

CLEAN_SOURCE = "export function double(value) {\n  return value + value;\n}\n"


def load_json(output: str) -> dict:
    """Parse the JSON document, ignoring any log lines before it."""
    return json.loads(output[output.index("{") :])


class TestCLICommands:
    """End-to-end tests for CLI commands."""

    @pytest.fixture
    def cli_runner(self):
        """Create CLI runner for testing."""
        return CliRunner()

    @pytest.fixture(autouse=True)
    def project_dir(self, tmp_path, monkeypatch):
        """Run every command from an empty project directory."""
        monkeypatch.chdir(tmp_path)
        return tmp_path

    def test_version(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    def test_analyze_help(self, cli_runner):
        result = cli_runner.invoke(app, ["analyze", "--help"])

        assert result.exit_code == 0
        assert "--fail-on" in result.stdout

    def test_json_clean_file(self, cli_runner, project_dir, ts_language_pack):
        source = project_dir / "clean.js"
        source.write_text(CLEAN_SOURCE)

        result = cli_runner.invoke(app, ["analyze", str(source), "--json"])

        assert result.exit_code == 0
        data = load_json(result.stdout)
        assert data["rank"] == "S"
        assert data["violations"] == []
        assert data["file_path"] == str(source)

    def test_fail_on_reached(self, cli_runner, project_dir, ts_language_pack):
        source = project_dir / "answer.js"
        source.write_text("const answer = 42;\n")

        result = cli_runner.invoke(app, ["analyze", str(source), "--fail-on", "A"])

        assert result.exit_code == 2

    def test_fail_on_not_reached(self, cli_runner, project_dir, ts_language_pack):
        source = project_dir / "answer.js"
        source.write_text("const answer = 42;\n")

        result = cli_runner.invoke(app, ["analyze", str(source), "--fail-on", "b"])

        assert result.exit_code == 0

    def test_unsupported_file(self, cli_runner, project_dir):
        source = project_dir / "script.py"
        source.write_text("print('hi')\n")

        result = cli_runner.invoke(app, ["analyze", str(source)])

        assert result.exit_code == 1
        assert "Unsupported file type" in result.stdout

    def test_unsupported_file_json(self, cli_runner, project_dir):
        source = project_dir / "script.py"
        source.write_text("print('hi')\n")

        result = cli_runner.invoke(app, ["analyze", str(source), "--json"])

        assert result.exit_code == 1
        assert "error" in load_json(result.stdout)

    def test_directory_skips_broken_files(self, cli_runner, project_dir, ts_language_pack):
        src = project_dir / "src"
        (src / "node_modules" / "lib").mkdir(parents=True)
        (src / "clean.js").write_text(CLEAN_SOURCE)
        (src / "broken.js").write_text("function (\n")
        (src / "node_modules" / "lib" / "index.js").write_text("var x = 99;\n")
        (src / "notes.md").write_text("# notes\n")

        result = cli_runner.invoke(app, ["analyze", str(src), "--json"])

        assert result.exit_code == 0
        data = load_json(result.stdout)
        assert data["file_count"] == 1
        assert data["files"][0]["file_path"].endswith("clean.js")

    def test_empty_directory(self, cli_runner, project_dir):
        empty = project_dir / "empty"
        empty.mkdir()

        result = cli_runner.invoke(app, ["analyze", str(empty)])

        assert result.exit_code == 1
        assert "No supported source files" in result.stdout

    def test_status_format(self, cli_runner, project_dir, ts_language_pack):
        source = project_dir / "clean.js"
        source.write_text(CLEAN_SOURCE)

        result = cli_runner.invoke(app, ["analyze", str(source), "--format", "status"])

        assert result.exit_code == 0
        assert "Rank: S" in result.stdout

    def test_list_format(self, cli_runner, project_dir, ts_language_pack):
        source = project_dir / "answer.js"
        source.write_text("const answer = 42;\n")

        result = cli_runner.invoke(app, ["analyze", str(source), "--format", "list"])

        assert result.exit_code == 0
        assert "Overall rank" in result.stdout
        assert "Replace magic number '42'" in result.stdout

    def test_korean_text_format(self, cli_runner, project_dir, ts_language_pack):
        source = project_dir / "clean.js"
        source.write_text(CLEAN_SOURCE)

        result = cli_runner.invoke(
            app, ["analyze", str(source), "--locale", "ko", "--format", "text"]
        )

        assert result.exit_code == 0
        assert "등급: S" in result.stdout

    def test_report_format(self, cli_runner, project_dir, ts_language_pack):
        source = project_dir / "clean.js"
        source.write_text(CLEAN_SOURCE)

        result = cli_runner.invoke(app, ["analyze", str(source)])

        assert result.exit_code == 0
        assert "Rank: S" in result.stdout
        assert "Suggestions" in result.stdout

    def test_invalid_config(self, cli_runner, project_dir):
        source = project_dir / "clean.js"
        source.write_text(CLEAN_SOURCE)
        config = project_dir / "thresholds.yaml"
        config.write_text("rules:\n  max_params: 3\n")

        result = cli_runner.invoke(
            app, ["analyze", str(source), "--config", str(config)]
        )

        assert result.exit_code == 1
        assert "Invalid keys" in result.stdout

    def test_default_config_file_used(self, cli_runner, project_dir, ts_language_pack):
        source = project_dir / "answer.js"
        source.write_text("const answer = 42;\n")
        (project_dir / ".style-rank.yaml").write_text("rules:\n  allowed_numbers: [42]\n")

        result = cli_runner.invoke(app, ["analyze", str(source), "--json"])

        assert result.exit_code == 0
        assert load_json(result.stdout)["violation_count"] == 0

    def test_unknown_locale(self, cli_runner, project_dir):
        source = project_dir / "clean.js"
        source.write_text(CLEAN_SOURCE)

        result = cli_runner.invoke(app, ["analyze", str(source), "--locale", "fr"])

        assert result.exit_code == 1
        assert "Unsupported locale" in result.stdout
