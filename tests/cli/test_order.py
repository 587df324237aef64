"""Tests for newsorder order command."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from newsorder.cli.main import cli

runner = CliRunner()


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    monkeypatch.chdir(tmp_path)
    with patch("newsorder.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"):
        yield tmp_path


class TestOrderCommand:
    """Tests for order command."""

    def test_shows_each_scope(self, project: Path) -> None:
        (project / "count.ts").write_text(
            "class CountDown {\n"
            "    countDown(n: number) { return this.countDown(n - 1); }\n"
            "    start() { this.countDown(10); }\n"
            "}\n"
            "function main() { return 1; }\n"
        )

        result = runner.invoke(cli, ["order", "count.ts"])

        assert result.exit_code == 0, result.output
        assert "CountDown" in result.output
        assert "out of order" in result.output
        assert "(recursive)" in result.output
        assert "count.ts" in result.output

    def test_empty_file(self, project: Path) -> None:
        (project / "empty.py").write_text("x = 1\n")

        result = runner.invoke(cli, ["order", "empty.py"])

        assert result.exit_code == 0
        assert "No classes or functions found" in result.output

    def test_config_option(self, project: Path) -> None:
        (project / "mod.py").write_text("def main():\n    return 1\n")
        log_file = project / "logs" / "newsorder.log"
        (project / "custom.yaml").write_text(
            "logging:\n"
            "  level: DEBUG\n"
            "  outputs:\n"
            f"    - destination: {log_file}\n"
            "      format: json\n"
        )

        result = runner.invoke(cli, ["order", "mod.py", "--config", "custom.yaml"])

        assert result.exit_code == 0, result.output
        assert "scope_explained" in log_file.read_text()

    def test_missing_config_file(self, project: Path) -> None:
        (project / "mod.py").write_text("def main():\n    return 1\n")

        result = runner.invoke(cli, ["order", "mod.py", "--config", "nope.yaml"])

        assert result.exit_code == 1
        assert "CONFIG_FILE_NOT_FOUND" in result.output

    def test_unsupported_file(self, project: Path) -> None:
        (project / "notes.txt").write_text("hello\n")

        result = runner.invoke(cli, ["order", "notes.txt"])

        assert result.exit_code == 1
        assert "EXTRACTION_UNSUPPORTED_LANGUAGE" in result.output
