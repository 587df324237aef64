"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence and error handling
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from newsorder.config.loader import _deep_merge, _load_yaml, load_config
from newsorder.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def no_global_config(tmp_path: Path):
    """Point the global config at a path that does not exist."""
    with patch("newsorder.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"):
        yield


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("check:\n  severity: warning\n")

        assert _load_yaml(yaml_file) == {"check": {"severity": "warning"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("check:\n  extensions:\n    - [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)

        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- one\n- two\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        assert _deep_merge({"a": 1}, {"a": 2}) == {"a": 2}

    def test_nested_dicts_merge(self) -> None:
        base = {"check": {"severity": "error", "check_classes": True}}
        override = {"check": {"severity": "hint"}}

        assert _deep_merge(base, override) == {
            "check": {"severity": "hint", "check_classes": True}
        }

    def test_does_not_mutate_base(self) -> None:
        base = {"check": {"severity": "error"}}
        _deep_merge(base, {"check": {"severity": "hint"}})
        assert base == {"check": {"severity": "error"}}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)

        assert config.logging.level == "WARNING"
        assert config.check.check_classes is True
        assert config.check.check_functions is True
        assert config.check.severity == "error"

    def test_project_file(self, tmp_path: Path) -> None:
        (tmp_path / ".newsorder.yaml").write_text(
            "check:\n  check_functions: false\n  exclude_dirs: [generated]\n"
        )

        config = load_config(tmp_path)

        assert config.check.check_functions is False
        assert config.check.exclude_dirs == ["generated"]

    def test_global_file_under_project(self, tmp_path: Path) -> None:
        global_path = tmp_path / "global.yaml"
        global_path.write_text("check:\n  severity: hint\n  max_file_size_kb: 10\n")
        (tmp_path / ".newsorder.yaml").write_text("check:\n  severity: warning\n")

        with patch("newsorder.config.loader.GLOBAL_CONFIG_PATH", global_path):
            config = load_config(tmp_path)

        assert config.check.severity == "warning"
        assert config.check.max_file_size_kb == 10

    def test_env_over_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".newsorder.yaml").write_text("check:\n  severity: warning\n")
        monkeypatch.setenv("NEWSORDER__CHECK__SEVERITY", "info")

        config = load_config(tmp_path)

        assert config.check.severity == "info"

    def test_kwargs_over_everything(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / ".newsorder.yaml").write_text("check:\n  check_classes: true\n  severity: hint\n")
        monkeypatch.setenv("NEWSORDER__CHECK__CHECK_CLASSES", "true")

        config = load_config(tmp_path, check={"check_classes": False})

        assert config.check.check_classes is False
        assert config.check.severity == "hint"

    def test_explicit_file(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.yaml"
        custom.write_text("logging:\n  level: DEBUG\n")

        config = load_config(tmp_path, config_file=custom)

        assert config.logging.level == "DEBUG"

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path, config_file=tmp_path / "missing.yaml")

        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_invalid_value(self, tmp_path: Path) -> None:
        (tmp_path / ".newsorder.yaml").write_text("check:\n  severity: fatal\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert exc_info.value.details["field"].startswith("check")
