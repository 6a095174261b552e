"""
Tests for the configuration system.
"""

from pathlib import Path

import pytest
import yaml

from worktree_skill.config import (
    Config,
    ConfigurationError,
    apply_env_overrides,
    deep_merge,
    load_config,
    load_yaml_file,
    set_nested_value,
)
from worktree_skill.storage.paths import get_global_config_path, get_tool_home
from worktree_skill.targets import ScopePreference


def write_yaml(path: Path, data: dict) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


class TestConfigSchema:
    """Tests for the Config model."""

    def test_defaults(self):
        """Test default configuration values."""
        config = Config()
        assert config.install.scope == ScopePreference.DEFAULT
        assert config.install.force is False
        assert config.install.copy_scripts is True
        assert config.content.skill_file is None
        assert config.logging.level == "WARNING"

    def test_level_case_insensitive(self):
        """Test logging levels are normalised to upper case."""
        assert Config.model_validate({"logging": {"level": "debug"}}).logging.level == "DEBUG"

    def test_unknown_keys_rejected(self):
        """Test typos in config keys are rejected."""
        with pytest.raises(ValueError):
            Config.model_validate({"install": {"scopes": "global"}})


class TestMerger:
    """Tests for config merging helpers."""

    def test_deep_merge(self):
        """Test nested dictionaries are merged."""
        base = {"install": {"scope": "default", "force": False}, "logging": {"level": "WARNING"}}
        merged = deep_merge(base, {"install": {"force": True}})
        assert merged == {"install": {"scope": "default", "force": True}, "logging": {"level": "WARNING"}}
        assert base["install"]["force"] is False

    def test_none_keeps_base(self):
        """Test None values in the override keep the base value."""
        assert deep_merge({"a": 1}, {"a": None}) == {"a": 1}

    def test_set_nested_value(self):
        """Test setting a dotted key."""
        assert set_nested_value({}, "install.scope", "global") == {"install": {"scope": "global"}}


class TestLoadYamlFile:
    """Tests for load_yaml_file."""

    def test_missing_file(self, tmp_path):
        """Test a missing file gives an empty mapping."""
        assert load_yaml_file(tmp_path / "missing.yaml") == {}

    def test_empty_file(self, tmp_path):
        """Test an empty file gives an empty mapping."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml_file(path) == {}

    def test_invalid_yaml(self, tmp_path):
        """Test broken YAML raises ConfigurationError."""
        path = tmp_path / "bad.yaml"
        path.write_text("install: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml_file(path)

    def test_non_mapping(self, tmp_path):
        """Test a top-level list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            load_yaml_file(path)


class TestEnvOverrides:
    """Tests for environment variable overrides."""

    def test_scope_override(self):
        """Test WORKTREE_SKILL_INSTALL_SCOPE."""
        config = apply_env_overrides({}, {"WORKTREE_SKILL_INSTALL_SCOPE": "global"})
        assert config == {"install": {"scope": "global"}}

    def test_key_with_underscores(self):
        """Test option names containing underscores."""
        config = apply_env_overrides({}, {"WORKTREE_SKILL_INSTALL_COPY_SCRIPTS": "false"})
        assert config == {"install": {"copy_scripts": False}}

    def test_ignores_unrelated_variables(self):
        """Test the home variable and foreign variables are ignored."""
        environ = {"WORKTREE_SKILL_HOME": "/tmp/x", "PATH": "/usr/bin", "WORKTREE_SKILL_FOO": "1"}
        assert apply_env_overrides({}, environ) == {}


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_files(self, project_dir):
        """Test loading with no config files."""
        assert load_config() == Config()

    def test_tool_home_from_env(self, isolated_home):
        """Test WORKTREE_SKILL_HOME locates the global config."""
        assert get_tool_home() == (isolated_home / ".git-worktree-skill").resolve()
        assert get_global_config_path().name == "config.yaml"

    def test_global_config(self, project_dir):
        """Test the global config file is read."""
        write_yaml(get_global_config_path(), {"install": {"scope": "global", "force": True}})
        config = load_config()
        assert config.install.scope == ScopePreference.GLOBAL
        assert config.install.force is True

    def test_project_overrides_global(self, project_dir):
        """Test project config wins over global config."""
        write_yaml(get_global_config_path(), {"install": {"scope": "global", "force": True}})
        write_yaml(project_dir / ".git-worktree-skill.yaml", {"install": {"scope": "project"}})
        config = load_config()
        assert config.install.scope == ScopePreference.PROJECT
        assert config.install.force is True

    def test_skip_project(self, project_dir):
        """Test project config can be skipped."""
        write_yaml(project_dir / ".git-worktree-skill.yaml", {"install": {"scope": "project"}})
        assert load_config(skip_project=True).install.scope == ScopePreference.DEFAULT

    def test_env_overrides_files(self, project_dir, monkeypatch):
        """Test environment variables win over config files."""
        write_yaml(project_dir / ".git-worktree-skill.yaml", {"install": {"scope": "project"}})
        monkeypatch.setenv("WORKTREE_SKILL_INSTALL_SCOPE", "global")
        monkeypatch.setenv("WORKTREE_SKILL_LOGGING_LEVEL", "info")
        config = load_config()
        assert config.install.scope == ScopePreference.GLOBAL
        assert config.logging.level == "INFO"

    def test_content_paths(self, project_dir, skill_file):
        """Test content overrides are parsed as paths."""
        write_yaml(project_dir / ".git-worktree-skill.yaml", {"content": {"skill_file": str(skill_file)}})
        assert load_config().content.skill_file == skill_file

    def test_invalid_value(self, project_dir):
        """Test invalid values raise ConfigurationError."""
        write_yaml(project_dir / ".git-worktree-skill.yaml", {"install": {"scope": "everywhere"}})
        with pytest.raises(ConfigurationError, match="validation failed"):
            load_config()

    def test_invalid_env_value(self, project_dir, monkeypatch):
        """Test invalid environment values raise ConfigurationError."""
        monkeypatch.setenv("WORKTREE_SKILL_LOGGING_LEVEL", "loud")
        with pytest.raises(ConfigurationError):
            load_config()
