"""
Configuration management.

Usage:
    from worktree_skill.config import load_config

    config = load_config()
    print(config.install.scope)
"""

from worktree_skill.config.loader import (
    ConfigurationError,
    apply_env_overrides,
    load_config,
    load_yaml_file,
)
from worktree_skill.config.merger import deep_merge, set_nested_value
from worktree_skill.config.schema import Config, ContentConfig, InstallConfig, LoggingConfig

__all__ = [
    # Schema
    "Config",
    "ContentConfig",
    "InstallConfig",
    "LoggingConfig",
    # Loader
    "ConfigurationError",
    "apply_env_overrides",
    "load_config",
    "load_yaml_file",
    # Merger
    "deep_merge",
    "set_nested_value",
]
