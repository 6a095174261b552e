"""
Configuration loader for git-worktree-skill.

Sources, lowest precedence first:
1. Built-in defaults
2. Global file ($WORKTREE_SKILL_HOME/config.yaml)
3. Project file (./.git-worktree-skill.yaml)
4. Environment variables (WORKTREE_SKILL_<SECTION>_<KEY>)

Command line flags are applied on top by the CLI.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from worktree_skill.config.merger import deep_merge, set_nested_value
from worktree_skill.config.schema import Config
from worktree_skill.exceptions import WorktreeSkillError
from worktree_skill.storage.paths import get_global_config_path, get_project_config_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "WORKTREE_SKILL_"

# Not config overrides
_RESERVED_ENV = {"WORKTREE_SKILL_HOME"}

_TRUE_VALUES = {"true", "yes", "1", "on"}
_FALSE_VALUES = {"false", "no", "0", "off"}


class ConfigurationError(WorktreeSkillError):
    """A config file or override could not be read or is invalid."""


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Read one YAML config file.

    A missing or empty file counts as no settings.

    Raises:
        ConfigurationError: If the file is unreadable, is not valid YAML, or
            does not hold a mapping at the top level.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return data


def _parse_env_value(raw: str) -> Any:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return raw


def apply_env_overrides(config: dict[str, Any], environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """
    Apply ``WORKTREE_SKILL_<SECTION>_<KEY>`` variables to a config mapping.

    The section is the first word after the prefix and the rest is the key,
    so ``WORKTREE_SKILL_INSTALL_COPY_SCRIPTS=false`` sets
    ``install.copy_scripts``. Boolean-looking values become bools.

    Args:
        config: Mapping to update.
        environ: Environment to read. Defaults to ``os.environ``.

    Returns:
        The updated mapping.
    """
    if environ is None:
        environ = os.environ

    for name, raw in environ.items():
        if not name.startswith(ENV_PREFIX) or name in _RESERVED_ENV:
            continue

        section, _, key = name[len(ENV_PREFIX) :].lower().partition("_")
        if not key:
            logger.debug(f"Ignoring environment variable {name}")
            continue

        config = set_nested_value(config, f"{section}.{key}", _parse_env_value(raw))

    return config


def load_config(
    project_path: Path | None = None,
    skip_project: bool = False,
    skip_env: bool = False,
) -> Config:
    """
    Build the effective configuration.

    Args:
        project_path: Directory holding the project file. Defaults to cwd.
        skip_project: Ignore the project file.
        skip_env: Ignore environment variables.

    Raises:
        ConfigurationError: If any source is unreadable or the merged values
            fail validation.
    """
    files = [get_global_config_path()]
    if not skip_project:
        files.append(get_project_config_path(project_path))

    merged = Config().model_dump()
    for path in files:
        if path.exists():
            logger.debug(f"Loading config from {path}")
            merged = deep_merge(merged, load_yaml_file(path))

    if not skip_env:
        merged = apply_env_overrides(merged)

    try:
        return Config.model_validate(merged)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e
