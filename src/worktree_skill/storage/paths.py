"""
Path utilities for git-worktree-skill.

Provides home/config locations and expansion of the paths stored in the
target registry.
"""

import os
from pathlib import Path

PROJECT_CONFIG_FILENAME = ".git-worktree-skill.yaml"


def get_tool_home() -> Path:
    """
    Get the installer's home directory.

    Resolution order:
    1. WORKTREE_SKILL_HOME environment variable
    2. Default: ~/.git-worktree-skill

    Returns:
        Path to the home directory.
    """
    env_home = os.environ.get("WORKTREE_SKILL_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".git-worktree-skill"


def get_global_config_path() -> Path:
    """
    Get the path to the global configuration file.

    Returns:
        Path to ~/.git-worktree-skill/config.yaml
    """
    return get_tool_home() / "config.yaml"


def get_project_config_path(start_path: Path | None = None) -> Path:
    """
    Get the path to the project configuration file.

    Args:
        start_path: Project directory. Defaults to cwd.

    Returns:
        Path to ./.git-worktree-skill.yaml
    """
    return (start_path or Path.cwd()) / PROJECT_CONFIG_FILENAME


def expand_path(path: str | Path, cwd: Path | None = None) -> Path:
    """
    Expand a path string, handling ~ and environment variables.

    Relative paths are anchored at ``cwd``, read at call time when not given.

    Args:
        path: Path string or Path object.
        cwd: Directory for relative paths. Defaults to the current directory.

    Returns:
        Absolute Path.
    """
    if isinstance(path, str):
        path = os.path.expandvars(path)
        path = os.path.expanduser(path)
    path = Path(path)
    if not path.is_absolute():
        path = (cwd or Path.cwd()) / path
    return path.resolve()


def ensure_parent_directory(path: Path) -> bool:
    """
    Ensure the parent directory of a file exists.

    Args:
        path: File path.

    Returns:
        True if directories were created, False if the parent already existed.
    """
    if path.parent.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    return True


def make_executable(path: Path) -> None:
    """Add the executable bits to a file's mode."""
    path.chmod(path.stat().st_mode | 0o111)
