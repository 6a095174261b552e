"""Storage and path management."""

from worktree_skill.storage.paths import (
    PROJECT_CONFIG_FILENAME,
    ensure_parent_directory,
    expand_path,
    get_global_config_path,
    get_project_config_path,
    get_tool_home,
    make_executable,
)

__all__ = [
    "PROJECT_CONFIG_FILENAME",
    "ensure_parent_directory",
    "expand_path",
    "get_global_config_path",
    "get_project_config_path",
    "get_tool_home",
    "make_executable",
]
