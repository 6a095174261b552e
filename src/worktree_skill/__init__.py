"""
git-worktree-skill - Git worktree skill installer

Installs the Git worktree management skill (SKILL.md plus helper scripts)
into the skill directories of AI coding assistants.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("git-worktree-skill")
except PackageNotFoundError:
    __version__ = "1.2.0"

__all__ = [
    "__version__",
]
