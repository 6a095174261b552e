"""
Skill content loading.

The skill text ships as ``data/SKILL.md`` inside the package, with helper
scripts in ``data/scripts/``. If the bundled file is missing a minimal
embedded version is used instead.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
BUNDLED_SKILL_FILE = DATA_DIR / "SKILL.md"
BUNDLED_SCRIPTS_DIR = DATA_DIR / "scripts"

# Present in every version of the skill; used to detect a previous install.
SKILL_MARKER = "Git Worktree Management"

FALLBACK_SKILL_CONTENT = """---
name: git-worktree
description: Create, list, switch between and clean up Git worktrees.
license: Apache-2.0
compatibility: Requires git
---

# Git Worktree Management Assistant

You are a Git Worktree Management Assistant. Help users create, manage, and remove Git worktrees.

## Quick Commands

```bash
# Create worktree for new branch
git worktree add ../project-feature -b feature/name origin/main

# List worktrees
git worktree list

# Remove worktree
git worktree remove ../project-feature

# Clean stale references
git worktree prune
```

Guide users interactively through worktree operations.
"""


def load_skill_content(skill_file: Path | None = None) -> str:
    """Load the skill content.

    Args:
        skill_file: Optional override for the skill file. Ignored if missing.

    Returns:
        The skill text.
    """
    for candidate in (skill_file, BUNDLED_SKILL_FILE):
        if candidate is not None and candidate.is_file():
            logger.debug(f"Loading skill content from {candidate}")
            return candidate.read_text(encoding="utf-8")

    logger.debug("Bundled skill file not found, using embedded content")
    return FALLBACK_SKILL_CONTENT


def bundled_scripts(scripts_dir: Path | None = None) -> list[Path]:
    """List the helper scripts that ship with the skill.

    Args:
        scripts_dir: Optional override for the scripts directory.

    Returns:
        Script files sorted by name (empty if the directory is missing).
    """
    directory = scripts_dir or BUNDLED_SCRIPTS_DIR
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.iterdir() if p.is_file() and not p.name.startswith("."))


def contains_marker(content: str) -> bool:
    """Check whether content was written by this installer."""
    return SKILL_MARKER in content
