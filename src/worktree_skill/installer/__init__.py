"""
Skill installation.

Usage:
    from worktree_skill.installer import Installer
    from worktree_skill.targets import ScopePreference

    installer = Installer()
    outcomes = installer.install_targets(["claude-code", "cursor"], ScopePreference.PROJECT)
"""

# Models
from worktree_skill.installer.models import (
    ConflictAction,
    FailureReason,
    InstallOutcome,
    InstallRequest,
)

# Content
from worktree_skill.installer.content import (
    FALLBACK_SKILL_CONTENT,
    SKILL_MARKER,
    bundled_scripts,
    contains_marker,
    load_skill_content,
)

# Decision
from worktree_skill.installer.decision import WriteDecision, decide_write

# Paths
from worktree_skill.installer.paths import resolve_path, select_candidate

# Engine
from worktree_skill.installer.engine import Installer, read_existing, summarize_content

__all__ = [
    # Models
    "ConflictAction",
    "FailureReason",
    "InstallOutcome",
    "InstallRequest",
    # Content
    "FALLBACK_SKILL_CONTENT",
    "SKILL_MARKER",
    "bundled_scripts",
    "contains_marker",
    "load_skill_content",
    # Decision
    "WriteDecision",
    "decide_write",
    # Paths
    "resolve_path",
    "select_candidate",
    # Engine
    "Installer",
    "read_existing",
    "summarize_content",
]
