"""
Supported AI assistant targets.

Usage:
    from worktree_skill.targets import get_target, list_targets

    spec = get_target("claude-code")
    print(spec.default_candidate.path)
"""

from worktree_skill.targets.models import PathCandidate, Scope, ScopePreference, TargetSpec
from worktree_skill.targets.registry import (
    SKILL_FILENAME,
    SKILL_NAME,
    TARGETS,
    build_registry,
    get_target,
    list_target_ids,
    list_targets,
)

__all__ = [
    # Models
    "PathCandidate",
    "Scope",
    "ScopePreference",
    "TargetSpec",
    # Registry
    "SKILL_FILENAME",
    "SKILL_NAME",
    "TARGETS",
    "build_registry",
    "get_target",
    "list_target_ids",
    "list_targets",
]
