"""
Exceptions for git-worktree-skill.

Per-target problems (unknown target, no configured paths) are raised by the
registry and resolver and turned into soft install outcomes by the installer.
Anything else propagates and ends the run.
"""


class WorktreeSkillError(Exception):
    """Base exception for installer errors."""

    pass


class UnknownTargetError(WorktreeSkillError):
    """Requested target identifier is not in the registry."""

    def __init__(self, target_id: str):
        self.target_id = target_id
        super().__init__(f"Unknown target: {target_id}")


class NoPathsConfiguredError(WorktreeSkillError):
    """Target has no candidate paths to install to."""

    def __init__(self, target_id: str):
        self.target_id = target_id
        super().__init__(f"No paths configured for {target_id}")
