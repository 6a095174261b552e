"""
Write decision for an install path.
"""

from enum import Enum

from worktree_skill.installer.content import contains_marker


class WriteDecision(str, Enum):
    """What to do with a target path."""

    WRITE = "write"  # path is absent
    OVERWRITE = "overwrite"  # forced
    ALREADY_EXISTS = "already-exists"  # skill already installed, leave it
    REPLACE = "replace"  # unrelated content, replace it


def decide_write(existing_content: str | None, force: bool = False) -> WriteDecision:
    """Decide how to treat a path given what is already there.

    Args:
        existing_content: Current file content, or None if the file is absent.
        force: Overwrite even if the skill is already installed.

    Returns:
        The write decision.
    """
    if existing_content is None:
        return WriteDecision.WRITE
    if force:
        return WriteDecision.OVERWRITE
    if contains_marker(existing_content):
        return WriteDecision.ALREADY_EXISTS
    return WriteDecision.REPLACE
