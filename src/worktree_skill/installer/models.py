"""
Install models for git-worktree-skill.

Requests are built during path selection and consumed once by the installer;
outcomes are produced by the installer and read only by the summary.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class FailureReason(str, Enum):
    """Why a target was not installed."""

    SKIPPED = "skipped"
    ALREADY_EXISTS = "already-exists"
    UNKNOWN_TARGET = "unknown-target"
    NO_PATHS = "no-paths"


class ConflictAction(str, Enum):
    """Operator's answer when the skill is already installed at a path."""

    OVERWRITE = "overwrite"
    SKIP = "skip"
    CHOOSE_DIFFERENT = "different"


class InstallRequest(BaseModel):
    """A target paired with the absolute path to install to."""

    model_config = ConfigDict(frozen=True)

    target_id: str
    target_name: str = ""
    path: Path
    scope: str = Field(default="project", description="project, global or custom")


class InstallOutcome(BaseModel):
    """Result of installing one target."""

    model_config = ConfigDict(frozen=True)

    target_id: str
    success: bool
    path: Path | None = None
    reason: FailureReason | None = None

    @classmethod
    def installed(cls, target_id: str, path: Path) -> "InstallOutcome":
        """Create a success outcome."""
        return cls(target_id=target_id, success=True, path=path)

    @classmethod
    def failed(cls, target_id: str, reason: FailureReason) -> "InstallOutcome":
        """Create a failure outcome."""
        return cls(target_id=target_id, success=False, reason=reason)
