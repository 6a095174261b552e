"""
Target models for git-worktree-skill.

Describes the AI assistants the skill can be installed for and the file
locations each of them reads instructions from.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Scope(str, Enum):
    """Where a candidate path lives."""

    PROJECT = "project"
    GLOBAL = "global"


class ScopePreference(str, Enum):
    """Scope requested by the operator for non-interactive installs."""

    DEFAULT = "default"
    PROJECT = "project"
    GLOBAL = "global"


class PathCandidate(BaseModel):
    """A file location a target recognizes.

    Project paths are relative to the working directory, global paths start
    with ``~``. Both are expanded only when an install happens.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Relative or ~-prefixed file path")
    scope: Scope = Field(..., description="Project or global location")
    description: str = Field(default="", description="Human description")


class TargetSpec(BaseModel):
    """An AI assistant the skill can be installed for."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique target identifier")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="Short description")
    paths: tuple[PathCandidate, ...] = Field(default=(), description="Candidate paths")
    default_choice: int = Field(default=0, ge=0, description="Index of the default candidate")
    docs: str | None = Field(default=None, description="Documentation URL")

    @model_validator(mode="after")
    def _check_default_choice(self) -> "TargetSpec":
        if self.paths and self.default_choice >= len(self.paths):
            raise ValueError(
                f"default_choice {self.default_choice} out of range for {len(self.paths)} path(s)"
            )
        return self

    @property
    def default_candidate(self) -> PathCandidate | None:
        """Get the default candidate, or None if no paths are configured."""
        if not self.paths:
            return None
        return self.paths[self.default_choice]

    def has_scope(self, scope: Scope) -> bool:
        """Check whether any candidate is tagged with the given scope."""
        return any(candidate.scope == scope for candidate in self.paths)
