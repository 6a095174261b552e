"""
Pydantic configuration schema for git-worktree-skill.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from worktree_skill.targets.models import ScopePreference


class InstallConfig(BaseModel):
    """Defaults for the install command."""

    model_config = ConfigDict(extra="forbid")

    scope: ScopePreference = ScopePreference.DEFAULT
    force: bool = False
    copy_scripts: bool = True


class ContentConfig(BaseModel):
    """Where the skill content comes from."""

    model_config = ConfigDict(extra="forbid")

    skill_file: Path | None = None
    scripts_dir: Path | None = None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class Config(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    install: InstallConfig = Field(default_factory=InstallConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
