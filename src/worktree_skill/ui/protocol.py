"""
Prompter Protocol - the interface between the installer and the terminal.

The interactive installer only talks to the operator through this interface,
so the install logic can be driven by a scripted prompter in tests.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from worktree_skill.installer.models import ConflictAction, InstallRequest
from worktree_skill.targets.models import PathCandidate, TargetSpec


class Prompter(ABC):
    """Abstract base class for operator prompts.

    Implementations may raise KeyboardInterrupt to cancel the run.
    """

    @abstractmethod
    def select_targets(self, targets: list[TargetSpec]) -> list[str]:
        """Ask which targets to install for.

        Args:
            targets: Selectable targets in display order.

        Returns:
            Chosen target ids in order. Empty means cancel.
        """
        ...

    @abstractmethod
    def select_path(self, target: TargetSpec, allow_custom: bool = False) -> PathCandidate:
        """Ask where to install for a target.

        Args:
            target: Target to pick a path for.
            allow_custom: Always offer a custom path, even when the target
                has a single candidate.

        Returns:
            One of the target's candidates or a custom path.
        """
        ...

    @abstractmethod
    def confirm(self, requests: list[InstallRequest]) -> bool:
        """Ask for confirmation before writing anything."""
        ...

    @abstractmethod
    def resolve_conflict(self, path: Path, existing_summary: str) -> ConflictAction:
        """Ask what to do when the skill is already installed at a path.

        Args:
            path: The conflicting file.
            existing_summary: Short excerpt of the current file content.

        Returns:
            Overwrite, skip, or choose a different path.
        """
        ...
