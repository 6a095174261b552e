"""
Installer for git-worktree-skill.

Writes the skill into each requested target's path and collects one outcome
per target, in request order.
"""

import logging
import shutil
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from worktree_skill.exceptions import NoPathsConfiguredError, UnknownTargetError
from worktree_skill.installer.content import bundled_scripts, load_skill_content
from worktree_skill.installer.decision import WriteDecision, decide_write
from worktree_skill.installer.models import (
    ConflictAction,
    FailureReason,
    InstallOutcome,
    InstallRequest,
)
from worktree_skill.installer.paths import resolve_path, select_candidate
from worktree_skill.storage.paths import ensure_parent_directory, expand_path, make_executable
from worktree_skill.targets.models import ScopePreference, TargetSpec
from worktree_skill.targets.registry import SKILL_FILENAME, TARGETS, get_target

if TYPE_CHECKING:
    from worktree_skill.ui.protocol import Prompter

logger = logging.getLogger(__name__)

SUMMARY_MAX_LINES = 5


def read_existing(path: Path) -> str | None:
    """Read the current content of a path, or None if it does not exist."""
    if not path.exists():
        return None
    return path.read_text(encoding="utf-8", errors="replace")


def summarize_content(content: str, max_lines: int = SUMMARY_MAX_LINES) -> str:
    """Get the first non-empty lines of a file for display."""
    lines = [line for line in content.splitlines() if line.strip()]
    summary = "\n".join(lines[:max_lines])
    if len(lines) > max_lines:
        summary += "\n..."
    return summary


class Installer:
    """Installs the skill for a sequence of targets.

    Targets are processed one at a time. Filesystem errors are not caught
    here and end the run.
    """

    def __init__(
        self,
        registry: Mapping[str, TargetSpec] = TARGETS,
        skill_file: Path | None = None,
        scripts_dir: Path | None = None,
        copy_scripts: bool = True,
    ):
        """Initialize the installer.

        Args:
            registry: Target registry to look ids up in.
            skill_file: Optional override for the skill content file.
            scripts_dir: Optional override for the helper scripts directory.
            copy_scripts: Copy helper scripts next to SKILL.md files.
        """
        self.registry = registry
        self.skill_file = skill_file
        self.scripts_dir = scripts_dir
        self.copy_scripts = copy_scripts
        self._content: str | None = None

    @property
    def content(self) -> str:
        """Get the skill content (loaded once per installer)."""
        if self._content is None:
            self._content = load_skill_content(self.skill_file)
        return self._content

    def get_target(self, target_id: str) -> TargetSpec:
        """Look up a target in this installer's registry."""
        return get_target(target_id, self.registry)

    def build_request(
        self,
        target_id: str,
        preference: ScopePreference = ScopePreference.DEFAULT,
        cwd: Path | None = None,
    ) -> InstallRequest:
        """Resolve a target id into an install request.

        Raises:
            UnknownTargetError: If the id is not registered.
            NoPathsConfiguredError: If the target has no paths.
        """
        spec = self.get_target(target_id)
        candidate = select_candidate(spec, preference)
        return InstallRequest(
            target_id=spec.id,
            target_name=spec.name,
            path=resolve_path(spec, preference, cwd),
            scope=candidate.scope.value,
        )

    def install_targets(
        self,
        target_ids: Iterable[str],
        preference: ScopePreference = ScopePreference.DEFAULT,
        force: bool = False,
    ) -> list[InstallOutcome]:
        """Install for targets by id without asking the operator anything.

        Args:
            target_ids: Target ids in the order requested.
            preference: Scope preference used to pick each path.
            force: Overwrite existing installs.

        Returns:
            One outcome per requested id, in request order.
        """
        outcomes: list[InstallOutcome] = []

        for target_id in target_ids:
            try:
                request = self.build_request(target_id, preference)
            except UnknownTargetError:
                logger.info(f"Unknown target: {target_id}")
                outcomes.append(InstallOutcome.failed(target_id, FailureReason.UNKNOWN_TARGET))
                continue
            except NoPathsConfiguredError:
                logger.info(f"No paths configured for {target_id}")
                outcomes.append(InstallOutcome.failed(target_id, FailureReason.NO_PATHS))
                continue

            outcomes.append(self.install_request(request, force=force))

        return outcomes

    def install_requests(
        self,
        requests: Iterable[InstallRequest],
        force: bool = False,
        prompter: "Prompter | None" = None,
    ) -> list[InstallOutcome]:
        """Install pre-resolved requests, in order.

        Args:
            requests: Requests built during path selection.
            force: Overwrite existing installs.
            prompter: If given, asked what to do when the skill already exists.

        Returns:
            One outcome per request.
        """
        return [self.install_request(request, force=force, prompter=prompter) for request in requests]

    def install_request(
        self,
        request: InstallRequest,
        force: bool = False,
        prompter: "Prompter | None" = None,
    ) -> InstallOutcome:
        """Install the skill for a single request.

        Args:
            request: Target and path to install to.
            force: Overwrite an existing install.
            prompter: If given, resolves an existing install instead of
                reporting it as already existing.

        Returns:
            The outcome for this target.
        """
        path = request.path
        logger.info(f"Installing for {request.target_id} at {path}")

        while True:
            existing = read_existing(path)
            decision = decide_write(existing, force)
            if decision is not WriteDecision.ALREADY_EXISTS:
                break

            if prompter is None:
                logger.info(f"Skill already exists in {path}")
                return InstallOutcome.failed(request.target_id, FailureReason.ALREADY_EXISTS)

            action = prompter.resolve_conflict(path, summarize_content(existing or ""))
            if action == ConflictAction.OVERWRITE:
                decision = WriteDecision.OVERWRITE
                break
            if action == ConflictAction.SKIP:
                logger.info(f"Skipped {request.target_id}")
                return InstallOutcome.failed(request.target_id, FailureReason.SKIPPED)

            candidate = prompter.select_path(self.get_target(request.target_id), allow_custom=True)
            path = expand_path(candidate.path)

        logger.debug(f"Write decision for {path}: {decision.value}")
        self.write_skill(path)
        return InstallOutcome.installed(request.target_id, path)

    def write_skill(self, path: Path) -> None:
        """Write the skill content to a path.

        Missing parent directories are created. When the file is a SKILL.md
        the helper scripts are copied into a ``scripts/`` directory beside it.
        """
        if ensure_parent_directory(path):
            logger.debug(f"Created directory {path.parent}")

        path.write_text(self.content, encoding="utf-8")

        if self.copy_scripts and path.name == SKILL_FILENAME:
            self._copy_scripts(path.parent / "scripts")

    def _copy_scripts(self, dest_dir: Path) -> list[Path]:
        scripts = bundled_scripts(self.scripts_dir)
        if not scripts:
            return []

        dest_dir.mkdir(parents=True, exist_ok=True)
        copied = []
        for script in scripts:
            dest = dest_dir / script.name
            shutil.copy2(script, dest)
            make_executable(dest)
            copied.append(dest)
            logger.debug(f"Copied script {script.name} to {dest_dir}")
        return copied
