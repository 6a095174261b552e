"""
Path resolution for install targets.
"""

import logging
from pathlib import Path

from worktree_skill.exceptions import NoPathsConfiguredError
from worktree_skill.storage.paths import expand_path
from worktree_skill.targets.models import PathCandidate, Scope, ScopePreference, TargetSpec

logger = logging.getLogger(__name__)


def select_candidate(
    spec: TargetSpec,
    preference: ScopePreference = ScopePreference.DEFAULT,
) -> PathCandidate:
    """Pick the candidate path for a scope preference.

    With no preference the spec's default candidate is used. Otherwise the
    first candidate with a matching scope wins, falling back to the first
    candidate when none match.

    Args:
        spec: Target to pick a path for.
        preference: Requested scope.

    Returns:
        The chosen candidate.

    Raises:
        NoPathsConfiguredError: If the target has no candidates.
    """
    if not spec.paths:
        raise NoPathsConfiguredError(spec.id)

    preference = ScopePreference(preference)
    if preference == ScopePreference.DEFAULT:
        return spec.paths[spec.default_choice]

    scope = Scope(preference.value)
    if not spec.has_scope(scope):
        logger.debug(f"No {scope.value} path for {spec.id}, using {spec.paths[0].path}")
        return spec.paths[0]

    return next(candidate for candidate in spec.paths if candidate.scope == scope)


def resolve_path(
    spec: TargetSpec,
    preference: ScopePreference = ScopePreference.DEFAULT,
    cwd: Path | None = None,
) -> Path:
    """Resolve the absolute install path for a target.

    Args:
        spec: Target to resolve.
        preference: Requested scope.
        cwd: Directory for project paths. Defaults to the current directory.

    Returns:
        Absolute path of the skill file.

    Raises:
        NoPathsConfiguredError: If the target has no candidates.
    """
    candidate = select_candidate(spec, preference)
    return expand_path(candidate.path, cwd)
