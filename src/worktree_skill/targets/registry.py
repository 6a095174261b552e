"""
Target registry for git-worktree-skill.

The registry is a read-only mapping built once at import time. Behavior is the
same for every target; only the paths and labels differ.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from worktree_skill.exceptions import UnknownTargetError
from worktree_skill.targets.models import PathCandidate, Scope, TargetSpec

SKILL_NAME = "git-worktree"
SKILL_FILENAME = "SKILL.md"


def _skill_path(base: str) -> str:
    return f"{base}/skills/{SKILL_NAME}/{SKILL_FILENAME}"


def _project(base: str, description: str = "Project skill (current directory)") -> PathCandidate:
    return PathCandidate(path=_skill_path(base), scope=Scope.PROJECT, description=description)


def _global(base: str, description: str = "Global skill (all projects)") -> PathCandidate:
    return PathCandidate(path=_skill_path(f"~/{base}"), scope=Scope.GLOBAL, description=description)


_TARGETS: tuple[TargetSpec, ...] = (
    TargetSpec(
        id="claude-code",
        name="Claude Code",
        description="Anthropic's CLI coding assistant",
        paths=(_project(".claude"), _global(".claude")),
        docs="https://docs.anthropic.com/en/docs/claude-code/skills",
    ),
    TargetSpec(
        id="github-copilot",
        name="GitHub Copilot",
        description="GitHub's AI pair programmer",
        paths=(_project(".github"),),
        docs="https://docs.github.com/en/copilot/concepts/agents/about-agent-skills",
    ),
    TargetSpec(
        id="cursor",
        name="Cursor",
        description="AI-first code editor",
        paths=(_project(".cursor"), _global(".cursor")),
        docs="https://docs.cursor.com/context/rules",
    ),
    TargetSpec(
        id="windsurf",
        name="Windsurf",
        description="Codeium's agentic IDE",
        paths=(_project(".cascade"), _global(".codeium/windsurf")),
        docs="https://docs.windsurf.com/windsurf/cascade/memories",
    ),
    TargetSpec(
        id="cline",
        name="Cline",
        description="Autonomous AI coding agent for VS Code",
        paths=(_project(".cline"), _global(".cline")),
        docs="https://docs.cline.bot/features/cline-rules",
    ),
    TargetSpec(
        id="gemini-cli",
        name="Gemini CLI",
        description="Google's AI agent in the terminal",
        paths=(_project(".gemini"), _global(".gemini")),
        docs="https://github.com/google-gemini/gemini-cli",
    ),
    TargetSpec(
        id="roo-code",
        name="Roo Code",
        description="AI dev team in your editor",
        paths=(_project(".roo"),),
        docs="https://docs.roocode.com/features/custom-instructions",
    ),
    TargetSpec(
        id="codex",
        name="Codex CLI",
        description="OpenAI's coding agent for the terminal",
        paths=(_project(".agents"), _global(".codex")),
        docs="https://github.com/openai/codex",
    ),
    TargetSpec(
        id="opencode",
        name="OpenCode",
        description="Open source terminal coding agent",
        paths=(_project(".opencode"), _global(".config/opencode")),
        docs="https://opencode.ai/docs/skills",
    ),
)


def build_registry(targets: Iterable[TargetSpec]) -> Mapping[str, TargetSpec]:
    """Build a read-only registry from target specs.

    Args:
        targets: Target specs in display order.

    Returns:
        Immutable mapping of target id to spec.

    Raises:
        ValueError: If two specs share an id.
    """
    registry: dict[str, TargetSpec] = {}
    for spec in targets:
        if spec.id in registry:
            raise ValueError(f"Duplicate target id: {spec.id}")
        registry[spec.id] = spec
    return MappingProxyType(registry)


TARGETS: Mapping[str, TargetSpec] = build_registry(_TARGETS)


def get_target(target_id: str, registry: Mapping[str, TargetSpec] = TARGETS) -> TargetSpec:
    """Look up a target by id.

    Raises:
        UnknownTargetError: If the id is not registered.
    """
    try:
        return registry[target_id]
    except KeyError:
        raise UnknownTargetError(target_id) from None


def list_targets(registry: Mapping[str, TargetSpec] = TARGETS) -> list[TargetSpec]:
    """List all targets in registry order."""
    return list(registry.values())


def list_target_ids(registry: Mapping[str, TargetSpec] = TARGETS) -> list[str]:
    """List all target identifiers in registry order."""
    return list(registry.keys())
