"""
Pytest configuration and fixtures for git-worktree-skill tests.
"""

import os
from collections.abc import Generator, Mapping
from pathlib import Path

import pytest
from typer.testing import CliRunner

from worktree_skill.targets import PathCandidate, Scope, TargetSpec, build_registry


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and the tool home at a temporary directory.

    No test may read the user's config or write to their real skill folders.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("WORKTREE_SKILL_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("WORKTREE_SKILL_HOME", str(home / ".git-worktree-skill"))
    return home


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Provide an empty project directory and make it the working directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    yield project.resolve()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def alpha_target() -> TargetSpec:
    """Provide a target with a project and a global path."""
    return TargetSpec(
        id="alpha",
        name="Alpha Agent",
        description="First test agent",
        paths=(
            PathCandidate(path="cfgdir/alpha/SKILL.md", scope=Scope.PROJECT, description="Project"),
            PathCandidate(path="~/.alpha/skills/SKILL.md", scope=Scope.GLOBAL, description="Global"),
        ),
        default_choice=0,
        docs="https://example.com/alpha",
    )


@pytest.fixture
def beta_target() -> TargetSpec:
    """Provide a target with only a project path, defaulting to it."""
    return TargetSpec(
        id="beta",
        name="Beta Agent",
        description="Second test agent",
        paths=(PathCandidate(path=".beta/rules.md", scope=Scope.PROJECT, description="Rules file"),),
    )


@pytest.fixture
def empty_target() -> TargetSpec:
    """Provide a target without any paths."""
    return TargetSpec(id="empty", name="Empty Agent", description="No paths")


@pytest.fixture
def test_registry(
    alpha_target: TargetSpec,
    beta_target: TargetSpec,
    empty_target: TargetSpec,
) -> Mapping[str, TargetSpec]:
    """Provide a small registry of test targets."""
    return build_registry([alpha_target, beta_target, empty_target])


@pytest.fixture
def skill_file(tmp_path: Path) -> Path:
    """Provide a skill content file carrying the install marker."""
    path = tmp_path / "skill-source" / "SKILL.md"
    path.parent.mkdir()
    path.write_text(
        """---
name: git-worktree
description: Test skill
---

# Git Worktree Management Assistant

Test content.
""",
        encoding="utf-8",
    )
    return path
