"""
Main Typer application for git-worktree-skill.

Without options the installer runs interactively. ``--install`` installs
non-interactively for a comma-separated list of targets.
"""

import logging
from collections.abc import Callable
from typing import Annotated

import typer
from rich.markup import escape
from typer.core import TyperCommand

from worktree_skill import __version__
from worktree_skill.cli.interactive import run_interactive
from worktree_skill.cli.output import (
    console,
    print_banner,
    print_docs,
    print_error,
    print_info,
    print_summary,
    print_target_list,
)
from worktree_skill.config import Config, load_config
from worktree_skill.installer.engine import Installer
from worktree_skill.installer.models import FailureReason
from worktree_skill.targets.models import ScopePreference
from worktree_skill.targets.registry import list_target_ids, list_targets

logger = logging.getLogger(__name__)

INSTALL_OPTION = "--install"


class InstallerCommand(TyperCommand):
    """Command that accepts ``--install`` with its value missing.

    A missing value is passed on as an empty string so it is reported as a
    usage error by the command itself.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        args = list(args)
        for idx, arg in enumerate(args):
            if arg != INSTALL_OPTION:
                continue
            if idx + 1 == len(args) or args[idx + 1].startswith("-"):
                args.insert(idx + 1, "")
            break
        return super().parse_args(ctx, args)


def _build_help() -> str:
    keys = ", ".join(list_target_ids())
    return (
        "Interactive installer for the [bold]Git Worktree Management[/bold] skill.\n\n"
        "Run without options to pick agents and paths interactively.\n\n"
        "[bold]Examples:[/bold]\n\n"
        "  git-worktree-skill\n\n"
        "  git-worktree-skill --install claude-code,cursor\n\n"
        "  git-worktree-skill --install windsurf --project\n\n"
        f"[bold]Agent keys:[/bold] {keys}"
    )


app = typer.Typer(
    name="git-worktree-skill",
    help="Install the Git worktree management skill for AI coding assistants.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"git-worktree-skill [green]v{__version__}[/green]")
        raise typer.Exit()


def _configure_logging(config: Config, verbose: bool) -> None:
    level = "DEBUG" if verbose else config.logging.level
    if verbose or level != "WARNING":
        logging.basicConfig(level=getattr(logging, level), format="%(levelname)s %(name)s: %(message)s")


def _run_safely(action: Callable[[], None]) -> int:
    """Run an action, turning interrupts and errors into exit codes."""
    try:
        action()
    except KeyboardInterrupt:
        console.print()
        print_info("Installation cancelled.")
        return 0
    except Exception as e:
        logger.debug("Installation failed", exc_info=True)
        print_error(f"Installation failed: {escape(str(e))}")
        return 1
    return 0


def parse_target_ids(value: str) -> list[str]:
    """Split a comma-separated target list."""
    return [item.strip() for item in value.split(",") if item.strip()]


# noinspection PyUnusedLocal
@app.command(cls=InstallerCommand, help=_build_help())
def main(
    install: Annotated[
        str | None,
        typer.Option(
            INSTALL_OPTION,
            help="Non-interactive install for comma-separated agent keys.",
            metavar="AGENTS",
        ),
    ] = None,
    global_scope: Annotated[
        bool,
        typer.Option(
            "--global",
            help="Use global paths (with --install).",
        ),
    ] = False,
    project_scope: Annotated[
        bool,
        typer.Option(
            "--project",
            help="Use project paths (with --install).",
        ),
    ] = False,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            "-f",
            help="Overwrite an existing skill file.",
        ),
    ] = False,
    list_agents: Annotated[
        bool,
        typer.Option(
            "--list",
            help="List all supported agents.",
        ),
    ] = False,
    docs: Annotated[
        bool,
        typer.Option(
            "--docs",
            help="Show documentation links for all agents.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            help="Show debug logging.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    print_banner()

    if install is not None and not parse_target_ids(install):
        print_error("Please specify targets: --install target1,target2")
        raise typer.Exit(1)

    if global_scope and project_scope:
        print_error("--global and --project cannot be used together")
        raise typer.Exit(1)

    if install is None and docs:
        print_docs(list_targets())
        return

    if install is None and list_agents:
        print_target_list(list_targets())
        return

    def run() -> None:
        config = load_config()
        _configure_logging(config, verbose)

        installer = Installer(
            skill_file=config.content.skill_file,
            scripts_dir=config.content.scripts_dir,
            copy_scripts=config.install.copy_scripts,
        )
        use_force = force or config.install.force

        if install is not None:
            if global_scope:
                preference = ScopePreference.GLOBAL
            elif project_scope:
                preference = ScopePreference.PROJECT
            else:
                preference = config.install.scope

            outcomes = installer.install_targets(parse_target_ids(install), preference, use_force)
            for outcome in outcomes:
                if outcome.reason == FailureReason.UNKNOWN_TARGET:
                    print_error(f"Unknown agent: {escape(outcome.target_id)}")
            print_summary(outcomes, installer.registry)
            return

        from worktree_skill.ui.questionary_prompter import QuestionaryPrompter

        run_interactive(QuestionaryPrompter(), installer, force=use_force)

    exit_code = _run_safely(run)
    if exit_code:
        raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
