"""
Output formatting utilities for the CLI.

Provides the banner, status lines, target listings and the final summary.
"""

from collections.abc import Mapping

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from worktree_skill.installer.models import FailureReason, InstallOutcome
from worktree_skill.targets.models import TargetSpec

# Global console instance
console = Console()

RULE_WIDTH = 60

_REASON_TEXT = {
    FailureReason.SKIPPED: "skipped",
    FailureReason.ALREADY_EXISTS: "already exists (use --force to overwrite)",
    FailureReason.UNKNOWN_TARGET: "unknown target",
    FailureReason.NO_PATHS: "no paths configured",
}


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")


def print_rule(char: str = "─") -> None:
    """Print a dim horizontal rule."""
    console.print(f"[dim]{char * RULE_WIDTH}[/dim]")


def print_banner() -> None:
    """Print the installer banner."""
    console.print()
    console.print(
        Panel.fit(
            "[bold]Git Worktree Skill Installer[/bold]\n"
            "[dim]Install worktree management for any AI agent[/dim]",
            border_style="cyan",
        )
    )
    console.print()


def print_target_list(targets: list[TargetSpec]) -> None:
    """Print all supported targets with their ids."""
    console.print("[bold]Supported AI Agents:[/bold]")
    console.print()
    for target in targets:
        console.print(
            f"  [cyan]{escape(target.name):<16}[/cyan] {escape(target.id):<16} "
            f"[dim]{escape(target.description)}[/dim]"
        )
    console.print()


def print_docs(targets: list[TargetSpec]) -> None:
    """Print documentation links for targets that have one."""
    console.print("[bold]AI Agent Documentation Links:[/bold]")
    print_rule()
    for target in targets:
        if target.docs:
            console.print(f"  [cyan]{escape(target.name)}[/cyan]: [dim]{escape(target.docs)}[/dim]")
    console.print()


def describe_reason(reason: FailureReason | None) -> str:
    """Get the summary text for a failure reason."""
    if reason is None:
        return "failed"
    return _REASON_TEXT[reason]


def print_summary(outcomes: list[InstallOutcome], registry: Mapping[str, TargetSpec]) -> None:
    """Print the final installation summary.

    Args:
        outcomes: Outcomes in request order.
        registry: Registry used to look up display names.
    """

    def display_name(target_id: str) -> str:
        spec = registry.get(target_id)
        return escape(spec.name if spec else target_id)

    successful = [o for o in outcomes if o.success]
    failed = [o for o in outcomes if not o.success]

    console.print()
    console.print("[bold]Installation Complete![/bold]")
    print_rule("═")

    if successful:
        console.print()
        console.print(f"[green bold]✓ Successfully installed for {len(successful)} target(s):[/green bold]")
        for outcome in successful:
            console.print(f"  • {display_name(outcome.target_id)}: [dim]{escape(str(outcome.path))}[/dim]")

    if failed:
        console.print()
        console.print(f"[yellow bold]! Skipped {len(failed)} target(s):[/yellow bold]")
        for outcome in failed:
            console.print(
                f"  • {display_name(outcome.target_id)}: [dim]{describe_reason(outcome.reason)}[/dim]"
            )

    console.print()
    print_rule()
    console.print("[cyan]Usage:[/cyan] Ask your AI agent about Git worktrees!")
    console.print('[dim]  Try: "Help me create a worktree for a new feature"[/dim]')
    console.print('[dim]  Try: "List my current worktrees"[/dim]')
    console.print('[dim]  Try: "How do I clean up old worktrees?"[/dim]')
    console.print()
