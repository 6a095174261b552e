"""
questionary implementation of the Prompter interface.
"""

from pathlib import Path

import questionary
from questionary import Style
from rich.console import Console
from rich.markup import escape

from worktree_skill.installer.models import ConflictAction, InstallRequest
from worktree_skill.targets.models import PathCandidate, Scope, TargetSpec
from worktree_skill.ui.protocol import Prompter

console = Console()

CUSTOM_PATH = "_custom"

# Custom style for questionary prompts
custom_style = Style(
    [
        ("qmark", "fg:#5f87ff bold"),  # Question mark
        ("question", "bold"),  # Question text
        ("answer", "fg:#00d787 bold"),  # User's answer
        ("pointer", "fg:#5f87ff bold"),  # Selection pointer
        ("highlighted", "fg:#5f87ff bold"),  # Highlighted choice
        ("selected", "fg:#00d787"),  # Selected choice
        ("separator", "fg:#6c6c6c"),  # Separator
        ("instruction", "fg:#6c6c6c"),  # Instructions
        ("text", ""),  # Plain text
        ("disabled", "fg:#6c6c6c italic"),  # Disabled choice
    ]
)


def _custom_candidate(raw: str) -> PathCandidate:
    path = raw.strip()
    scope = Scope.GLOBAL if path.startswith(("~", "/")) else Scope.PROJECT
    return PathCandidate(path=path, scope=scope, description="Custom path")


class QuestionaryPrompter(Prompter):
    """Terminal prompts built on questionary.

    ``unsafe_ask`` is used throughout so Ctrl+C reaches the caller as
    KeyboardInterrupt.
    """

    def select_targets(self, targets: list[TargetSpec]) -> list[str]:
        """Multi-select the targets to install for."""
        choices = [
            questionary.Choice(
                title=f"{target.name} - {target.description}",
                value=target.id,
            )
            for target in targets
        ]

        selected = questionary.checkbox(
            "Select AI agents to install the skill for:",
            choices=choices,
            validate=lambda answer: True if answer else "You must select at least one agent.",
            style=custom_style,
        ).unsafe_ask()

        return list(selected or [])

    def select_path(self, target: TargetSpec, allow_custom: bool = False) -> PathCandidate:
        """Pick one of the target's paths, or enter a custom one.

        A single candidate is used without asking unless ``allow_custom`` is
        set, as when the operator asked for a different path after a conflict.
        """
        if len(target.paths) == 1 and not allow_custom:
            return target.paths[0]
        if not target.paths:
            return self._ask_custom_path()

        choices = [
            questionary.Choice(
                title=f"{candidate.path} ({candidate.description})",
                value=idx,
            )
            for idx, candidate in enumerate(target.paths)
        ]
        choices.append(questionary.Separator())
        choices.append(questionary.Choice(title="Enter a custom path", value=CUSTOM_PATH))

        selected = questionary.select(
            f"Select installation path for {target.name}:",
            choices=choices,
            default=choices[target.default_choice],
            style=custom_style,
            use_indicator=True,
        ).unsafe_ask()

        if selected == CUSTOM_PATH:
            return self._ask_custom_path()

        return target.paths[selected]

    def _ask_custom_path(self) -> PathCandidate:
        raw = questionary.text(
            "Enter the full file path:",
            validate=lambda text: True if text.strip() else "Please enter a valid path",
            style=custom_style,
        ).unsafe_ask()
        return _custom_candidate(raw)

    def confirm(self, requests: list[InstallRequest]) -> bool:
        """Show the planned installs and ask to proceed."""
        console.print()
        console.print("[bold]Installation Summary:[/bold]")
        console.print("[dim]" + "─" * 60 + "[/dim]")
        for request in requests:
            if request.scope == Scope.GLOBAL.value:
                label = "[yellow]\\[GLOBAL][/yellow]"
            else:
                label = "[blue]\\[PROJECT][/blue]"
            console.print(f"  {label} [cyan]{escape(request.target_name or request.target_id)}[/cyan]")
            console.print(f"    → [dim]{escape(str(request.path))}[/dim]")
        console.print("[dim]" + "─" * 60 + "[/dim]")
        console.print()

        return bool(
            questionary.confirm(
                "Proceed with installation?",
                default=True,
                style=custom_style,
            ).unsafe_ask()
        )

    def resolve_conflict(self, path: Path, existing_summary: str) -> ConflictAction:
        """Ask whether to overwrite, skip, or pick another path."""
        console.print(f"[dim]{escape(existing_summary)}[/dim]")
        action = questionary.select(
            f"The skill is already installed at {path}. What would you like to do?",
            choices=[
                questionary.Choice(title="Overwrite file", value=ConflictAction.OVERWRITE),
                questionary.Choice(title="Skip this agent", value=ConflictAction.SKIP),
                questionary.Choice(title="Choose different path", value=ConflictAction.CHOOSE_DIFFERENT),
            ],
            style=custom_style,
        ).unsafe_ask()
        return ConflictAction(action)
