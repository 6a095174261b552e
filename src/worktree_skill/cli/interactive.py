"""
Interactive install flow.

Select targets → pick a path per target → confirm → install → summary.
"""

from worktree_skill.cli.output import print_info, print_summary
from worktree_skill.installer.engine import Installer
from worktree_skill.installer.models import InstallOutcome, InstallRequest
from worktree_skill.storage.paths import expand_path
from worktree_skill.targets.registry import list_targets
from worktree_skill.ui.protocol import Prompter


def collect_requests(prompter: Prompter, installer: Installer, target_ids: list[str]) -> list[InstallRequest]:
    """Ask for a path for each selected target.

    Args:
        prompter: Operator prompts.
        installer: Installer whose registry holds the targets.
        target_ids: Selected target ids, in order.

    Returns:
        One request per target id.
    """
    requests = []
    for target_id in target_ids:
        spec = installer.get_target(target_id)
        candidate = prompter.select_path(spec)
        requests.append(
            InstallRequest(
                target_id=spec.id,
                target_name=spec.name,
                path=expand_path(candidate.path),
                scope=candidate.scope.value,
            )
        )
    return requests


def run_interactive(
    prompter: Prompter,
    installer: Installer,
    force: bool = False,
) -> list[InstallOutcome] | None:
    """Run the interactive installer.

    Args:
        prompter: Operator prompts.
        installer: Installer to write with.
        force: Overwrite existing installs without asking.

    Returns:
        Install outcomes, or None if the operator cancelled.
    """
    selected = prompter.select_targets(list_targets(installer.registry))
    if not selected:
        print_info("Installation cancelled.")
        return None

    requests = collect_requests(prompter, installer, selected)

    if not prompter.confirm(requests):
        print_info("Installation cancelled.")
        return None

    outcomes = installer.install_requests(
        requests,
        force=force,
        prompter=None if force else prompter,
    )
    print_summary(outcomes, installer.registry)
    return outcomes
