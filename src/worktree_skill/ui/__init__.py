"""Operator prompts for the interactive installer."""

from worktree_skill.ui.protocol import Prompter

__all__ = ["Prompter"]
