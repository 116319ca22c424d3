# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/core/explain.py

"""
Explain mode: static guidance about each verb, printed instead of running git.
"""

from dataclasses import dataclass
from typing import Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sgit.core.commands import COMMAND_NAMES, SimplifiedCommand, command_name
from sgit.system.exceptions import UsageError


@dataclass(frozen=True)
class Explanation:
    summary: str
    runs: str
    options: tuple[tuple[str, str], ...] = ()


EXPLANATIONS: dict[str, Explanation] = {
    "init": Explanation(
        "Initialize a Git repository in the current directory.",
        "git init",
    ),
    "stage": Explanation(
        "Add files to the staging area so the next commit includes them.",
        "git add <paths> (default: .)",
        (
            ("PATH...", "stage only these paths"),
            ("--all", "stage every change, including untracked files (git add -A)"),
            ("--tracked", "stage modifications to tracked files only (git add -u)"),
        ),
    ),
    "unstage": Explanation(
        "Remove files from the staging area, keeping your edits in the working tree.",
        "git restore --staged <paths> (default: .)",
        (
            ("PATH...", "unstage only these paths"),
            ("--all", "unstage everything"),
        ),
    ),
    "commit": Explanation(
        "Record the staged changes as a new commit.",
        "git commit -m <message>",
        (
            ("-m MSG", "commit message (prompted for when omitted)"),
            ("--staged", "commit only what is already staged (the default)"),
            ("--all", "stage everything first, including untracked files"),
            ("--unstaged", "stage modified tracked files first, not untracked ones"),
            ("--push", "run a plain `git push` afterwards, using Git's defaults"),
            ("--amend", "rewrite the last commit instead of creating a new one; asks first"),
            ("--no-verify", "skip commit hooks and the amend confirmation"),
        ),
    ),
    "status": Explanation(
        "Show what is staged, what is modified and what is untracked.",
        "git status",
        (("--short", "compact form with branch summary (git status -sb)"),),
    ),
    "log": Explanation(
        "Show recent commit history.",
        "git log --decorate -n 40",
        (("--short", "one line per commit (git log --oneline --decorate -n 20)"),),
    ),
    "diff": Explanation(
        "Compare your working tree against the staging area.",
        "git diff",
        (
            ("PATH", "restrict the diff to one path"),
            ("--staged", "show what will be committed instead (git diff --staged)"),
        ),
    ),
    "branch": Explanation(
        "List local branches, switch to one, or create one.",
        "git branch",
        (
            ("-c, --create NAME", "create a branch and switch to it"),
            ("-s, --switch NAME", "check out an existing branch"),
        ),
    ),
    "push": Explanation(
        "Send your commits to the remote repository.",
        "git push [remote] [branch]",
        (
            ("REMOTE", "remote to push to; omitted means Git's configured upstream"),
            ("BRANCH", "branch to push; never filled in for you"),
        ),
    ),
    "pull": Explanation(
        "Fetch and merge changes from the remote repository.",
        "git pull [remote] [branch]",
        (
            ("REMOTE", "remote to pull from; omitted means Git's configured upstream"),
            ("BRANCH", "branch to pull; never filled in for you"),
        ),
    ),
    "reset": Explanation(
        "Discard changes. Asks for confirmation because the work is lost.",
        "git reset / git restore / git clean",
        (
            ("--all", "discard everything, including untracked files"),
            ("--staged", "unstage everything, keeping edits"),
            ("--unstaged", "discard unstaged edits to tracked files"),
            ("--tracked", "reset tracked files to the last commit"),
            ("--untracked", "delete untracked files and directories"),
            ("--yes", "do not ask for confirmation"),
        ),
    ),
    "sync": Explanation(
        "Fetch, pull and push in one go. A failed fetch or pull is reported and sync carries on, "
        "unless the remote is unreachable or the pull left conflicts.",
        "git fetch, git pull, git push",
        (
            ("REMOTE", "remote to sync with; omitted means Git's defaults"),
            ("BRANCH", "branch to sync"),
        ),
    ),
}


def _render(console: Console, name: str) -> None:
    entry = EXPLANATIONS[name]
    console.print(f"[bold cyan]{name}[/bold cyan] - {escape(entry.summary)}")
    console.print(f"  [dim]runs:[/dim] {escape(entry.runs)}", highlight=False)
    if entry.options:
        table = Table(show_header=False, box=None, padding=(0, 2, 0, 4))
        table.add_column("Option", style="green", no_wrap=True)
        table.add_column("Effect")
        for option, effect in entry.options:
            table.add_row(escape(option), escape(effect))
        console.print(table)


def explain(
    command: Union[str, SimplifiedCommand, None] = None,
    console: Optional[Console] = None,
) -> None:
    """Print guidance for one verb, or for every verb in canonical order.

    Args:
        command: Verb name or command instance; None explains everything
        console: Rich console to print to

    Raises:
        UsageError: If `command` names a verb sgit does not have
    """
    console = console or Console()

    if command is None:
        console.print("[bold]sgit simplifies Git by wrapping each major workflow:[/bold]")
        console.print()
        for name in COMMAND_NAMES:
            _render(console, name)
        return

    name = command if isinstance(command, str) else command_name(command)
    if name not in EXPLANATIONS:
        raise UsageError(f"unknown command '{name}'; choose one of: {', '.join(COMMAND_NAMES)}")
    _render(console, name)
