# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/cli/interactive.py

"""
Interactive workflow selection, used when sgit is run without a verb.

The menu asks once, gathers whatever the chosen verb needs, and returns a
single SimplifiedCommand for the translator. Prompt rendering lives behind
the Prompter interface so the selection logic can be driven by tests.
"""

import shlex
from typing import Callable, Optional, Protocol, Sequence

import click
import typer
from rich.console import Console

from sgit.core.commands import (
    Branch,
    Commit,
    CommitFlags,
    Diff,
    Init,
    Log,
    Pull,
    Push,
    ResetScope,
    SimplifiedCommand,
    Stage,
    Status,
    Unstage,
)
from sgit.system.exceptions import AbortedError, UsageError


class Prompter(Protocol):
    def choose(self, message: str, options: Sequence[str]) -> int: ...

    def text(self, message: str, default: Optional[str] = None) -> str: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...


class TyperPrompter:
    """Prompter backed by rich for the menu and typer for input."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def choose(self, message: str, options: Sequence[str]) -> int:
        self.console.print(f"[bold]{message}[/bold]")
        for number, option in enumerate(options, start=1):
            self.console.print(f"  [cyan]{number}[/cyan]) {option}")
        try:
            picked = typer.prompt("Select", type=click.IntRange(1, len(options)), default=1)
        except typer.Abort as e:
            raise AbortedError() from e
        return picked - 1

    def text(self, message: str, default: Optional[str] = None) -> str:
        try:
            if default is None:
                return typer.prompt(message)
            return typer.prompt(message, default=default, show_default=bool(default))
        except typer.Abort as e:
            raise AbortedError() from e

    def confirm(self, message: str, default: bool = False) -> bool:
        try:
            return typer.confirm(message, default=default)
        except typer.Abort as e:
            raise AbortedError() from e


WORKFLOWS: tuple[tuple[str, str], ...] = (
    ("init", "Initialize a repository"),
    ("stage", "Stage changes"),
    ("unstage", "Unstage changes"),
    ("commit", "Commit changes"),
    ("status", "Show status"),
    ("log", "Show history"),
    ("diff", "Show differences"),
    ("branch", "Switch or create branches"),
    ("push", "Push to remote"),
    ("pull", "Pull from remote"),
)

COMMIT_SCOPES: tuple[tuple[str, CommitFlags], ...] = (
    ("Staged changes", CommitFlags(staged=True)),
    ("Tracked modifications (not untracked files)", CommitFlags(unstaged=True)),
    ("All changes, including untracked files", CommitFlags(all=True)),
)

RESET_SCOPES: tuple[tuple[str, ResetScope], ...] = (
    ("All files (tracked and untracked)", ResetScope.ALL),
    ("Staged files only", ResetScope.STAGED),
    ("Unstaged changes only", ResetScope.UNSTAGED),
    ("Tracked files only", ResetScope.TRACKED),
    ("Untracked files only", ResetScope.UNTRACKED),
)


def _optional(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


def _ask_paths(prompter: Prompter, verb: str) -> tuple[str, ...]:
    if prompter.confirm(f"{verb} everything in the current directory?", default=True):
        return ()
    return tuple(shlex.split(prompter.text(f"Paths to {verb.lower()} (space-separated)", default="")))


def _ask_commit(prompter: Prompter) -> Commit:
    scope = prompter.choose("What would you like to commit?", [label for label, _ in COMMIT_SCOPES])
    flags = COMMIT_SCOPES[scope][1]

    message = prompter.text("Commit message")
    if not message.strip():
        raise UsageError("commit message cannot be empty", flags=("-m",))

    push = prompter.confirm("Push after committing?", default=False)
    return Commit(
        message=message,
        flags=CommitFlags(all=flags.all, staged=flags.staged, unstaged=flags.unstaged, push=push),
    )


def _ask_branch(prompter: Prompter, branches) -> Branch:
    names, current = branches() if branches is not None else ([], None)
    options = [f"{name} (current)" if name == current else name for name in names]
    picked = prompter.choose("Select a branch to checkout", options + ["Create new branch..."])

    if picked == len(names):
        # Spaces become dashes
        name = prompter.text("New branch name").strip().replace(" ", "-")
        return Branch(create=name)
    if names[picked] == current:
        raise AbortedError(f"Already on branch '{current}'.")
    return Branch(switch=names[picked])


def select_reset_scope(prompter: Optional[Prompter] = None) -> ResetScope:
    """Ask which kind of reset to perform."""
    prompter = prompter or TyperPrompter()
    picked = prompter.choose("What would you like to reset?", [label for label, _ in RESET_SCOPES])
    return RESET_SCOPES[picked][1]


def select_workflow(
    prompter: Optional[Prompter] = None,
    on_verb: Optional[Callable[[str], None]] = None,
    branches: Optional[Callable[[], tuple[list[str], Optional[str]]]] = None,
) -> SimplifiedCommand:
    """Present the workflow menu and build the chosen command.

    Args:
        prompter: Where questions go; a TyperPrompter by default
        on_verb: Called with the chosen verb before any follow-up question
        branches: Returns (local branch names, current branch) for the
            branch workflow

    Raises:
        AbortedError: If the user cancels any prompt, or picks the branch
            that is already checked out
        UsageError: If the user enters an empty commit message
    """
    prompter = prompter or TyperPrompter()
    picked = prompter.choose("What would you like to do?", [label for _, label in WORKFLOWS])
    verb = WORKFLOWS[picked][0]
    if on_verb is not None:
        on_verb(verb)

    if verb == "init":
        return Init()
    if verb == "stage":
        return Stage(paths=_ask_paths(prompter, "Stage"))
    if verb == "unstage":
        return Unstage(paths=_ask_paths(prompter, "Unstage"))
    if verb == "commit":
        return _ask_commit(prompter)
    if verb == "status":
        return Status(short=prompter.confirm("Use the compact form?", default=False))
    if verb == "log":
        return Log(short=prompter.confirm("One line per commit?", default=False))
    if verb == "diff":
        staged = prompter.confirm("Show staged changes instead of the working tree?", default=False)
        path = _optional(prompter.text("Restrict to a path (blank for everything)", default=""))
        return Diff(path=path, staged=staged)
    if verb == "branch":
        return _ask_branch(prompter, branches)
    if verb in ("push", "pull"):
        remote = _optional(prompter.text("Remote (blank for Git's default)", default=""))
        branch = _optional(prompter.text("Branch (blank for Git's default)", default=""))
        return Push(remote, branch) if verb == "push" else Pull(remote, branch)

    raise ValueError(f"Unhandled workflow: {verb}")
