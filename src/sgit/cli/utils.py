# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/cli/utils.py

"""
CLI utility functions shared by every sgit command.

This module provides:
- The repository precondition check run before most verbs
- Progress and output callbacks for plan execution
- Error reporting that turns sgit exceptions into typer exits

All functions handle console output and typer exits consistently.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
import typer

from sgit.config.manager import UserConfig
from sgit.core.hints import NOT_IN_REPO_HINT, hint_for
from sgit.core.plan import Executor, Invocation
from sgit.system.exceptions import (
    AbortedError,
    ConfigError,
    ExecutionError,
    NotARepositoryError,
    SgitError,
    UsageError,
)
from sgit.system.execution import InvocationResult

EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_NOT_FOUND = 127

REPO_CHECK_ARGS = ("rev-parse", "--git-dir")
BRANCH_LIST_ARGS = ("branch", "--format=%(HEAD) %(refname:short)")
LAST_COMMIT_ARGS = ("log", "--oneline", "-n", "1")


def ensure_repository(executor: Executor, settings: UserConfig) -> None:
    """Check that the current directory is inside a git work tree.

    Raises:
        NotARepositoryError: If git says it is not
        ExecutionError: If git cannot be started at all
    """
    result = executor.execute(settings.git_executable, REPO_CHECK_ARGS, capture=True, check=False)
    if not result.success:
        raise NotARepositoryError(
            settings.git_executable,
            REPO_CHECK_ARGS,
            returncode=result.returncode,
            stderr=result.stderr,
            hint=NOT_IN_REPO_HINT,
        )


def list_branches(executor: Executor, settings: UserConfig) -> tuple[list[str], Optional[str]]:
    """Return local branch names and the checked-out one (None when detached)."""
    result = executor.execute(settings.git_executable, BRANCH_LIST_ARGS, capture=True)
    names, current = [], None
    for line in result.stdout.splitlines():
        marker, _, name = line.partition(" ")
        name = name.strip()
        if not name or name.startswith("("):
            # "(HEAD detached at ...)" is not a branch
            continue
        names.append(name)
        if marker == "*":
            current = name
    return names, current


def has_commits(executor: Executor, settings: UserConfig) -> bool:
    result = executor.execute(settings.git_executable, LAST_COMMIT_ARGS, capture=True, check=False)
    return result.success and bool(result.stdout.strip())


def print_step(console: Console):
    """Build an on_step callback that announces labelled plan steps."""
    def _on_step(index: int, step: Invocation) -> None:
        if step.label:
            console.print(f"[dim]→ {escape(step.label)}...[/dim]")
    return _on_step


def echo_captured(step: Invocation, result: InvocationResult) -> None:
    """Pass captured git output through once a step has succeeded."""
    if step.capture and result.stdout.strip():
        typer.echo(result.stdout, nl=not result.stdout.endswith("\n"))


def exit_code_for(error: SgitError) -> int:
    """Map an sgit error to the process exit status."""
    if isinstance(error, AbortedError):
        return 0
    if isinstance(error, UsageError):
        return EXIT_USAGE
    if isinstance(error, ExecutionError):
        if error.returncode is None:
            return EXIT_NOT_FOUND
        if error.returncode < 0:
            # Killed by a signal
            return 128 - error.returncode
        return error.returncode or EXIT_FAILURE
    return EXIT_FAILURE


def handle_sgit_error(console: Console, error: SgitError, show_hints: bool = True) -> None:
    """Report an sgit error with consistent formatting and exit.

    Raises:
        typer.Exit: Always; status 0 for a user cancellation
    """
    if isinstance(error, AbortedError):
        console.print(f"[dim]{escape(str(error))}[/dim]")
    elif isinstance(error, UsageError):
        console.print(f"[red]✗[/red] Usage error: {escape(str(error))}")
    elif isinstance(error, ConfigError):
        console.print(f"[red]✗[/red] Configuration error: {escape(str(error))}")
    elif isinstance(error, ExecutionError):
        console.print(f"[red]✗[/red] {escape(str(error))}", highlight=False)
        detail = error.stderr.strip()
        if detail:
            console.print(f"  {escape(detail)}", highlight=False)
        hint = error.hint
        if hint is None and show_hints:
            hint = hint_for(error.args_list, error.stderr)
        if hint and show_hints:
            console.print(f"  [yellow]hint:[/yellow] {escape(hint)}")
    else:
        console.print(f"[red]✗[/red] {escape(str(error))}")
    raise typer.Exit(exit_code_for(error))
