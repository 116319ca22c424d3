# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/core/translator.py

"""
Command translator.

Lowers a SimplifiedCommand into the ordered git invocations that carry it
out. Pure: nothing here spawns processes or inspects the repository.
Values the user typed (paths, remotes, branch names) are passed through
verbatim; git is the one that decides whether they make sense.
"""

from typing import Optional

from sgit.config.manager import UserConfig
from sgit.core.commands import (
    CURRENT_DIR,
    Branch,
    Commit,
    Diff,
    Init,
    Log,
    Pull,
    Push,
    Reset,
    ResetScope,
    SimplifiedCommand,
    Stage,
    StagingMode,
    Status,
    Sync,
    Unstage,
)
from sgit.core.flags import resolve_staging
from sgit.core.plan import Invocation, InvocationPlan
from sgit.system.exceptions import UsageError
from sgit.system.execution import InvocationResult


class _Builder:
    """Small helper that stamps the git executable onto each step."""

    def __init__(self, program: str):
        self.program = program

    def view(self, *args: str, label: str = "") -> Invocation:
        # Read-only output goes straight to the terminal
        return Invocation(self.program, tuple(args), capture=False, label=label)

    def action(self, *args: str, label: str = "", allow_failure=None) -> Invocation:
        return Invocation(self.program, tuple(args), capture=True, label=label, allow_failure=allow_failure)


def _output_mentions(result: InvocationResult, *fragments: str) -> bool:
    # git reports merge conflicts on stdout
    lowered = f"{result.stdout}\n{result.stderr}".lower()
    return any(fragment in lowered for fragment in fragments)


def fetch_failure_tolerated(result: InvocationResult) -> bool:
    """Sync carries on with local state unless the remote is unreachable."""
    return not _output_mentions(result, "could not resolve host", "network")


def pull_failure_tolerated(result: InvocationResult) -> bool:
    """Sync still tries to push unless the pull left conflicts or has no upstream."""
    return not _output_mentions(result, "conflict", "no tracking information")


def remote_tokens(remote: Optional[str], branch: Optional[str]) -> tuple[str, ...]:
    """Exactly the remote/branch tokens the user supplied, in order."""
    return tuple(token for token in (remote, branch) if token is not None)


def staging_steps(mode: StagingMode, git: _Builder) -> list[Invocation]:
    if mode is StagingMode.ALL_INCLUDING_UNTRACKED:
        return [git.action("add", "-A", label="Staging all files")]
    if mode is StagingMode.UNSTAGED_TRACKED:
        return [git.action("add", "-u", label="Staging tracked files")]
    return []


def _translate_commit(command: Commit, git: _Builder) -> list[Invocation]:
    if not command.message or not command.message.strip():
        raise UsageError("commit message cannot be empty", flags=("-m",))

    mode = resolve_staging(command.flags)
    steps = staging_steps(mode, git)

    commit_args = ["commit"]
    if command.flags.amend:
        commit_args.append("--amend")
    if command.flags.no_verify:
        commit_args.append("--no-verify")
    commit_args.extend(["-m", command.message])
    steps.append(git.action(*commit_args, label="Committing (amend)" if command.flags.amend else "Committing"))

    if command.flags.push:
        # Plain push: git's configured upstream and push.default apply
        steps.append(git.action("push", label="Pushing"))
    return steps


def _branch_name(name: str, flag: str) -> str:
    name = name.strip()
    if not name:
        raise UsageError("branch name cannot be empty", flags=(flag,))
    if any(ch.isspace() for ch in name):
        raise UsageError("branch name cannot contain whitespace", flags=(flag,))
    return name


def _translate_branch(command: Branch, git: _Builder) -> list[Invocation]:
    if command.create is not None and command.switch is not None:
        raise UsageError("create a branch or switch to one, not both", flags=("--create", "--switch"))
    if command.switch is not None:
        name = _branch_name(command.switch, "--switch")
        return [git.action("checkout", name, label=f"Switching to {name}")]
    if command.create is None:
        return [git.view("branch")]

    name = _branch_name(command.create, "--create")
    return [
        git.action("branch", name, label=f"Creating branch {name}"),
        git.action("checkout", name, label=f"Switching to {name}"),
    ]


def _translate_reset(command: Reset, git: _Builder) -> list[Invocation]:
    scope = command.scope
    if scope is ResetScope.ALL:
        return [
            git.action("reset", "--hard", label="Resetting tracked files"),
            git.action("clean", "-fd", label="Removing untracked files"),
        ]
    if scope is ResetScope.STAGED:
        return [git.action("restore", "--staged", CURRENT_DIR, label="Unstaging all files")]
    if scope is ResetScope.UNSTAGED:
        return [git.action("restore", CURRENT_DIR, label="Discarding unstaged changes")]
    if scope is ResetScope.TRACKED:
        return [git.action("reset", "--hard", label="Resetting tracked files")]
    if scope is ResetScope.UNTRACKED:
        return [git.action("clean", "-fd", label="Removing untracked files")]
    if scope is None:
        raise UsageError("choose what to reset: --all, --staged, --unstaged, --tracked or --untracked")
    raise ValueError(f"Unknown reset scope: {scope!r}")


def _describe_remote(verb: str, preposition: str, remote: Optional[str], branch: Optional[str]) -> str:
    tokens = remote_tokens(remote, branch)
    return f"{verb} {preposition} {'/'.join(tokens)}" if tokens else verb


def translate(command: SimplifiedCommand, settings: Optional[UserConfig] = None) -> InvocationPlan:
    """Build the invocation plan for one simplified command.

    Args:
        command: The parsed or interactively chosen command
        settings: User configuration; defaults apply when omitted

    Returns:
        InvocationPlan with at least one step

    Raises:
        UsageError: For contradictory commit flags, an empty commit message,
            an invalid branch name or a reset without a scope
    """
    settings = settings or UserConfig()
    git = _Builder(settings.git_executable)

    if isinstance(command, Init):
        steps = [git.action("init", label="Initializing repository")]
    elif isinstance(command, Stage):
        if command.all:
            steps = [git.action("add", "-A", label="Staging all files")]
        elif command.tracked:
            steps = [git.action("add", "-u", label="Staging tracked files")]
        else:
            steps = [git.action("add", *command.paths, label="Staging files")]
    elif isinstance(command, Unstage):
        paths = (CURRENT_DIR,) if command.all else command.paths
        steps = [git.action("restore", "--staged", *paths, label="Unstaging files")]
    elif isinstance(command, Commit):
        steps = _translate_commit(command, git)
    elif isinstance(command, Status):
        steps = [git.view("status", "-sb") if command.short else git.view("status")]
    elif isinstance(command, Log):
        if command.short:
            steps = [git.view("log", "--oneline", "--decorate", "-n", str(settings.log_short_limit))]
        else:
            steps = [git.view("log", "--decorate", "-n", str(settings.log_full_limit))]
    elif isinstance(command, Diff):
        args = ["diff"]
        if command.staged:
            args.append("--staged")
        if command.path is not None:
            args.extend(["--", command.path])
        steps = [git.view(*args)]
    elif isinstance(command, Branch):
        steps = _translate_branch(command, git)
    elif isinstance(command, Push):
        steps = [git.action(
            "push", *remote_tokens(command.remote, command.branch),
            label=_describe_remote("Pushing", "to", command.remote, command.branch),
        )]
    elif isinstance(command, Pull):
        steps = [git.action(
            "pull", *remote_tokens(command.remote, command.branch),
            label=_describe_remote("Pulling", "from", command.remote, command.branch),
        )]
    elif isinstance(command, Reset):
        steps = _translate_reset(command, git)
    elif isinstance(command, Sync):
        tokens = remote_tokens(command.remote, command.branch)
        fetch_args = ("fetch", command.remote) if command.remote is not None else ("fetch",)
        steps = [
            git.action(
                *fetch_args,
                label=_describe_remote("Fetching", "from", command.remote, None),
                allow_failure=fetch_failure_tolerated,
            ),
            git.action("pull", *tokens, label="Pulling changes", allow_failure=pull_failure_tolerated),
            git.action("push", *tokens, label="Pushing changes"),
        ]
    else:
        raise TypeError(f"Not a simplified command: {command!r}")

    return InvocationPlan(tuple(steps))
