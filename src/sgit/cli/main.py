# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/cli/main.py

"""
sgit command line dispatcher.

Each verb builds a SimplifiedCommand from its flags and hands it to
`_execute`, which translates it into an invocation plan and runs it.
Running sgit with no verb goes through the interactive workflow menu
instead and ends up in the same place.
"""

# Standard library imports
from dataclasses import dataclass, replace
from importlib.metadata import PackageNotFoundError, version
from typing import Callable, List, Optional

# Third-party imports
import typer
from loguru import logger
from rich.console import Console

# Local sgit imports
from sgit.cli.interactive import TyperPrompter, select_reset_scope, select_workflow
from sgit.cli.utils import (
    echo_captured,
    ensure_repository,
    handle_sgit_error,
    has_commits,
    list_branches,
    print_step,
)
from sgit.config.manager import UserConfig, load_user_config
from sgit.core.commands import (
    Branch,
    Commit,
    CommitFlags,
    Diff,
    Init,
    Log,
    Pull,
    Push,
    Reset,
    SimplifiedCommand,
    Stage,
    Status,
    Sync,
    Unstage,
    command_name,
)
from sgit.core.explain import explain as explain_commands
from sgit.core.flags import resolve_reset_scope, resolve_staging
from sgit.core.plan import run_plan
from sgit.core.translator import translate
from sgit.system.exceptions import AbortedError, SgitError
from sgit.system.execution import CommandExecutor
from sgit.system.logging_setup import setup_logging

app = typer.Typer(
    help="""sgit - Git with simplified workflows

[bold blue]Setup:[/bold blue] init, branch
[bold green]Changes:[/bold green] stage, unstage, commit, reset
[bold magenta]Inspect:[/bold magenta] status, log, diff
[bold red]Remote:[/bold red] push, pull, sync

Run without a command to pick a workflow interactively.
""",
    rich_markup_mode="rich",
    invoke_without_command=True,
    no_args_is_help=False,
)

console = Console()
err_console = Console(stderr=True)


@dataclass
class CliState:
    settings: UserConfig
    executor: CommandExecutor


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            pkg_version = version("sgit")
        except PackageNotFoundError:
            pkg_version = "unknown"
        console.print(f"sgit version {pkg_version}")
        raise typer.Exit()


def explain_option():
    return typer.Option(False, "--explain", hidden=True, help="Explain this command instead of running it")


def _explain_verb(verb: str) -> None:
    """Handle `sgit <verb> --explain`: describe the verb and exit without running git."""
    explain_commands(verb, console=console)
    raise typer.Exit()


def _execute(
    ctx: typer.Context,
    build: Callable[[], SimplifiedCommand],
    complete: Optional[Callable[[SimplifiedCommand], SimplifiedCommand]] = None,
    needs_repository: bool = True,
) -> None:
    """Build a command, translate it, and run the resulting plan.

    `build` turns flags into a command without asking anything. When the
    command needs answers from the user, `complete` asks for them after the
    repository check has passed.
    """
    state: CliState = ctx.obj
    try:
        command = build()
        if complete is None:
            plan = translate(command, state.settings)

        if needs_repository and not isinstance(command, Init):
            ensure_repository(state.executor, state.settings)

        if complete is not None:
            command = complete(command)
            plan = translate(command, state.settings)
        logger.debug(f"{command_name(command)}: {len(plan)} step(s)")

        run_plan(plan, state.executor, on_step=print_step(console), on_result=echo_captured)
    except SgitError as e:
        handle_sgit_error(err_console, e, show_hints=state.settings.show_hints)
    else:
        if any(step.capture for step in plan):
            console.print("[green]✓[/green] Done.")


@app.callback()
def main_callback(
    ctx: typer.Context,
    explain: bool = typer.Option(
        False, "--explain",
        help="Explain what a command does instead of running it"
    ),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """sgit - Git with simplified workflows."""
    settings: Optional[UserConfig] = None
    config_error: Optional[SgitError] = None
    try:
        settings = load_user_config()
    except SgitError as e:
        config_error = e
    setup_logging(debug=debug, local_log=settings.local_log if settings else None)

    if explain:
        try:
            explain_commands(ctx.invoked_subcommand, console=console)
        except SgitError as e:
            handle_sgit_error(err_console, e)
        raise typer.Exit()

    if config_error is not None:
        handle_sgit_error(err_console, config_error)
    executor = CommandExecutor()
    ctx.obj = CliState(settings=settings, executor=executor)

    if ctx.invoked_subcommand is None:
        def require_repository(verb: str) -> None:
            if verb != "init":
                ensure_repository(executor, settings)

        _execute(
            ctx,
            lambda: select_workflow(
                TyperPrompter(console),
                on_verb=require_repository,
                branches=lambda: list_branches(executor, settings),
            ),
            needs_repository=False,
        )


# =============================================================================
# SETUP COMMANDS
# =============================================================================

@app.command()
def init(ctx: typer.Context, explain: bool = explain_option()) -> None:
    """[bold blue]Setup[/bold blue]: Initialize a Git repository here."""
    if explain:
        _explain_verb("init")
    _execute(ctx, Init)


@app.command()
def branch(
    ctx: typer.Context,
    create: Optional[str] = typer.Option(None, "--create", "-c", help="Create a branch and switch to it"),
    switch: Optional[str] = typer.Option(None, "--switch", "-s", help="Check out an existing branch"),
    explain: bool = explain_option(),
) -> None:
    """[bold blue]Setup[/bold blue]: List local branches, switch to one, or create one."""
    if explain:
        _explain_verb("branch")
    _execute(ctx, lambda: Branch(create=create, switch=switch))


# =============================================================================
# CHANGE COMMANDS
# =============================================================================

@app.command()
def stage(
    ctx: typer.Context,
    paths: Optional[List[str]] = typer.Argument(None, help="Paths to stage (default: current directory)"),
    all_: bool = typer.Option(False, "--all", help="Stage everything, including untracked files"),
    tracked: bool = typer.Option(False, "--tracked", help="Stage modified tracked files only"),
    explain: bool = explain_option(),
) -> None:
    """[bold green]Changes[/bold green]: Add files to the staging area."""
    if explain:
        _explain_verb("stage")
    _execute(ctx, lambda: Stage(paths=tuple(paths or ()), all=all_, tracked=tracked))


@app.command()
def unstage(
    ctx: typer.Context,
    paths: Optional[List[str]] = typer.Argument(None, help="Paths to unstage (default: current directory)"),
    all_: bool = typer.Option(False, "--all", help="Unstage everything"),
    explain: bool = explain_option(),
) -> None:
    """[bold green]Changes[/bold green]: Remove files from the staging area, keeping edits."""
    if explain:
        _explain_verb("unstage")
    _execute(ctx, lambda: Unstage(paths=tuple(paths or ()), all=all_))


@app.command()
def commit(
    ctx: typer.Context,
    message: Optional[str] = typer.Option(None, "--message", "-m", help="Commit message"),
    all_: bool = typer.Option(False, "--all", help="Stage everything first, including untracked files"),
    staged: bool = typer.Option(False, "--staged", help="Commit only what is already staged (default)"),
    unstaged: bool = typer.Option(False, "--unstaged", help="Stage modified tracked files first"),
    push: bool = typer.Option(False, "--push", help="Push after committing"),
    amend: bool = typer.Option(False, "--amend", help="Rewrite the last commit"),
    no_verify: bool = typer.Option(False, "--no-verify", help="Skip commit hooks and the amend confirmation"),
    explain: bool = explain_option(),
) -> None:
    """[bold green]Changes[/bold green]: Record staged changes as a commit."""
    if explain:
        _explain_verb("commit")
    state: CliState = ctx.obj
    flags = CommitFlags(
        all=all_, staged=staged, unstaged=unstaged,
        push=push, amend=amend, no_verify=no_verify,
    )

    def build() -> Commit:
        resolve_staging(flags)
        command = Commit(message=message or "", flags=flags)
        if message is not None:
            translate(command, state.settings)
        return command

    def complete(command: Commit) -> Commit:
        prompter = TyperPrompter(console)
        if amend and not no_verify and has_commits(state.executor, state.settings):
            err_console.print("[yellow]⚠[/yellow] Warning: amending a commit that may have been pushed can cause issues.")
            err_console.print("  Use --no-verify to skip this check if you're sure.")
            if not prompter.confirm("Continue with amend?", default=False):
                raise AbortedError()
        if message is None:
            command = replace(command, message=prompter.text("Commit message"))
        return command

    _execute(ctx, build, complete)


@app.command()
def reset(
    ctx: typer.Context,
    all_: bool = typer.Option(False, "--all", help="Discard everything, including untracked files"),
    staged: bool = typer.Option(False, "--staged", help="Unstage everything, keeping edits"),
    unstaged: bool = typer.Option(False, "--unstaged", help="Discard unstaged edits to tracked files"),
    tracked: bool = typer.Option(False, "--tracked", help="Reset tracked files to the last commit"),
    untracked: bool = typer.Option(False, "--untracked", help="Delete untracked files"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    explain: bool = explain_option(),
) -> None:
    """[bold green]Changes[/bold green]: Discard changes."""
    if explain:
        _explain_verb("reset")

    def build() -> Reset:
        return Reset(scope=resolve_reset_scope(all_, staged, unstaged, tracked, untracked))

    def complete(command: Reset) -> Reset:
        prompter = TyperPrompter(console)
        scope = command.scope or select_reset_scope(prompter)
        if not yes and not prompter.confirm(f"Reset {scope.value} changes? This cannot be undone", default=False):
            raise AbortedError()
        return Reset(scope=scope)

    _execute(ctx, build, complete)


# =============================================================================
# INSPECT COMMANDS
# =============================================================================

@app.command()
def status(
    ctx: typer.Context,
    short: bool = typer.Option(False, "--short", help="Compact form with branch summary"),
    explain: bool = explain_option(),
) -> None:
    """[bold magenta]Inspect[/bold magenta]: Show staged, modified and untracked files."""
    if explain:
        _explain_verb("status")
    _execute(ctx, lambda: Status(short=short))


@app.command()
def log(
    ctx: typer.Context,
    short: bool = typer.Option(False, "--short", help="One line per commit"),
    explain: bool = explain_option(),
) -> None:
    """[bold magenta]Inspect[/bold magenta]: Show recent history."""
    if explain:
        _explain_verb("log")
    _execute(ctx, lambda: Log(short=short))


@app.command()
def diff(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="Restrict the diff to this path"),
    staged: bool = typer.Option(False, "--staged", help="Show what will be committed"),
    explain: bool = explain_option(),
) -> None:
    """[bold magenta]Inspect[/bold magenta]: Show changes."""
    if explain:
        _explain_verb("diff")
    _execute(ctx, lambda: Diff(path=path, staged=staged))


# =============================================================================
# REMOTE COMMANDS
# =============================================================================

@app.command()
def push(
    ctx: typer.Context,
    remote: Optional[str] = typer.Argument(None, help="Remote name (default: Git's configured upstream)"),
    branch: Optional[str] = typer.Argument(None, help="Branch name"),
    explain: bool = explain_option(),
) -> None:
    """[bold red]Remote[/bold red]: Send commits to the remote."""
    if explain:
        _explain_verb("push")
    _execute(ctx, lambda: Push(remote=remote, branch=branch))


@app.command()
def pull(
    ctx: typer.Context,
    remote: Optional[str] = typer.Argument(None, help="Remote name (default: Git's configured upstream)"),
    branch: Optional[str] = typer.Argument(None, help="Branch name"),
    explain: bool = explain_option(),
) -> None:
    """[bold red]Remote[/bold red]: Fetch and merge from the remote."""
    if explain:
        _explain_verb("pull")
    _execute(ctx, lambda: Pull(remote=remote, branch=branch))


@app.command()
def sync(
    ctx: typer.Context,
    remote: Optional[str] = typer.Argument(None, help="Remote name (default: Git's configured upstream)"),
    branch: Optional[str] = typer.Argument(None, help="Branch name"),
    explain: bool = explain_option(),
) -> None:
    """[bold red]Remote[/bold red]: Fetch, pull and push; a failed fetch or pull does not always stop it."""
    if explain:
        _explain_verb("sync")
    _execute(ctx, lambda: Sync(remote=remote, branch=branch))


# =============================================================================
# ENTRY POINT
# =============================================================================

def main() -> None:  # pragma: no cover - entry point
    """Entry point for the sgit CLI application."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
