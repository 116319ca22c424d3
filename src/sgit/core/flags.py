# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/core/flags.py

"""Flag resolution: turn user-facing flag combinations into a single mode."""

from typing import Optional

from sgit.core.commands import CommitFlags, ResetScope, StagingMode
from sgit.system.exceptions import UsageError


def resolve_staging(flags: CommitFlags) -> StagingMode:
    """Decide what a commit stages before recording.

    Args:
        flags: Commit flags as given by the user

    Returns:
        STAGED_ONLY when neither --all nor --unstaged is set,
        ALL_INCLUDING_UNTRACKED for --all, UNSTAGED_TRACKED for --unstaged

    Raises:
        UsageError: If --all and --unstaged are combined, or --staged is
            combined with either of them
    """
    if flags.all and flags.unstaged:
        raise UsageError("--all and --unstaged cannot be used together", flags=("--all", "--unstaged"))
    if flags.staged and (flags.all or flags.unstaged):
        other = "--all" if flags.all else "--unstaged"
        raise UsageError(f"--staged cannot be combined with {other}", flags=("--staged", other))

    if flags.all:
        return StagingMode.ALL_INCLUDING_UNTRACKED
    if flags.unstaged:
        return StagingMode.UNSTAGED_TRACKED
    return StagingMode.STAGED_ONLY


def resolve_reset_scope(
    all: bool = False,
    staged: bool = False,
    unstaged: bool = False,
    tracked: bool = False,
    untracked: bool = False,
) -> Optional[ResetScope]:
    """Pick the reset scope from its flags; None means none was given."""
    selected = [
        (flag, scope) for flag, scope in (
            (all, ResetScope.ALL),
            (staged, ResetScope.STAGED),
            (unstaged, ResetScope.UNSTAGED),
            (tracked, ResetScope.TRACKED),
            (untracked, ResetScope.UNTRACKED),
        ) if flag
    ]
    if len(selected) > 1:
        names = [f"--{scope.value}" for _, scope in selected]
        raise UsageError(f"only one reset scope may be given, got {' '.join(names)}", flags=names)
    return selected[0][1] if selected else None
