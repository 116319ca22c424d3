# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/core/hints.py

"""Map common git failure messages to a one-line suggestion."""

from typing import Optional, Sequence

NOT_IN_REPO_HINT = "not in a git repository - run 'sgit init' or cd into a repo first"
NO_STAGED_HINT = "nothing to commit - use 'sgit stage' to stage changes first"

# (subcommand or None for any, stderr fragments, hint)
_RULES: tuple[tuple[Optional[tuple[str, ...]], tuple[str, ...], str], ...] = (
    (None, ("not a git repository",), NOT_IN_REPO_HINT),
    (("commit",), ("nothing to commit", "no changes added to commit", "nothing added to commit"), NO_STAGED_HINT),
    (("push",), ("no upstream branch",),
     "set upstream with 'git push -u origin <branch>' or use 'sgit push' from a tracked branch"),
    (("push",), ("rejected",), "remote has new commits - try 'sgit pull' first, then push again"),
    (("push", "pull", "fetch"), ("could not resolve host", "network"), "check your network connection"),
    (("pull",), ("there is no tracking information",),
     "branch has no upstream - try 'git branch --set-upstream-to=origin/<branch>'"),
    (("pull",), ("conflict",), "resolve merge conflicts, then commit the resolution"),
    (("checkout", "switch"), ("would be overwritten",), "commit or stash your changes before switching branches"),
    (("checkout", "switch"), ("did not match",),
     "branch name may be misspelled - check 'sgit branch' for available branches"),
    (("branch",), ("already exists",), "branch name already in use, choose a different name"),
    (None, ("permission denied",), "check file permissions or run with appropriate privileges"),
)


def hint_for(args: Sequence[str], stderr: str) -> Optional[str]:
    """Return a hint for a failed git call, or None if nothing applies.

    Args:
        args: git arguments; the first one is the subcommand
        stderr: Captured standard error of the failed call
    """
    if not stderr:
        return None
    lowered = stderr.lower()
    subcommand = args[0] if args else ""

    for subcommands, fragments, hint in _RULES:
        if subcommands is not None and subcommand not in subcommands:
            continue
        if any(fragment in lowered for fragment in fragments):
            return hint
    return None
