# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/core/commands.py

"""
Simplified command model.

Each verb sgit understands is a frozen dataclass carrying its own payload.
`SimplifiedCommand` is the union of them; consumers dispatch with
isinstance checks rather than through methods on the classes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

CURRENT_DIR = "."


class StagingMode(Enum):
    """What, if anything, gets staged before a commit is recorded."""
    NONE = "none"  # plan has no staging decision (non-commit verbs)
    STAGED_ONLY = "staged-only"  # commit what is already in the index
    UNSTAGED_TRACKED = "unstaged-tracked"  # git add -u
    ALL_INCLUDING_UNTRACKED = "all"  # git add -A


class ResetScope(Enum):
    ALL = "all"
    STAGED = "staged"
    UNSTAGED = "unstaged"
    TRACKED = "tracked"
    UNTRACKED = "untracked"


def _default_paths(paths) -> tuple[str, ...]:
    paths = tuple(paths or ())
    return paths if paths else (CURRENT_DIR,)


@dataclass(frozen=True)
class CommitFlags:
    all: bool = False
    staged: bool = False
    unstaged: bool = False
    push: bool = False
    amend: bool = False
    no_verify: bool = False


@dataclass(frozen=True)
class Init:
    pass


@dataclass(frozen=True)
class Stage:
    paths: tuple[str, ...] = (CURRENT_DIR,)
    all: bool = False
    tracked: bool = False

    def __post_init__(self):
        object.__setattr__(self, "paths", _default_paths(self.paths))


@dataclass(frozen=True)
class Unstage:
    paths: tuple[str, ...] = (CURRENT_DIR,)
    all: bool = False

    def __post_init__(self):
        object.__setattr__(self, "paths", _default_paths(self.paths))


@dataclass(frozen=True)
class Commit:
    message: str
    flags: CommitFlags = field(default_factory=CommitFlags)


@dataclass(frozen=True)
class Status:
    short: bool = False


@dataclass(frozen=True)
class Log:
    short: bool = False


@dataclass(frozen=True)
class Diff:
    path: Optional[str] = None
    staged: bool = False


@dataclass(frozen=True)
class Branch:
    create: Optional[str] = None
    switch: Optional[str] = None


@dataclass(frozen=True)
class Push:
    remote: Optional[str] = None
    branch: Optional[str] = None


@dataclass(frozen=True)
class Pull:
    remote: Optional[str] = None
    branch: Optional[str] = None


@dataclass(frozen=True)
class Reset:
    # None until the user has been asked
    scope: Optional[ResetScope] = None


@dataclass(frozen=True)
class Sync:
    remote: Optional[str] = None
    branch: Optional[str] = None


SimplifiedCommand = Union[
    Init, Stage, Unstage, Commit, Status, Log, Diff, Branch, Push, Pull, Reset, Sync
]

# Canonical order used by the workflow menu and by explain output
COMMAND_NAMES: tuple[str, ...] = (
    "init", "stage", "unstage", "commit", "status", "log",
    "diff", "branch", "push", "pull", "reset", "sync",
)


def command_name(command: SimplifiedCommand) -> str:
    """Return the CLI verb for a command instance."""
    return type(command).__name__.lower()
