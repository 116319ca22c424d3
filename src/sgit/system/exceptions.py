# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/system/exceptions.py

"""
sgit-specific exception classes.

Components raise these and let them propagate; only the CLI layer turns
them into console output and an exit status. Nothing here is retried:
git failures (conflicts, missing paths, auth) are not transient.
"""

from typing import Optional, Sequence


class SgitError(Exception):
    """Base exception for all sgit-specific errors."""
    pass


class UsageError(SgitError):
    """Raised for invalid or contradictory flags, before any git call runs."""

    def __init__(self, message: str, flags: Sequence[str] = ()):
        self.flags = tuple(flags)
        super().__init__(message)


class ConfigError(SgitError):
    """Raised when the user configuration cannot be loaded or validated."""
    pass


class AbortedError(SgitError):
    """Raised when the user cancels an interactive prompt."""

    def __init__(self, message: str = "Aborted."):
        super().__init__(message)


class ExecutionError(SgitError):
    """An external invocation could not be started or exited non-zero.

    Attributes:
        program: Name of the executable that was invoked
        args: Full argument list, excluding the program
        returncode: Exit status, or None when the process never started
        stderr: Captured standard error, empty when output was not captured
        hint: Optional one-line suggestion for the user
    """

    def __init__(
        self,
        program: str,
        args: Sequence[str],
        returncode: Optional[int] = None,
        stderr: str = "",
        reason: Optional[str] = None,
        hint: Optional[str] = None,
    ):
        self.program = program
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr or ""
        self.reason = reason
        self.hint = hint
        super().__init__(self._build_message())

    @property
    def command_line(self) -> str:
        """Command rendered for display: program followed by space-joined args."""
        return " ".join([self.program, *self.args_list])

    def _build_message(self) -> str:
        if self.returncode is None:
            detail = self.reason or "could not be started"
            return f"{self.command_line} failed: {detail}"
        return f"{self.command_line} failed (exit {self.returncode})"


class NotARepositoryError(ExecutionError):
    """The current directory is not inside a git work tree."""
    pass
