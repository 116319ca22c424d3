# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# tests/fixtures/recording_executor.py

"""Recording stand-in for CommandExecutor; no test spawns git."""

from typing import Optional, Sequence

from sgit.system.exceptions import ExecutionError
from sgit.system.execution import InvocationResult

REPO_CHECK = ("rev-parse", "--git-dir")


class RecordingExecutor:
    """Fake invocation runner that records calls instead of running them.

    Failures are configured by git subcommand (first argument):
    `fail_on["commit"] = (1, "nothing to commit")`.
    """

    def __init__(self, fail_on: Optional[dict] = None, stdout: Optional[dict] = None):
        self.calls: list[tuple[str, tuple[str, ...]]] = []
        self.options: list[dict] = []
        self.fail_on = dict(fail_on or {})
        self.stdout = dict(stdout or {})

    def execute(
        self,
        program: str,
        args: Sequence[str],
        cwd: Optional[str] = None,
        capture: bool = False,
        check: bool = True,
    ) -> InvocationResult:
        args = tuple(args)
        self.calls.append((program, args))
        self.options.append({"cwd": cwd, "capture": capture, "check": check})

        subcommand = args[0] if args else ""
        if subcommand in self.fail_on:
            returncode, stderr = self.fail_on[subcommand]
            if check:
                raise ExecutionError(program, args, returncode=returncode, stderr=stderr)
            return InvocationResult(returncode=returncode, stderr=stderr)
        return InvocationResult(returncode=0, stdout=self.stdout.get(subcommand, ""))

    @property
    def git_args(self) -> list[tuple[str, ...]]:
        """Arguments of every recorded call, excluding the repository check."""
        return [args for _, args in self.calls if args != REPO_CHECK]
