# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/system/execution.py

"""
Invocation runner for external commands.

Everything that spawns a process goes through CommandExecutor, so the
translation layer stays pure and tests can swap in a recording fake.
"""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from loguru import logger

from sgit.system.exceptions import ExecutionError


@dataclass(frozen=True)
class InvocationResult:
    """Outcome of a completed external invocation."""
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandExecutor:
    """Runs external programs and reports their outcome.

    Without capture the child inherits the caller's standard streams, so
    pagers and colour output behave as if git had been run directly.
    No timeout is imposed; a call blocks until the child exits.
    """

    def execute(
        self,
        program: str,
        args: Sequence[str],
        cwd: Optional[Union[str, Path]] = None,
        capture: bool = False,
        check: bool = True,
    ) -> InvocationResult:
        """Run `program` with `args` and wait for it to finish.

        Args:
            program: Executable name or path
            args: Arguments passed verbatim
            cwd: Working directory override for the child
            capture: Capture stdout/stderr as text instead of inheriting them
            check: Raise ExecutionError on a non-zero exit status

        Returns:
            InvocationResult with exit status and any captured output

        Raises:
            ExecutionError: If the program cannot be spawned, or exits
                non-zero while `check` is set
        """
        cmd = [program, *args]
        logger.debug(f"Executing: {' '.join(cmd)}" + (f" (cwd={cwd})" if cwd else ""))

        try:
            completed = subprocess.run(
                cmd,
                cwd=str(cwd) if cwd is not None else None,
                capture_output=capture,
                text=True,
            )
        except OSError as e:
            logger.debug(f"Failed to start {program}: {e}")
            reason = f"{program} not found - is it installed?" if isinstance(e, FileNotFoundError) else str(e)
            raise ExecutionError(program, args, returncode=None, reason=reason) from e

        result = InvocationResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
        logger.debug(f"Exit status {result.returncode}: {' '.join(cmd)}")

        if check and not result.success:
            raise ExecutionError(
                program,
                args,
                returncode=result.returncode,
                stderr=result.stderr,
            )
        return result
