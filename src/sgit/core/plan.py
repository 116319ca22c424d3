# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/sgit/core/plan.py

"""
Invocation plans and their sequential execution.

A plan is built fresh for each request and discarded after it runs.
Steps execute strictly in order; the first failure stops the plan and
earlier effects stay in place. A step may carry an `allow_failure` check;
failures it accepts are logged and the plan moves on.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, Sequence

from loguru import logger

from sgit.system.exceptions import ExecutionError
from sgit.system.execution import InvocationResult


@dataclass(frozen=True)
class Invocation:
    """One external call: program, arguments and how to run it."""
    program: str
    args: tuple[str, ...]
    cwd: Optional[str] = None
    capture: bool = False
    label: str = ""
    # Returns True when a failed result may be skipped past
    allow_failure: Optional[Callable[[InvocationResult], bool]] = field(default=None, compare=False)

    @property
    def command_line(self) -> str:
        return " ".join([self.program, *self.args])


@dataclass(frozen=True)
class InvocationPlan:
    steps: tuple[Invocation, ...]

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)

    @property
    def first(self) -> Invocation:
        return self.steps[0]

    @property
    def last(self) -> Invocation:
        return self.steps[-1]


class Executor(Protocol):
    def execute(
        self,
        program: str,
        args: Sequence[str],
        cwd: Optional[str] = None,
        capture: bool = False,
        check: bool = True,
    ) -> InvocationResult: ...


def run_plan(
    plan: InvocationPlan,
    executor: Executor,
    on_step: Optional[Callable[[int, Invocation], None]] = None,
    on_result: Optional[Callable[[Invocation, InvocationResult], None]] = None,
) -> list[InvocationResult]:
    """Execute every step of `plan` in order.

    Args:
        plan: Steps to run
        executor: Invocation runner (CommandExecutor or a test double)
        on_step: Called with (index, step) before each step starts
        on_result: Called with (step, result) after each successful step

    Returns:
        Results of all steps, in order

    Raises:
        ExecutionError: From the first failing step not accepted by its
            `allow_failure` check; later steps never run
    """
    results = []
    for index, step in enumerate(plan.steps):
        if on_step is not None:
            on_step(index, step)
        logger.debug(f"Plan step {index + 1}/{len(plan)}: {step.command_line}")
        result = executor.execute(
            step.program, step.args, cwd=step.cwd, capture=step.capture,
            check=step.allow_failure is None,
        )
        results.append(result)
        if result.success:
            if on_result is not None:
                on_result(step, result)
            continue
        if step.allow_failure is not None and step.allow_failure(result):
            detail = result.stderr.strip().splitlines()
            logger.warning(
                f"{step.command_line} failed (exit {result.returncode}), continuing"
                + (f": {detail[-1]}" if detail else "")
            )
            continue
        raise ExecutionError(step.program, step.args, returncode=result.returncode, stderr=result.stderr)
    return results
