"""Chain runner -- sequential test steps over one long-lived fixture.

A chain is one first step, which resets the fixture through
cleanup/setup, followed by next steps that observe whatever state the
previous steps left. halt() releases the fixture and turns the rest
of the chain into silent no-ops.

Faults raised by step bodies are never caught here. Authors convert
them to a False return (and optionally halt) inside the body.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from mut.mut_modules.engine.reporter import ConsoleReporter
from mut.mut_modules.engine.timer import time_call
from mut.mut_modules.engine.types import StepResult, noop

if TYPE_CHECKING:
    from mut.mut_modules.engine.reporter import Reporter
    from mut.mut_modules.engine.types import (
        Chain,
        ChainStep,
        Hook,
        StepBody,
    )


class ChainRunner:
    """Runs first/next steps against author-supplied setup/cleanup hooks.

    Hooks may be passed in, or a subclass may override setup() and
    cleanup(). cleanup must be idempotent: it runs before every first
    step, on every halt, and usually once more at the end of a chain.
    """

    def __init__(
        self,
        setup: Hook | None = None,
        cleanup: Hook | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self._setup_hook = setup or noop
        self._cleanup_hook = cleanup or noop
        self.reporter: Reporter = (
            reporter if reporter is not None else ConsoleReporter()
        )
        self._may_continue = False

    @property
    def may_continue(self) -> bool:
        """True while the current chain has not been halted."""
        return self._may_continue

    def setup(self) -> None:
        """Establish fixture state."""
        self._setup_hook()

    def cleanup(self) -> None:
        """Tear down fixture state."""
        self._cleanup_hook()

    def _result(self, name: str, successful: bool) -> StepResult:  # noqa: FBT001
        return StepResult(
            name=name,
            successful=successful,
            setup=self.setup,
            cleanup=self.cleanup,
        )

    def first_step(self, name: str, body: StepBody) -> StepResult:
        """Reset the fixture and run the first step of a chain."""
        self._may_continue = True
        self.cleanup()
        self.setup()
        successful = body()
        self.reporter.report_step(name, successful)
        return self._result(name, successful)

    def next_step(self, name: str, body: StepBody) -> StepResult:
        """Run the next step without resetting the fixture.

        After a halt the body is skipped, nothing is reported, and the
        result is successful so chained otherwise() handlers stay quiet.
        """
        successful = True
        if self._may_continue:
            successful = body()
            self.reporter.report_step(name, successful)
        return self._result(name, successful)

    def timed_first_step(self, name: str, body: StepBody) -> StepResult:
        """first_step(), then report the elapsed wall-clock time."""
        result, elapsed = time_call(lambda: self.first_step(name, body))
        self.reporter.report_time(name, elapsed)
        return result

    def timed_next_step(self, name: str, body: StepBody) -> StepResult:
        """next_step(), then report the elapsed wall-clock time."""
        result, elapsed = time_call(lambda: self.next_step(name, body))
        self.reporter.report_time(name, elapsed)
        return result

    def halt(self, reason: str = "") -> None:
        """Release the fixture and skip the rest of the current chain."""
        self.cleanup()
        if reason:
            self.reporter.report_halt(reason)
        self._may_continue = False


def _run_chain_step(
    runner: ChainRunner,
    step: ChainStep,
    *,
    first: bool,
) -> StepResult:
    if first:
        op = runner.timed_first_step if step.timed else runner.first_step
    else:
        op = runner.timed_next_step if step.timed else runner.next_step
    result = op(step.name, step.body)
    if step.otherwise is not None:
        result.otherwise(step.otherwise)
    return result


def run_chain(
    runner: ChainRunner,
    chain: Chain,
) -> list[StepResult]:
    """Execute a declarative chain on runner, in order.

    The first ChainStep runs as a first step, the rest as next steps.
    Each step's otherwise handler is attached to its own result.
    """
    results = [_run_chain_step(runner, chain.first, first=True)]
    results.extend(
        _run_chain_step(runner, step, first=False) for step in chain.rest
    )
    return results
