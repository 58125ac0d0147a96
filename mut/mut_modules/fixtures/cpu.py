"""Illustrative CPU fixture and the chain that exercises it.

The CPU fetch fails, execute overheats, and the chain halts before
writeback. A second chain resets the CPU, turns core 2 on and fetches
again.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from mut.mut_modules import io_ops
from mut.mut_modules.engine.runner import ChainRunner

if TYPE_CHECKING:
    from mut.mut_modules.engine.reporter import Reporter
    from mut.mut_modules.engine.types import StepResult


class Overheating(Exception):  # noqa: N818
    """Raised when the CPU runs too hot to execute."""


class Cpu:
    """Toy CPU under test."""

    def __init__(self) -> None:
        self.core1 = "off"
        self.core2 = "off"

    def fetch(self) -> bool:
        return False

    def decode(self) -> bool:
        return True

    def execute(self) -> bool:
        raise Overheating

    def writeback(self) -> bool:
        return True


class CpuFixture:
    """setup/cleanup hooks for a Cpu. cleanup is idempotent."""

    def __init__(self, cpu: Cpu) -> None:
        self.cpu = cpu

    def setup(self) -> None:
        # one core on
        self.cpu.core1 = "on"

    def cleanup(self) -> None:
        self.cpu.core1 = "off"
        self.cpu.core2 = "off"


def build_cpu_runner(
    cpu: Cpu,
    reporter: Reporter | None = None,
) -> ChainRunner:
    """Return a runner whose hooks drive a CpuFixture around cpu."""
    fixture = CpuFixture(cpu)
    return ChainRunner(
        setup=fixture.setup,
        cleanup=fixture.cleanup,
        reporter=reporter,
    )


def _say(message: str) -> None:
    io_ops.write_stdout_safe(message)


def run_cpu_chain(
    runner: ChainRunner,
    cpu: Cpu,
    *,
    timed: bool = True,
) -> list[StepResult]:
    """Run the CPU chains on runner and return every step result."""
    first = runner.timed_first_step if timed else runner.first_step
    nxt = runner.timed_next_step if timed else runner.next_step
    results: list[StepResult] = []

    def execute() -> bool:
        try:
            return cpu.execute()
        except Overheating:
            runner.halt("CPU overheated!")
            _say("CPU automatically shuts down")
            return False

    def reset_and_fetch() -> bool:
        cpu.core2 = "on"
        return cpu.fetch()

    results.append(
        runner.first_step("Fetching instruction", cpu.fetch).otherwise(
            lambda: _say("CPU cannot fetch an instruction"),
        ),
    )
    results.append(
        runner.next_step("Decode instruction", cpu.decode).otherwise(
            lambda: _say("CPU cannot decode an instruction"),
        ),
    )
    results.append(
        nxt("Execute instruction", execute).otherwise(
            lambda: _say("CPU cannot execute an instruction"),
        ),
    )
    results.append(
        nxt("Write result back into memory", cpu.writeback).otherwise(
            lambda: _say("CPU cannot write result back into memory"),
        ),
    )
    results.append(
        first(
            "CPU has been reset. Core 2 is on. Fetching instruction",
            reset_and_fetch,
        ).otherwise(lambda: _say("CPU cannot fetch an instruction")),
    )

    runner.cleanup()
    return results
