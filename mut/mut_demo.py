"""Run the example CPU chain with console reporting.

The fetch step fails, execute overheats and halts the chain, so the
writeback step is skipped. A second, timed chain resets the CPU.

Usage:
    uv run mut/mut_demo.py                          # Timed chain, default labels
    uv run mut/mut_demo.py --untimed                # No timing lines
    uv run mut/mut_demo.py --time-unit s --precision 3
    uv run mut/mut_demo.py --ok-label PASS --fail-label FAIL
"""
from __future__ import annotations

import sys
from pathlib import Path

# When run as a script, add the project root to sys.path so that
# absolute imports like "from mut.mut_modules..." resolve correctly.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import click  # noqa: E402
from pydantic import ValidationError  # noqa: E402

from mut.mut_modules import io_ops  # noqa: E402
from mut.mut_modules.engine.reporter import ConsoleReporter  # noqa: E402
from mut.mut_modules.fixtures.cpu import (  # noqa: E402
    Cpu,
    build_cpu_runner,
    run_cpu_chain,
)
from mut.mut_modules.types import (  # noqa: E402
    DEFAULT_FAIL_LABEL,
    DEFAULT_OK_LABEL,
    ReporterConfig,
)


@click.command()
@click.option(
    "--timed/--untimed",
    default=True,
    help="Report wall-clock time for timed steps (default: timed)",
)
@click.option("--ok-label", default=DEFAULT_OK_LABEL, help="Prefix for passing steps")
@click.option(
    "--fail-label",
    default=DEFAULT_FAIL_LABEL,
    help="Prefix for failing steps",
)
@click.option(
    "--time-unit",
    type=click.Choice(["ms", "s"]),
    default="ms",
    help="Unit for timing lines (default: ms)",
)
@click.option(
    "--precision",
    default=0,
    type=int,
    help="Decimal places for timing lines (default: 0)",
)
def main(
    timed: bool,  # noqa: FBT001
    ok_label: str,
    fail_label: str,
    time_unit: str,
    precision: int,
) -> None:
    """Run the CPU example chain."""
    try:
        config = ReporterConfig(
            ok_label=ok_label,
            fail_label=fail_label,
            time_unit=time_unit,
            time_precision=precision,
        )
    except ValidationError as exc:
        io_ops.write_stderr(f"Invalid reporter settings: {exc}")
        sys.exit(2)

    cpu = Cpu()
    runner = build_cpu_runner(cpu, reporter=ConsoleReporter(config))
    run_cpu_chain(runner, cpu, timed=timed)


if __name__ == "__main__":
    main()
