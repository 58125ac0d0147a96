"""Public API types for step chains (Tier 1).

Test authors hand the runner plain callables. StepResult is the
value every step returns; ChainStep/Chain describe a chain as data
for run_chain().
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mut.mut_modules.engine.reporter import Reporter
    from mut.mut_modules.engine.runner import ChainRunner

StepBody = Callable[[], bool]
Hook = Callable[[], None]
Handler = Callable[[], None]


def noop() -> None:
    """Default lifecycle hook."""


@dataclass(frozen=True)
class StepResult:
    """Outcome of one first or next step.

    setup/cleanup are the fixture hooks that were current when the
    step ran, so a failure handler can open a nested chain on the
    same fixture via nested().
    """

    name: str
    successful: bool
    setup: Hook = field(default=noop, repr=False, compare=False)
    cleanup: Hook = field(default=noop, repr=False, compare=False)

    def otherwise(self, handler: Handler) -> StepResult:
        """Run handler only when this step failed.

        Does not touch the continuation flag; a handler that wants
        to stop the chain must call halt() itself.
        """
        if not self.successful:
            handler()
        return self

    def nested(self, reporter: Reporter | None = None) -> ChainRunner:
        """Return a fresh runner bound to this step's setup/cleanup."""
        from mut.mut_modules.engine.runner import (  # noqa: PLC0415
            ChainRunner,
        )

        return ChainRunner(
            setup=self.setup,
            cleanup=self.cleanup,
            reporter=reporter,
        )


@dataclass(frozen=True)
class ChainStep:
    """A single step in a declarative chain.

    The first step of a Chain resets the fixture; every later one
    continues from the state the previous step left.
    """

    name: str
    body: StepBody
    timed: bool = False
    otherwise: Handler | None = None


@dataclass(frozen=True)
class Chain:
    """Declarative chain definition: one first step, then next steps."""

    name: str
    steps: list[ChainStep] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.steps:
            msg = f"Chain '{self.name}' must have at least one step"
            raise ValueError(msg)

    @property
    def first(self) -> ChainStep:
        return self.steps[0]

    @property
    def rest(self) -> list[ChainStep]:
        return self.steps[1:]
