"""Chain combinators -- pure data composition (Tier 2).

Combinators produce ChainStep/Chain values (Tier 1 types). They do
NOT run steps; run_chain() does. halt_on() is the one exception: it
wraps a step body so a listed fault becomes a halt plus a False
return.
"""
from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from mut.mut_modules.engine.types import Chain, ChainStep

if TYPE_CHECKING:
    from mut.mut_modules.engine.runner import ChainRunner
    from mut.mut_modules.engine.types import Handler, StepBody


def timed(step: ChainStep) -> ChainStep:
    """Return step with timing reported."""
    return replace(step, timed=True)


def with_otherwise(step: ChainStep, handler: Handler) -> ChainStep:
    """Return step with handler attached for when it fails."""
    return replace(step, otherwise=handler)


def chain(name: str, first: ChainStep, *rest: ChainStep) -> Chain:
    """Build a Chain from a first step and any next steps."""
    return Chain(name=name, steps=[first, *rest])


def sequence(
    chain_a: Chain,
    chain_b: Chain,
    *,
    name: str | None = None,
) -> Chain:
    """Compose two chains into one without an intermediate reset.

    chain_b's first step runs as a next step, continuing from the
    fixture state chain_a left behind.
    """
    effective_name = name or f"{chain_a.name}_then_{chain_b.name}"
    return Chain(
        name=effective_name,
        steps=[*chain_a.steps, *chain_b.steps],
    )


def halt_on(
    runner: ChainRunner,
    body: StepBody,
    *exc_types: type[BaseException],
    reason: str = "",
) -> StepBody:
    """Wrap body so listed exceptions halt the chain.

    On a listed exception, runner.halt(reason) is called and the
    wrapped body returns False. Any other exception propagates.
    """
    if not exc_types:
        msg = "halt_on() needs at least one exception type"
        raise ValueError(msg)

    def guarded() -> bool:
        try:
            return body()
        except exc_types:
            runner.halt(reason)
            return False

    return guarded
