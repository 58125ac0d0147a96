"""Engine package -- sequential test-step chains over one fixture."""
from mut.mut_modules.engine.combinators import (
    chain,
    halt_on,
    sequence,
    timed,
    with_otherwise,
)
from mut.mut_modules.engine.reporter import (
    ConsoleReporter,
    RecordingReporter,
    Reporter,
)
from mut.mut_modules.engine.runner import ChainRunner, run_chain
from mut.mut_modules.engine.types import Chain, ChainStep, StepResult

__all__ = [
    "Chain",
    "ChainRunner",
    "ChainStep",
    "ConsoleReporter",
    "RecordingReporter",
    "Reporter",
    "StepResult",
    "chain",
    "halt_on",
    "run_chain",
    "sequence",
    "timed",
    "with_otherwise",
]
