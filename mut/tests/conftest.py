"""Shared test fixtures for the MUT test suite."""
from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from mut.mut_modules.engine.reporter import RecordingReporter
from mut.mut_modules.engine.runner import ChainRunner


@dataclass
class Switch:
    """Fixture double that records lifecycle calls."""

    on: bool = False
    calls: list[str] = field(default_factory=list)

    def setup(self) -> None:
        self.calls.append("setup")

    def cleanup(self) -> None:
        self.calls.append("cleanup")
        self.on = False


@pytest.fixture
def recording_reporter() -> RecordingReporter:
    """Return an empty RecordingReporter."""
    return RecordingReporter()


@pytest.fixture
def switch() -> Switch:
    """Return a Switch fixture that is off."""
    return Switch()


@pytest.fixture
def runner(
    switch: Switch,
    recording_reporter: RecordingReporter,
) -> ChainRunner:
    """Return a fresh ChainRunner driving the switch fixture."""
    return ChainRunner(
        setup=switch.setup,
        cleanup=switch.cleanup,
        reporter=recording_reporter,
    )
