"""Reporters -- pass/fail/timing notification sinks.

ConsoleReporter writes through io_ops so tests can patch the single
I/O boundary. RecordingReporter keeps events in memory for
test-framework adapters.
"""
from __future__ import annotations

from typing import Protocol

from mut.mut_modules import io_ops
from mut.mut_modules.types import (
    HaltEvent,
    ReportEvent,
    ReporterConfig,
    StepEvent,
    TimingEvent,
)


class Reporter(Protocol):
    """Notification sink called by ChainRunner after each step."""

    def report_step(self, name: str, successful: bool) -> None: ...  # noqa: FBT001

    def report_time(self, name: str, elapsed_ms: float) -> None: ...

    def report_halt(self, reason: str) -> None: ...


class ConsoleReporter:
    """Line-oriented reporter writing to stdout.

    Write failures are sent to stderr and otherwise ignored, so a
    broken stdout never aborts a chain.
    """

    def __init__(self, config: ReporterConfig | None = None) -> None:
        self.config = config or ReporterConfig()

    def report_step(self, name: str, successful: bool) -> None:  # noqa: FBT001
        self._emit(self.config.format_step(name, successful))

    def report_time(self, name: str, elapsed_ms: float) -> None:
        self._emit(self.config.format_time(name, elapsed_ms))

    def report_halt(self, reason: str) -> None:
        self._emit(reason)

    def _emit(self, line: str) -> None:
        io_ops.write_stdout_safe(line)


class RecordingReporter:
    """Reporter that records every notification as an event."""

    def __init__(self) -> None:
        self.events: list[ReportEvent] = []

    def report_step(self, name: str, successful: bool) -> None:  # noqa: FBT001
        self.events.append(StepEvent(name=name, successful=successful))

    def report_time(self, name: str, elapsed_ms: float) -> None:
        self.events.append(TimingEvent(name=name, elapsed_ms=elapsed_ms))

    def report_halt(self, reason: str) -> None:
        self.events.append(HaltEvent(reason=reason))

    def step_events(self) -> list[StepEvent]:
        return [e for e in self.events if isinstance(e, StepEvent)]

    def timing_events(self) -> list[TimingEvent]:
        return [e for e in self.events if isinstance(e, TimingEvent)]

    def halt_events(self) -> list[HaltEvent]:
        return [e for e in self.events if isinstance(e, HaltEvent)]

    def passed(self) -> list[str]:
        """Names of steps reported as successful, in order."""
        return [e.name for e in self.step_events() if e.successful]

    def failed(self) -> list[str]:
        """Names of steps reported as failed, in order."""
        return [e.name for e in self.step_events() if not e.successful]
