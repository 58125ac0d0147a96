"""Shared type definitions for MUT reporting."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_OK_LABEL = "===OK==="
DEFAULT_FAIL_LABEL = "==FAIL=="

TimeUnit = Literal["ms", "s"]


@dataclass(frozen=True)
class StepEvent:
    """Pass/fail notification for one executed step."""

    name: str
    successful: bool

    def to_dict(self) -> dict[str, object]:
        return {"kind": "step", **asdict(self)}


@dataclass(frozen=True)
class TimingEvent:
    """Wall-clock duration of one timed step, in milliseconds."""

    name: str
    elapsed_ms: float

    def to_dict(self) -> dict[str, object]:
        return {"kind": "timing", **asdict(self)}


@dataclass(frozen=True)
class HaltEvent:
    """Reason given when a chain was halted."""

    reason: str

    def to_dict(self) -> dict[str, object]:
        return {"kind": "halt", **asdict(self)}


ReportEvent = StepEvent | TimingEvent | HaltEvent


class ReporterConfig(BaseModel):
    """Formatting settings for console reporting."""

    model_config = ConfigDict(frozen=True)

    ok_label: str = DEFAULT_OK_LABEL
    fail_label: str = DEFAULT_FAIL_LABEL
    time_unit: TimeUnit = "ms"
    time_precision: int = Field(default=0, ge=0)

    def format_step(self, name: str, successful: bool) -> str:  # noqa: FBT001
        """Return the pass/fail line for a step."""
        label = self.ok_label if successful else self.fail_label
        return f"{label} {name}"

    def format_time(self, name: str, elapsed_ms: float) -> str:
        """Return the timing line for a step."""
        value = elapsed_ms if self.time_unit == "ms" else elapsed_ms / 1000.0
        return f"{name} took {value:.{self.time_precision}f}{self.time_unit}"
