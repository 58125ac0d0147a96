"""Wall-clock measurement around a step."""
from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from mut.mut_modules import io_ops

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")


class Stopwatch:
    """Monotonic stopwatch started on construction."""

    def __init__(self) -> None:
        self._start = io_ops.monotonic_ms()

    def elapsed_ms(self) -> float:
        """Milliseconds since start, never negative."""
        return max(0.0, io_ops.monotonic_ms() - self._start)


def time_call(fn: Callable[[], T]) -> tuple[T, float]:
    """Call fn and return (value, elapsed_ms).

    Exceptions raised by fn propagate; no time is returned for them.
    """
    watch = Stopwatch()
    value = fn()
    return value, watch.elapsed_ms()
