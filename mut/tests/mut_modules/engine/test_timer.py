"""Tests for Stopwatch and time_call."""
from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from mut.mut_modules.engine.timer import Stopwatch, time_call

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


def test_stopwatch_elapsed(mocker: MockerFixture) -> None:
    """elapsed_ms is the difference between clock readings."""
    mocker.patch(
        "mut.mut_modules.io_ops.monotonic_ms",
        side_effect=[10.0, 25.5],
    )
    assert Stopwatch().elapsed_ms() == 15.5


def test_stopwatch_clamps_to_zero(mocker: MockerFixture) -> None:
    """A backwards clock reading yields 0, not a negative."""
    mocker.patch(
        "mut.mut_modules.io_ops.monotonic_ms",
        side_effect=[10.0, 5.0],
    )
    assert Stopwatch().elapsed_ms() == 0.0


def test_time_call_returns_value_and_elapsed() -> None:
    """time_call passes the return value through."""
    value, elapsed = time_call(lambda: "done")
    assert value == "done"
    assert elapsed >= 0.0


def test_time_call_propagates_errors() -> None:
    """Exceptions from the timed callable escape."""

    def fail() -> None:
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        time_call(fail)
