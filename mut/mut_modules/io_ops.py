"""I/O boundary module -- ALL external I/O goes through here.

This is the single mock point for the test suite. The engine,
reporters and fixtures never write to streams or read clocks
directly; they call io_ops functions. Stream writes return IOResult
and never raise.
"""
from __future__ import annotations

import sys
import time

from returns.io import IOFailure, IOResult, IOSuccess
from returns.unsafe import unsafe_perform_io

from mut.mut_modules.errors import ChainError


def write_stdout(
    message: str,
) -> IOResult[None, ChainError]:
    """Write one line to stdout.

    Returns IOSuccess(None) or IOFailure on error.
    """
    try:
        sys.stdout.write(message + "\n")
        sys.stdout.flush()
    except (OSError, ValueError) as exc:
        return IOFailure(
            ChainError.from_exception(
                "io_ops.write_stdout",
                "StdoutWriteError",
                exc,
                line=message,
            ),
        )
    return IOSuccess(None)


def write_stderr(
    message: str,
) -> IOResult[None, ChainError]:
    """Write one line to stderr.

    Returns IOSuccess(None) or IOFailure on error.
    """
    try:
        sys.stderr.write(message + "\n")
    except (OSError, ValueError) as exc:
        return IOFailure(
            ChainError.from_exception(
                "io_ops.write_stderr",
                "StderrWriteError",
                exc,
                line=message,
            ),
        )
    return IOSuccess(None)


def write_stdout_safe(message: str) -> None:
    """Fail-open wrapper for write_stdout.

    A failed stdout write is reported on stderr instead; a chain is
    never aborted because its output could not be written.
    """
    result = write_stdout(message)
    if isinstance(result, IOFailure):
        err = unsafe_perform_io(result.failure())
        write_stderr(f"Output failed: {err}")


def monotonic_ms() -> float:
    """Return a monotonic clock reading in milliseconds. Mockable seam."""
    return time.perf_counter() * 1000.0
