"""Tests for the io_ops boundary."""
from __future__ import annotations

from typing import TYPE_CHECKING

from returns.io import IOFailure, IOSuccess
from returns.unsafe import unsafe_perform_io

from mut.mut_modules.errors import ChainError
from mut.mut_modules.io_ops import (
    monotonic_ms,
    write_stderr,
    write_stdout,
    write_stdout_safe,
)

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


def test_write_stdout_success(capsys) -> None:  # type: ignore[no-untyped-def]
    """write_stdout writes a line and returns IOSuccess(None)."""
    result = write_stdout("===OK=== step")
    assert isinstance(result, IOSuccess)
    assert unsafe_perform_io(result.unwrap()) is None
    assert capsys.readouterr().out == "===OK=== step\n"


def test_write_stdout_os_error(mocker: MockerFixture) -> None:
    """write_stdout returns IOFailure carrying the lost line."""
    mock_stdout = mocker.patch("mut.mut_modules.io_ops.sys.stdout")
    mock_stdout.write.side_effect = OSError("broken pipe")
    result = write_stdout("line")
    assert isinstance(result, IOFailure)
    error = unsafe_perform_io(result.failure())
    assert isinstance(error, ChainError)
    assert error.operation == "io_ops.write_stdout"
    assert error.error_type == "StdoutWriteError"
    assert "broken pipe" in error.message
    assert error.line == "line"


def test_write_stderr_success(capsys) -> None:  # type: ignore[no-untyped-def]
    """write_stderr writes a line to stderr."""
    result = write_stderr("oops")
    assert isinstance(result, IOSuccess)
    assert capsys.readouterr().err == "oops\n"


def test_write_stderr_closed_stream(mocker: MockerFixture) -> None:
    """write_stderr returns IOFailure when the stream is closed."""
    mock_stderr = mocker.patch("mut.mut_modules.io_ops.sys.stderr")
    mock_stderr.write.side_effect = ValueError("I/O operation on closed file")
    result = write_stderr("oops")
    assert isinstance(result, IOFailure)
    error = unsafe_perform_io(result.failure())
    assert error.error_type == "StderrWriteError"


class TestWriteStdoutSafe:
    """Tests for the fail-open stdout wrapper."""

    def test_success_writes_nothing_to_stderr(self, capsys) -> None:  # type: ignore[no-untyped-def]
        """A good write goes to stdout only."""
        write_stdout_safe("===OK=== a")
        captured = capsys.readouterr()
        assert captured.out == "===OK=== a\n"
        assert captured.err == ""

    def test_failure_goes_to_stderr(
        self,
        capsys,  # type: ignore[no-untyped-def]
        mocker: MockerFixture,
    ) -> None:
        """A failed stdout write is described on stderr, not raised."""
        mock_stdout = mocker.patch("mut.mut_modules.io_ops.sys.stdout")
        mock_stdout.write.side_effect = BrokenPipeError("pipe closed")
        write_stdout_safe("==FAIL== decode")
        err = capsys.readouterr().err
        assert err.startswith("Output failed: io_ops.write_stdout")
        assert "pipe closed" in err
        assert "'==FAIL== decode'" in err

    def test_stderr_failure_is_not_raised(
        self,
        mocker: MockerFixture,
    ) -> None:
        """Both streams broken still returns normally."""
        mocker.patch(
            "mut.mut_modules.io_ops.write_stdout",
            return_value=IOFailure(
                ChainError("io_ops.write_stdout", "StdoutWriteError", "x"),
            ),
        )
        mock_stderr = mocker.patch(
            "mut.mut_modules.io_ops.write_stderr",
            return_value=IOFailure(
                ChainError("io_ops.write_stderr", "StderrWriteError", "y"),
            ),
        )
        write_stdout_safe("line")
        mock_stderr.assert_called_once()


def test_monotonic_ms_uses_perf_counter(mocker: MockerFixture) -> None:
    """monotonic_ms converts perf_counter seconds to milliseconds."""
    mocker.patch(
        "mut.mut_modules.io_ops.time.perf_counter",
        return_value=1.5,
    )
    assert monotonic_ms() == 1500.0


def test_monotonic_ms_never_goes_backwards() -> None:
    """Consecutive readings are non-decreasing."""
    first = monotonic_ms()
    second = monotonic_ms()
    assert second >= first
