"""Error value for failed writes at the MUT I/O boundary.

Step failures are plain False returns and faults from step bodies
propagate as ordinary exceptions; ChainError only describes output
the engine itself tried to write.
"""
from __future__ import annotations

from dataclasses import dataclass

_MAX_LINE_LEN = 80


@dataclass(frozen=True)
class ChainError:
    """A boundary operation (e.g. io_ops.write_stdout) that failed."""

    operation: str
    error_type: str
    message: str
    line: str = ""

    @classmethod
    def from_exception(
        cls,
        operation: str,
        error_type: str,
        exc: BaseException,
        line: str = "",
    ) -> ChainError:
        """Build an error for operation from a caught exception."""
        return cls(
            operation=operation,
            error_type=error_type,
            message=f"{type(exc).__name__}: {exc}",
            line=line,
        )

    def __str__(self) -> str:
        text = f"{self.operation} {self.error_type} ({self.message})"
        if self.line:
            shown = self.line
            if len(shown) > _MAX_LINE_LEN:
                shown = shown[: _MAX_LINE_LEN - 3] + "..."
            text += f" while writing {shown!r}"
        return text
