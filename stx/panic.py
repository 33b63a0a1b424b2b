"""Panics: unrecoverable failures carrying a message, a report and a location."""

from __future__ import annotations

import inspect
import sys
import threading
import traceback
from dataclasses import dataclass
from typing import Any, TextIO

__all__ = [
    "REPORT_FORMAT_ERROR",
    "DEFAULT_REPORT_SIZE",
    "SourceLocation",
    "Panic",
    "ReportQuery",
    "report",
    "format_panic",
    "panic_default",
    "begin_panic",
    "panic",
]

REPORT_FORMAT_ERROR = "<format error>"
DEFAULT_REPORT_SIZE = 256

_INT32_MIN = -(2**31)
_UINT32_MAX = 2**32 - 1

_stderr_lock = threading.Lock()


@dataclass(frozen=True)
class SourceLocation:
    """A position in the source: file, line, column and enclosing function.

    A line or column of 0 means it is unknown.
    """

    file: str = "unknown"
    line: int = 0
    column: int = 0
    function: str = "unknown"

    @classmethod
    def current(cls, depth: int = 0) -> SourceLocation:
        """Location of the caller, ``depth`` frames further up the stack."""
        frame = sys._getframe(depth + 1)
        try:
            info = inspect.getframeinfo(frame, context=0)
            column = 0
            positions = getattr(info, "positions", None)
            if positions is not None and positions.col_offset is not None:
                column = positions.col_offset + 1
            return cls(
                file=info.filename,
                line=info.lineno or 0,
                column=column,
                function=info.function,
            )
        finally:
            del frame


class Panic(Exception):
    """Raised when the program reaches an unrecoverable state."""

    def __init__(
        self,
        info: str,
        error_report: str = "",
        location: SourceLocation | None = None,
    ) -> None:
        self.info = info
        self.error_report = error_report
        self.location = location if location is not None else SourceLocation()
        message = f"{info}: {error_report}" if error_report else info
        super().__init__(message)


def report(value: Any, size: int = DEFAULT_REPORT_SIZE) -> str:
    """Describe ``value`` for a panic report.

    Strings are returned whole. Integers that fit in 32 bits are written in
    decimal, truncated to ``size - 1`` characters; a ``size`` of 0 yields an
    empty report. Any other value has no report.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        return ""
    if not _INT32_MIN <= value <= _UINT32_MAX:
        return ""
    if size <= 0:
        return ""
    return str(value)[: size - 1]


@dataclass(frozen=True)
class ReportQuery:
    """A request for a report with a bounded size."""

    size: int = DEFAULT_REPORT_SIZE

    def report(self, value: Any) -> str:
        """Describe ``value`` within this query's size."""
        return report(value, self.size)


def format_panic(
    info: str,
    error_report: str,
    location: SourceLocation,
    thread_id: int | None = None,
) -> str:
    """Render the headline of a panic report."""
    parts = ["\nthread"]
    if thread_id is not None:
        parts.append(f" with hash: '{thread_id}' ")
    parts.append(" panicked with: '")
    parts.append(info)
    if error_report:
        parts.append(": ")
        parts.append(error_report)
    parts.append("' at function: '")
    parts.append(location.function)
    parts.append("' [")
    parts.append(location.file)
    parts.append(":")
    parts.append(str(location.line) if location.line != 0 else "unknown")
    parts.append(":")
    parts.append(str(location.column) if location.column != 0 else "unknown")
    parts.append("]\n")
    return "".join(parts)


def panic_default(
    info: str,
    error_report: str,
    location: SourceLocation,
    stream: TextIO | None = None,
) -> None:
    """Write a panic report and the current call stack to ``stream``."""
    out = stream if stream is not None else sys.stderr
    frames = traceback.extract_stack(sys._getframe(1))
    with _stderr_lock:
        out.write(format_panic(info, error_report, location, threading.get_ident()))
        out.flush()
        out.write("\nBacktrace:\nip: Instruction Pointer,  sp: Stack Pointer\n\n")
        for index, frame in enumerate(reversed(frames)):
            out.write(f"#{index}\t\t{frame.name}\t ({frame.filename}:{frame.lineno})\n")
        if not frames:
            out.write(
                "WARNING >> The stack frames couldn't be identified, debug "
                "information was possibly stripped, unavailable, or elided by "
                "compiler"
            )
        out.write("\n")
        out.flush()


def begin_panic(info: str, error_report: str, location: SourceLocation) -> None:
    """Report the panic on standard error and raise :class:`Panic`."""
    panic_default(info, error_report, location, sys.stderr)
    raise Panic(info, error_report, location)


def panic(
    info: str = "explicit panic",
    *args: Any,
    location: SourceLocation | None = None,
) -> None:
    """Panic with ``info`` and, optionally, a value to report.

    The location defaults to the caller of this function.
    """
    if len(args) > 1:
        raise TypeError(f"panic() takes at most one value to report, got {len(args)}")
    if location is None:
        location = SourceLocation.current(1)
    error_report = report(args[0]) if args else ""
    begin_panic(info, error_report, location)