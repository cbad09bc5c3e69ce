# src/ledger/errors.py

"""
Error taxonomy for ledger operations.

Operations raise these; only the CLI entrypoint turns them into a message
and a non-zero exit code.
"""

from __future__ import annotations

from pathlib import Path


class LedgerError(Exception):
    """Base class for every failure the ledger reports to the user."""


class StoreNotFoundError(LedgerError, FileNotFoundError):
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"could not open task file: {self.path}")


class RecordParseError(LedgerError, ValueError):
    """A stored line is not a valid task record."""

    def __init__(self, message: str, *, line_no: int | None = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class EmptyInputError(LedgerError, ValueError):
    pass


class MatchError(LedgerError):
    def __init__(self, prefix: str, message: str) -> None:
        self.prefix = prefix
        super().__init__(message)


class NoMatchError(MatchError):
    def __init__(self, prefix: str) -> None:
        super().__init__(prefix, f"no matches for task id {prefix!r}")


class AmbiguousMatchError(MatchError):
    def __init__(self, prefix: str, count: int) -> None:
        self.count = count
        super().__init__(
            prefix,
            f"too many matches for task id {prefix!r} ({count} tasks); use a longer prefix",
        )


class WriteFailureError(LedgerError, OSError):
    pass


class UnknownCommandError(LedgerError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unknown subcommand: {name}")


class UnknownFormatError(LedgerError, ValueError):
    def __init__(self, fmt: str) -> None:
        self.fmt = fmt
        super().__init__(f"unknown dump format: {fmt}")


class StoreReadError(LedgerError, OSError):
    pass
