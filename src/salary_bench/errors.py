"""Benchmark error types."""

from __future__ import annotations

from typing import Any, Sequence


class BenchmarkError(Exception):
    """Base class for benchmark failures."""


class DatabaseConnectionError(BenchmarkError):
    """Raised when the database cannot be reached."""

    def __init__(self, url: str, reason: str | None = None):
        self.url = url
        self.reason = reason
        msg = f"Could not connect to {url}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class QueryExecutionError(BenchmarkError):
    """Raised when a variant's statement fails on the server."""

    def __init__(self, variant: str, reason: str):
        self.variant = variant
        self.reason = reason
        super().__init__(f"Query variant '{variant}' failed: {reason}")


class RowMappingError(BenchmarkError):
    """Raised when a result row cannot be mapped to a record."""

    def __init__(self, row: Sequence[Any] | Any, reason: str):
        self.row = row
        self.reason = reason
        super().__init__(f"Cannot map row {row!r}: {reason}")


class ProcedureNotSupportedError(BenchmarkError):
    """Raised when a dialect has no known stored routine call form."""

    def __init__(self, dialect_name: str):
        self.dialect_name = dialect_name
        super().__init__(f"Stored routines are not supported for dialect '{dialect_name}'")
