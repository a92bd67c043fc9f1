"""Benchmark runner timing the three latest-salary variants."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from sqlalchemy.exc import DBAPIError

from salary_bench.database import connection_scope, session_scope
from salary_bench.errors import QueryExecutionError
from salary_bench.queries import (
    LatestSalaryRecord,
    fetch_latest_salaries_joined,
    fetch_latest_salaries_naive,
    fetch_latest_salaries_procedure,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class QueryVariant(str, Enum):
    """Query variants, in the order they are run."""

    NAIVE = "naive"
    JOINED = "joined"
    PROCEDURE = "procedure"

    @property
    def label(self) -> str:
        """Human readable name used in reports."""
        return _LABELS[self]


_LABELS = {
    QueryVariant.NAIVE: "Original ORM",
    QueryVariant.JOINED: "Optimized ORM",
    QueryVariant.PROCEDURE: "Stored Procedure",
}


class Stopwatch:
    """Monotonic wall-clock timer usable as a context manager."""

    def __init__(self) -> None:
        self._started: float | None = None
        self._stopped: float | None = None

    def start(self) -> Stopwatch:
        self._started = time.perf_counter()
        self._stopped = None
        return self

    def stop(self) -> None:
        if self._started is None:
            raise RuntimeError("Stopwatch was never started")
        self._stopped = time.perf_counter()

    @property
    def elapsed_ms(self) -> int:
        """Whole milliseconds elapsed, up to now if still running."""
        if self._started is None:
            return 0
        end = self._stopped if self._stopped is not None else time.perf_counter()
        return int((end - self._started) * 1000)

    def __enter__(self) -> Stopwatch:
        return self.start()

    def __exit__(self, *exc: object) -> None:
        self.stop()


@dataclass
class VariantResult:
    """Outcome of one timed variant."""

    variant: QueryVariant
    elapsed_ms: int
    records: list[LatestSalaryRecord] = field(default_factory=list)

    @property
    def label(self) -> str:
        return self.variant.label

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def first_name(self) -> str | None:
        """First name of the first record, None when empty."""
        return self.records[0].first_name if self.records else None


class ResultSink(Protocol):
    """Anything that accepts finished variant results."""

    def report(self, result: VariantResult) -> None: ...


class BenchmarkRunner:
    """Runs every query variant against one department and times each.

    Each variant acquires its own session or connection from ``engine`` and
    releases it before the next variant starts. The stopwatch covers
    acquisition, execution and record materialization.
    """

    VARIANTS: tuple[QueryVariant, ...] = (
        QueryVariant.NAIVE,
        QueryVariant.JOINED,
        QueryVariant.PROCEDURE,
    )

    def __init__(self, engine: Engine, reporter: ResultSink | None = None):
        self.engine = engine
        self.reporter = reporter

    def run(self, department_name: str) -> list[VariantResult]:
        """Run all variants in order for a department.

        Args:
            department_name: Department to query; need not exist

        Returns:
            One result per variant, in run order

        Raises:
            ValueError: If department_name is empty
            DatabaseConnectionError: If the database cannot be reached
            QueryExecutionError: If a variant's statement fails
            RowMappingError: If a result row cannot be mapped
        """
        if not department_name or not department_name.strip():
            raise ValueError("department_name must be a non-empty string")

        results = []
        for variant in self.VARIANTS:
            result = self.run_variant(variant, department_name)
            if self.reporter is not None:
                self.reporter.report(result)
            results.append(result)
        return results

    def run_variant(self, variant: QueryVariant, department_name: str) -> VariantResult:
        """Run and time a single variant."""
        logger.debug("Running %s for department %r", variant.value, department_name)
        stopwatch = Stopwatch()
        try:
            with stopwatch:
                records = self._execute(variant, department_name)
        except DBAPIError as e:
            raise QueryExecutionError(variant.value, str(e.orig)) from e

        logger.debug(
            "%s returned %d records in %d ms",
            variant.value,
            len(records),
            stopwatch.elapsed_ms,
        )
        return VariantResult(variant=variant, elapsed_ms=stopwatch.elapsed_ms, records=records)

    def _execute(self, variant: QueryVariant, department_name: str) -> list[LatestSalaryRecord]:
        if variant is QueryVariant.NAIVE:
            with session_scope(self.engine) as session:
                return fetch_latest_salaries_naive(session, department_name)
        if variant is QueryVariant.JOINED:
            with session_scope(self.engine) as session:
                return fetch_latest_salaries_joined(session, department_name)
        with connection_scope(self.engine) as conn:
            return fetch_latest_salaries_procedure(conn, department_name)
