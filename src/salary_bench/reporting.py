"""Console reporting of benchmark results."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, Any, TextIO

if TYPE_CHECKING:
    from salary_bench.benchmark import VariantResult

EMPTY_MARKER = "(no records)"


class TextReporter:
    """Prints the first name and a summary line for each variant as it finishes."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream if stream is not None else sys.stdout

    def report(self, result: VariantResult) -> None:
        first_name = result.first_name if result.first_name is not None else EMPTY_MARKER
        print(first_name, file=self.stream)
        print(format_summary(result), file=self.stream)

    def finish(self) -> None:
        self.stream.flush()


class JsonReporter:
    """Collects results and writes them as one JSON document on finish."""

    def __init__(self, stream: TextIO | None = None, department: str | None = None):
        self.stream = stream if stream is not None else sys.stdout
        self.department = department
        self.results: list[VariantResult] = []

    def report(self, result: VariantResult) -> None:
        self.results.append(result)

    def to_dict(self) -> dict[str, Any]:
        """Convert collected results to a dictionary."""
        return {
            "department": self.department,
            "variants": [
                {
                    "variant": r.variant.value,
                    "label": r.label,
                    "count": r.count,
                    "elapsed_ms": r.elapsed_ms,
                    "first_name": r.first_name,
                }
                for r in self.results
            ],
        }

    def finish(self) -> None:
        json.dump(self.to_dict(), self.stream, indent=2)
        self.stream.write("\n")
        self.stream.flush()


def format_summary(result: VariantResult) -> str:
    """Format the one-line count and timing summary."""
    return f"{result.label}: {result.count} records in {result.elapsed_ms} ms"


def make_reporter(
    fmt: str,
    stream: TextIO | None = None,
    department: str | None = None,
) -> TextReporter | JsonReporter:
    """Create a reporter for an output format ("text" or "json")."""
    if fmt == "text":
        return TextReporter(stream)
    if fmt == "json":
        return JsonReporter(stream, department=department)
    raise ValueError(f"Unknown report format: {fmt}")
