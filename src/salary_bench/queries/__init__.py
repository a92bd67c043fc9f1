"""Latest-salary query variants."""

from salary_bench.queries.joined import build_latest_salary_query, fetch_latest_salaries_joined
from salary_bench.queries.naive import fetch_latest_salaries_naive
from salary_bench.queries.procedure import fetch_latest_salaries_procedure
from salary_bench.queries.records import RECORD_COLUMNS, LatestSalaryRecord

__all__ = [
    "RECORD_COLUMNS",
    "LatestSalaryRecord",
    "build_latest_salary_query",
    "fetch_latest_salaries_joined",
    "fetch_latest_salaries_naive",
    "fetch_latest_salaries_procedure",
]
