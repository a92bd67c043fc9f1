"""Precompiled variant: call the stored routine by name."""

from __future__ import annotations

from typing import TYPE_CHECKING

from salary_bench.procedures import build_procedure_call
from salary_bench.queries.records import LatestSalaryRecord

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection


def fetch_latest_salaries_procedure(
    connection: Connection,
    department_name: str,
) -> list[LatestSalaryRecord]:
    """Invoke GetLatestSalariesByDepartment and map its positional rows.

    Args:
        connection: Open connection; the routine's dialect form is chosen from it
        department_name: Bound to the routine's department parameter

    Returns:
        Records ordered by first name

    Raises:
        ProcedureNotSupportedError: If the dialect has no routine call form
        RowMappingError: If a returned row does not have six valid columns
    """
    stmt = build_procedure_call(connection.dialect.name)
    result = connection.execute(stmt, {"dept_name": department_name})
    return [LatestSalaryRecord.from_row(row) for row in result]
