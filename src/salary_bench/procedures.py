"""Stored routine definitions and call forms per SQL dialect.

The benchmark's third variant invokes ``GetLatestSalariesByDepartment`` by
name. Each supported dialect gets:

- the statement that calls the routine with a ``:dept_name`` bind
- the DDL that creates (or replaces) the routine

SQLite has no server-side routines. Its call form is the routine body itself,
executed as a single bound statement.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, Numeric, String, column, text

from salary_bench.errors import ProcedureNotSupportedError

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection
    from sqlalchemy.sql.elements import TextClause
    from sqlalchemy.sql.selectable import TextualSelect

logger = logging.getLogger(__name__)

PROCEDURE_NAME = "GetLatestSalariesByDepartment"
PG_FUNCTION_NAME = "get_latest_salaries_by_department"

# Positional result columns, in routine output order.
RESULT_COLUMNS = (
    column("id", Integer),
    column("first_name", String),
    column("last_name", String),
    column("department", String),
    column("salary_amount", Numeric(18, 2)),
    column("pay_date", DateTime),
)

# One row per employee; rank 1 is the latest pay date, highest id on ties.
_BODY = """
SELECT ranked.id, ranked.first_name, ranked.last_name, ranked.department,
       ranked.salary_amount, ranked.pay_date
FROM (
    SELECT e.id, e.first_name, e.last_name, d.name AS department,
           s.salary_amount, s.pay_date,
           ROW_NUMBER() OVER (
               PARTITION BY e.id ORDER BY s.pay_date DESC, s.id DESC
           ) AS rn
    FROM employees e
    JOIN departments d ON d.id = e.department_id
    LEFT JOIN salaries s ON s.employee_id = e.id
    WHERE d.name = {param}
) ranked
WHERE ranked.rn = 1
ORDER BY ranked.first_name, ranked.id
"""


def routine_body(param: str) -> str:
    """Render the routine body with ``param`` as the department filter."""
    return _BODY.format(param=param).strip()


@dataclass(frozen=True)
class RoutineDialect:
    """How one dialect calls and installs the routine."""

    call: str
    install: tuple[str, ...] = ()


DIALECTS: dict[str, RoutineDialect] = {
    "mssql": RoutineDialect(
        call=f"EXEC {PROCEDURE_NAME} @DeptName = :dept_name",
        install=(
            f"CREATE OR ALTER PROCEDURE {PROCEDURE_NAME}\n"
            "    @DeptName NVARCHAR(100)\n"
            "AS\n"
            "BEGIN\n"
            "    SET NOCOUNT ON;\n"
            f"{routine_body('@DeptName')};\n"
            "END",
        ),
    ),
    "postgresql": RoutineDialect(
        call=f"SELECT * FROM {PG_FUNCTION_NAME}(:dept_name)",
        install=(
            f"CREATE OR REPLACE FUNCTION {PG_FUNCTION_NAME}(p_dept_name VARCHAR)\n"
            "RETURNS TABLE (\n"
            "    id INTEGER,\n"
            "    first_name VARCHAR,\n"
            "    last_name VARCHAR,\n"
            "    department VARCHAR,\n"
            "    salary_amount NUMERIC,\n"
            "    pay_date TIMESTAMP\n"
            ")\n"
            "LANGUAGE sql STABLE\n"
            "AS $$\n"
            f"{routine_body('p_dept_name')}\n"
            "$$",
        ),
    ),
    "mysql": RoutineDialect(
        call=f"CALL {PROCEDURE_NAME}(:dept_name)",
        install=(
            f"DROP PROCEDURE IF EXISTS {PROCEDURE_NAME}",
            f"CREATE PROCEDURE {PROCEDURE_NAME}(IN p_dept_name VARCHAR(100))\n"
            "BEGIN\n"
            f"{routine_body('p_dept_name')};\n"
            "END",
        ),
    ),
    "sqlite": RoutineDialect(call=routine_body(":dept_name")),
}
DIALECTS["mariadb"] = DIALECTS["mysql"]


def get_routine_dialect(dialect_name: str) -> RoutineDialect:
    """Look up the routine definition for a dialect.

    Raises:
        ProcedureNotSupportedError: If the dialect is unknown
    """
    try:
        return DIALECTS[dialect_name]
    except KeyError:
        raise ProcedureNotSupportedError(dialect_name) from None


def build_procedure_call(dialect_name: str) -> TextualSelect:
    """Build the typed statement that invokes the routine."""
    stmt: TextClause = text(get_routine_dialect(dialect_name).call)
    return stmt.columns(*RESULT_COLUMNS)


def install_procedure(connection: Connection) -> bool:
    """Create or replace the routine on the connected server.

    Returns True if DDL was executed, False for dialects without routines.
    """
    dialect_name = connection.dialect.name
    routine = get_routine_dialect(dialect_name)
    if not routine.install:
        logger.info("Dialect %s has no stored routines; nothing to install", dialect_name)
        return False

    for ddl in routine.install:
        connection.exec_driver_sql(ddl)
    connection.commit()
    logger.info("Installed %s for dialect %s", PROCEDURE_NAME, dialect_name)
    return True
