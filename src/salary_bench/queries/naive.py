"""Unoptimized ORM variant: one salary fetch per employee."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from salary_bench.models import Department, Employee
from salary_bench.queries.records import LatestSalaryRecord

logger = logging.getLogger(__name__)


def fetch_latest_salaries_naive(
    session: Session,
    department_name: str,
) -> list[LatestSalaryRecord]:
    """Fetch each employee's latest salary through lazy relationship loads.

    Employees are selected by department name; each employee's ``salaries``
    collection is then loaded on access (one statement per employee) and the
    latest row is picked in Python. Employees without salaries are kept with
    empty salary fields.

    Args:
        session: Open ORM session
        department_name: Department to filter on

    Returns:
        Records ordered by first name
    """
    stmt = (
        select(Employee)
        .join(Employee.department)
        .where(Department.name == department_name)
        .order_by(Employee.first_name, Employee.id)
    )
    employees = session.scalars(stmt).all()
    logger.debug("Loaded %d employees for %r", len(employees), department_name)

    return [
        LatestSalaryRecord.from_employee(employee, employee.latest_salary())
        for employee in employees
    ]
