"""Hand-tuned variant: aggregate in the database and join back."""

from __future__ import annotations

from sqlalchemy import Select, and_, func, select
from sqlalchemy.orm import Session

from salary_bench.models import Department, Employee, Salary
from salary_bench.queries.records import LatestSalaryRecord


def build_latest_salary_query(department_name: str) -> Select:
    """Build the latest-per-employee join statement.

    The per-employee ``MAX(pay_date)`` aggregate is joined back to
    ``salaries`` on (employee_id, pay_date) to recover the full row. All joins
    are inner joins, so employees without any salary produce no row, and two
    salaries sharing the latest pay date both come back.
    """
    latest = (
        select(
            Salary.employee_id.label("employee_id"),
            func.max(Salary.pay_date).label("latest_pay_date"),
        )
        .group_by(Salary.employee_id)
        .subquery("latest")
    )

    return (
        select(
            Employee.id.label("id"),
            Employee.first_name.label("first_name"),
            Employee.last_name.label("last_name"),
            Department.name.label("department"),
            Salary.salary_amount.label("salary_amount"),
            Salary.pay_date.label("pay_date"),
        )
        .join(Department, Employee.department_id == Department.id)
        .join(Salary, Salary.employee_id == Employee.id)
        .join(
            latest,
            and_(
                Salary.employee_id == latest.c.employee_id,
                Salary.pay_date == latest.c.latest_pay_date,
            ),
        )
        .where(Department.name == department_name)
        .order_by(Employee.first_name, Employee.id)
    )


def fetch_latest_salaries_joined(
    session: Session,
    department_name: str,
) -> list[LatestSalaryRecord]:
    """Fetch latest salaries with a single joined statement."""
    result = session.execute(build_latest_salary_query(department_name))
    return [LatestSalaryRecord.from_mapping(dict(row)) for row in result.mappings()]
