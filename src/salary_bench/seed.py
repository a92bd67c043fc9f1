"""Demo data seeding.

Creates a handful of departments with employees and a monthly salary history
so the benchmark has something to measure. Generation is deterministic for a
given seed.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from salary_bench.models import Department, Employee, Salary

logger = logging.getLogger(__name__)

DEFAULT_DEPARTMENTS = ("Finance", "IT", "HR", "Sales", "Operations")

FIRST_NAMES = (
    "Alice", "Bob", "Carol", "David", "Erin", "Frank", "Grace", "Heidi",
    "Ivan", "Judy", "Mallory", "Niaj", "Olivia", "Peggy", "Rupert", "Sybil",
    "Trent", "Victor", "Walter", "Yvonne",
)
LAST_NAMES = (
    "Johnson", "Smith", "Williams", "Brown", "Jones", "Garcia", "Miller",
    "Davis", "Martinez", "Lopez", "Wilson", "Anderson", "Thomas", "Moore",
)


@dataclass
class SeedSummary:
    """Counts of rows written by a seeding run."""

    departments: int = 0
    employees: int = 0
    salaries: int = 0
    skipped: bool = False


def seed_demo_data(
    session: Session,
    *,
    departments: tuple[str, ...] = DEFAULT_DEPARTMENTS,
    employees_per_department: int = 50,
    months: int = 24,
    start: datetime = datetime(2022, 1, 1),
    seed: int = 42,
) -> SeedSummary:
    """Insert demo departments, employees and monthly salaries.

    Does nothing if any department already exists.

    Args:
        session: Session to write through; the caller commits
        departments: Department names to create
        employees_per_department: Employees created in each department
        months: Number of monthly pay dates per employee, from ``start``
        start: First pay date
        seed: Random seed for names and amounts

    Returns:
        SeedSummary with inserted row counts
    """
    if employees_per_department < 0 or months < 0:
        raise ValueError("employees_per_department and months must be non-negative")

    existing = session.scalar(select(func.count()).select_from(Department))
    if existing:
        logger.info("Found %d departments, skipping seed", existing)
        return SeedSummary(skipped=True)

    rng = random.Random(seed)
    summary = SeedSummary()

    for name in departments:
        department = Department(name=name)
        session.add(department)
        summary.departments += 1

        for _ in range(employees_per_department):
            employee = Employee(
                first_name=rng.choice(FIRST_NAMES),
                last_name=rng.choice(LAST_NAMES),
                department=department,
            )
            session.add(employee)
            summary.employees += 1

            base = Decimal(rng.randrange(3000, 9000, 50))
            for month in range(months):
                employee.salaries.append(
                    Salary(
                        salary_amount=(base + Decimal(month * 25)).quantize(Decimal("0.01")),
                        pay_date=_add_months(start, month),
                    )
                )
                summary.salaries += 1

    session.flush()
    logger.info(
        "Seeded %d departments, %d employees, %d salaries",
        summary.departments,
        summary.employees,
        summary.salaries,
    )
    return summary


def _add_months(value: datetime, months: int) -> datetime:
    year, month = divmod(value.month - 1 + months, 12)
    return value.replace(year=value.year + year, month=month + 1, day=min(value.day, 28))
