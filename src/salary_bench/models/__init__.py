"""SQLAlchemy ORM models."""

from salary_bench.models.base import Base
from salary_bench.models.organization import Department, Employee, Salary

__all__ = [
    "Base",
    "Department",
    "Employee",
    "Salary",
]
