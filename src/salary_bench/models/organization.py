"""Department, employee and salary models."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import BigInteger, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from salary_bench.models.base import Base

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
SalaryId = BigInteger().with_variant(Integer(), "sqlite")


class Department(Base):
    """Organizational department."""

    __tablename__ = "departments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    # Relationships
    employees: Mapped[list[Employee]] = relationship(back_populates="department")

    def __repr__(self) -> str:
        return f"Department(id={self.id!r}, name={self.name!r})"


class Employee(Base):
    """Employee belonging to exactly one department."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    department_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("departments.id", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (Index("ix_employees_department_id", "department_id"),)

    # Relationships
    department: Mapped[Department] = relationship(back_populates="employees")
    salaries: Mapped[list[Salary]] = relationship(back_populates="employee")

    @property
    def full_name(self) -> str:
        """Get full name."""
        return f"{self.first_name} {self.last_name}"

    def latest_salary(self) -> Salary | None:
        """Return the salary with the greatest pay date, if any.

        Equal pay dates resolve to the row with the highest id.
        """
        if not self.salaries:
            return None
        return max(self.salaries, key=lambda s: (s.pay_date, s.id))

    def __repr__(self) -> str:
        return f"Employee(id={self.id!r}, name={self.full_name!r})"


class Salary(Base):
    """A single salary payment to an employee."""

    __tablename__ = "salaries"

    id: Mapped[int] = mapped_column(SalaryId, primary_key=True)
    employee_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("employees.id", ondelete="CASCADE"),
        nullable=False,
    )
    salary_amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    pay_date: Mapped[datetime] = mapped_column(nullable=False)

    __table_args__ = (Index("ix_salaries_employee_id_pay_date", "employee_id", "pay_date"),)

    # Relationships
    employee: Mapped[Employee] = relationship(back_populates="salaries")

    def __repr__(self) -> str:
        return (
            f"Salary(id={self.id!r}, employee_id={self.employee_id!r}, "
            f"amount={self.salary_amount!r}, pay_date={self.pay_date!r})"
        )
