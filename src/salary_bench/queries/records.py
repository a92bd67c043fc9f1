"""Typed result records shared by all query variants."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError

from salary_bench.errors import RowMappingError

if TYPE_CHECKING:
    from salary_bench.models import Employee, Salary

# Column order returned by GetLatestSalariesByDepartment.
RECORD_COLUMNS: tuple[str, ...] = (
    "id",
    "first_name",
    "last_name",
    "department",
    "salary_amount",
    "pay_date",
)


class LatestSalaryRecord(BaseModel):
    """One employee together with their latest salary payment."""

    model_config = ConfigDict(frozen=True)

    id: int
    first_name: str
    last_name: str
    department: str
    salary_amount: Decimal | None = None
    pay_date: datetime | None = None

    @classmethod
    def from_employee(cls, employee: Employee, latest: Salary | None) -> LatestSalaryRecord:
        """Build a record from ORM objects."""
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            department=employee.department.name,
            salary_amount=latest.salary_amount if latest is not None else None,
            pay_date=latest.pay_date if latest is not None else None,
        )

    @classmethod
    def from_mapping(cls, mapping: dict[str, Any]) -> LatestSalaryRecord:
        """Build a record from a named row mapping.

        Raises:
            RowMappingError: If a column is missing or fails validation
        """
        missing = [name for name in RECORD_COLUMNS if name not in mapping]
        if missing:
            raise RowMappingError(mapping, f"missing columns {missing}")
        try:
            return cls(**{name: mapping[name] for name in RECORD_COLUMNS})
        except ValidationError as e:
            raise RowMappingError(mapping, str(e)) from e

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> LatestSalaryRecord:
        """Build a record from a positional row.

        Raises:
            RowMappingError: If the row width is wrong or a value fails validation
        """
        values = tuple(row)
        if len(values) != len(RECORD_COLUMNS):
            raise RowMappingError(
                values,
                f"expected {len(RECORD_COLUMNS)} columns, got {len(values)}",
            )
        try:
            return cls(**dict(zip(RECORD_COLUMNS, values)))
        except ValidationError as e:
            raise RowMappingError(values, str(e)) from e

    @property
    def has_salary(self) -> bool:
        """Whether the employee has any salary payment."""
        return self.pay_date is not None
