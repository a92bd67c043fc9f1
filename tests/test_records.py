"""Tests for result record mapping."""

from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from salary_bench.errors import RowMappingError
from salary_bench.queries import RECORD_COLUMNS, LatestSalaryRecord


class TestLatestSalaryRecord:
    """Test positional and named row mapping."""

    def test_from_row_maps_columns_in_order(self):
        """Test six positional values land in their fields."""
        record = LatestSalaryRecord.from_row(
            (1, "Alice", "Johnson", "Finance", Decimal("5500.00"), datetime(2023, 1, 1))
        )

        assert record.id == 1
        assert record.first_name == "Alice"
        assert record.last_name == "Johnson"
        assert record.department == "Finance"
        assert record.salary_amount == Decimal("5500.00")
        assert record.pay_date == datetime(2023, 1, 1)
        assert record.has_salary is True

    def test_from_row_allows_missing_salary(self):
        """Test NULL salary columns map to None."""
        record = LatestSalaryRecord.from_row((5, "Frank", "Jones", "HR", None, None))

        assert record.salary_amount is None
        assert record.has_salary is False

    def test_from_row_rejects_wrong_width(self):
        """Test rows with a missing column are rejected."""
        with pytest.raises(RowMappingError) as exc_info:
            LatestSalaryRecord.from_row((1, "Alice", "Johnson", "Finance", Decimal("1.00")))

        assert "expected 6 columns, got 5" in str(exc_info.value)
        assert exc_info.value.row == (1, "Alice", "Johnson", "Finance", Decimal("1.00"))

    def test_from_row_rejects_invalid_value(self):
        """Test a non-numeric id is rejected."""
        with pytest.raises(RowMappingError):
            LatestSalaryRecord.from_row(
                ("abc", "Alice", "Johnson", "Finance", Decimal("1.00"), datetime(2023, 1, 1))
            )

    def test_from_mapping_requires_all_columns(self):
        """Test named rows must carry every record column."""
        mapping = dict.fromkeys(RECORD_COLUMNS[:-1], None)

        with pytest.raises(RowMappingError) as exc_info:
            LatestSalaryRecord.from_mapping(mapping)

        assert "pay_date" in exc_info.value.reason

    def test_records_are_frozen(self):
        """Test records cannot be mutated after mapping."""
        record = LatestSalaryRecord.from_row((5, "Frank", "Jones", "HR", None, None))

        with pytest.raises(ValidationError):
            record.first_name = "Changed"
