"""Pytest fixtures for salary benchmark tests."""

from __future__ import annotations

from collections.abc import Generator
from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from salary_bench.database import init_db
from salary_bench.models import Department, Employee, Salary

# In-memory SQLite shared across connections of one engine
TEST_DATABASE_URL = "sqlite+pysqlite:///:memory:"


def add_employee(
    session: Session,
    department: Department,
    first_name: str,
    last_name: str,
    *salaries: tuple[datetime, str],
) -> Employee:
    """Add an employee with (pay_date, amount) salary rows."""
    employee = Employee(first_name=first_name, last_name=last_name, department=department)
    for pay_date, amount in salaries:
        employee.salaries.append(Salary(pay_date=pay_date, salary_amount=Decimal(amount)))
    session.add(employee)
    return employee


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Create an empty test database with the schema."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session, None, None]:
    """Create a database session for each test."""
    with Session(engine, expire_on_commit=False) as session:
        yield session
        session.rollback()


@pytest.fixture
def populated_engine(engine: Engine) -> Engine:
    """Database with three departments.

    - Finance: Alice, Bob and Dave, all with salaries
    - HR: Erin with salaries, Frank without any
    - IT: no employees
    """
    with Session(engine) as session:
        finance = Department(name="Finance")
        hr = Department(name="HR")
        it = Department(name="IT")
        session.add_all([finance, hr, it])

        add_employee(
            session, finance, "Dave", "Miller",
            (datetime(2023, 1, 1), "6100.00"),
            (datetime(2023, 6, 1), "6300.00"),
        )
        add_employee(
            session, finance, "Alice", "Johnson",
            (datetime(2022, 1, 1), "5000.00"),
            (datetime(2023, 1, 1), "5500.00"),
        )
        add_employee(
            session, finance, "Bob", "Smith",
            (datetime(2023, 6, 1), "4200.00"),
            (datetime(2023, 1, 1), "4000.00"),
        )
        add_employee(
            session, hr, "Erin", "Garcia",
            (datetime(2023, 3, 1), "4700.00"),
        )
        add_employee(session, hr, "Frank", "Jones")
        session.commit()
    return engine
