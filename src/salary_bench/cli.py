"""Salary benchmark command line interface.

Usage:
    python -m salary_bench                       # benchmark the default department
    python -m salary_bench run --department IT --format json
    python -m salary_bench init-db               # create tables and stored routine
    python -m salary_bench seed --employees 200 --months 36
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING, Callable, TextIO

from salary_bench.benchmark import BenchmarkRunner
from salary_bench.config import get_settings
from salary_bench.database import connection_scope, get_engine, init_db, session_scope
from salary_bench.errors import BenchmarkError
from salary_bench.procedures import install_procedure
from salary_bench.reporting import make_reporter
from salary_bench.seed import seed_demo_data

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class BenchCli:
    """Salary benchmark command line interface."""

    def __init__(self, stdout: TextIO | None = None) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout
        self.parser = self._build_parser()

    def _build_parser(self) -> argparse.ArgumentParser:
        """Build argument parser."""
        settings = get_settings()
        parser = argparse.ArgumentParser(
            prog="python -m salary_bench",
            description="Compare latest-salary query strategies",
        )
        parser.add_argument(
            "--database-url",
            default=settings.database_url,
            help="SQLAlchemy database URL (default: SALARY_BENCH_DATABASE_URL)",
        )
        parser.add_argument(
            "--log-level",
            default=settings.log_level,
            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
            help="Logging level",
        )
        subparsers = parser.add_subparsers(dest="command", help="Commands")

        # run command
        run = subparsers.add_parser("run", help="Time the three query variants")
        run.add_argument(
            "--department",
            default=settings.department,
            help=f"Department name to query (default: {settings.department})",
        )
        run.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            help="Output format (default: text)",
        )

        # init-db command
        subparsers.add_parser(
            "init-db",
            help="Create tables and install the stored routine",
        )

        # seed command
        seed = subparsers.add_parser("seed", help="Load demo departments, employees and salaries")
        seed.add_argument(
            "--employees",
            type=int,
            default=50,
            help="Employees per department (default: 50)",
        )
        seed.add_argument(
            "--months",
            type=int,
            default=24,
            help="Monthly salary rows per employee (default: 24)",
        )
        seed.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")

        parser.set_defaults(
            command="run",
            department=settings.department,
            format="text",
        )
        return parser

    def run(self, args: list[str] | None = None) -> int:
        """Run the CLI with given arguments."""
        parsed = self.parser.parse_args(args)
        logging.basicConfig(
            level=parsed.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

        handlers: dict[str, Callable[[argparse.Namespace, Engine], int]] = {
            "run": self._cmd_run,
            "init-db": self._cmd_init_db,
            "seed": self._cmd_seed,
        }
        handler = handlers.get(parsed.command)
        if handler is None:
            print(f"Unknown command: {parsed.command}", file=sys.stderr)
            return 1

        engine = get_engine(parsed.database_url)
        try:
            return handler(parsed, engine)
        except BenchmarkError:
            logger.exception("%s failed", parsed.command)
            return 1
        finally:
            engine.dispose()

    def _cmd_run(self, args: argparse.Namespace, engine: Engine) -> int:
        """Run the benchmark."""
        reporter = make_reporter(args.format, self.stdout, department=args.department)
        runner = BenchmarkRunner(engine, reporter)
        try:
            runner.run(args.department)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        reporter.finish()
        return 0

    def _cmd_init_db(self, args: argparse.Namespace, engine: Engine) -> int:
        """Create schema and stored routine."""
        init_db(engine)
        print("Created tables: departments, employees, salaries", file=self.stdout)
        with connection_scope(engine) as conn:
            if install_procedure(conn):
                print(f"Installed stored routine for {conn.dialect.name}", file=self.stdout)
            else:
                print(
                    f"No stored routine needed for {conn.dialect.name}",
                    file=self.stdout,
                )
        return 0

    def _cmd_seed(self, args: argparse.Namespace, engine: Engine) -> int:
        """Load demo data."""
        with session_scope(engine) as session:
            summary = seed_demo_data(
                session,
                employees_per_department=args.employees,
                months=args.months,
                seed=args.seed,
            )
        if summary.skipped:
            print("Database already has departments; nothing seeded", file=self.stdout)
        else:
            print(
                f"Seeded {summary.departments} departments, {summary.employees} employees, "
                f"{summary.salaries} salaries",
                file=self.stdout,
            )
        return 0


def main() -> int:
    """CLI entry point."""
    cli = BenchCli()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
