"""Tests for the command line interface."""

import io
import json

import pytest

from salary_bench.cli import BenchCli


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+pysqlite:///{tmp_path / 'bench.db'}"


def run_cli(*args):
    out = io.StringIO()
    code = BenchCli(stdout=out).run(list(args))
    return code, out.getvalue()


class TestBenchCli:
    """Test CLI commands end to end against SQLite."""

    def test_init_seed_run(self, database_url):
        """Test creating, seeding and benchmarking a database."""
        code, out = run_cli("--database-url", database_url, "init-db")
        assert code == 0
        assert "Created tables" in out
        assert "No stored routine needed for sqlite" in out

        code, out = run_cli(
            "--database-url", database_url, "seed", "--employees", "4", "--months", "3"
        )
        assert code == 0
        assert "Seeded 5 departments, 20 employees, 60 salaries" in out

        code, out = run_cli("--database-url", database_url, "run", "--department", "Finance")
        lines = out.splitlines()
        assert code == 0
        assert len(lines) == 6
        assert lines[1].startswith("Original ORM: 4 records in ")
        assert lines[3].startswith("Optimized ORM: 4 records in ")
        assert lines[5].startswith("Stored Procedure: 4 records in ")
        assert lines[0] == lines[2] == lines[4]

    def test_seed_twice_skips(self, database_url):
        """Test re-seeding leaves existing data alone."""
        run_cli("--database-url", database_url, "init-db")
        run_cli("--database-url", database_url, "seed", "--employees", "1", "--months", "1")

        code, out = run_cli("--database-url", database_url, "seed")

        assert code == 0
        assert "nothing seeded" in out

    def test_run_json_unknown_department(self, database_url):
        """Test JSON output for a department with no employees."""
        run_cli("--database-url", database_url, "init-db")

        code, out = run_cli(
            "--database-url", database_url, "run", "--department", "Nonexistent", "--format", "json"
        )
        document = json.loads(out)

        assert code == 0
        assert document["department"] == "Nonexistent"
        assert [v["count"] for v in document["variants"]] == [0, 0, 0]

    def test_run_is_default_command(self, database_url):
        """Test no subcommand benchmarks the configured department."""
        run_cli("--database-url", database_url, "init-db")

        code, out = run_cli("--database-url", database_url)

        lines = out.splitlines()
        assert code == 0
        assert lines[0] == "(no records)"
        assert lines[1].startswith("Original ORM: 0 records in ")

    def test_run_without_schema_fails(self, database_url):
        """Test query failures exit with status 1."""
        code, _ = run_cli("--database-url", database_url, "run")

        assert code == 1

    def test_blank_department_fails(self, database_url):
        """Test an empty department name exits with status 1."""
        run_cli("--database-url", database_url, "init-db")

        code, _ = run_cli("--database-url", database_url, "run", "--department", "")

        assert code == 1
