"""
Tests for running $N-placeholder SQL through SQLAlchemy.
"""

import pytest

from app.core.database import bind_positional, execute
from app.core.sql import sql_for_filtered_data
from app.crud.job import JOB_FILTERS


class TestBindPositional:
    """Tests for bind_positional"""

    def test_rewrites_placeholders(self):
        statement, params = bind_positional(
            'UPDATE jobs SET "title"=$1, "salary"=$2 WHERE id = $3',
            ["new", 10, 7],
        )

        assert statement == 'UPDATE jobs SET "title"=:p1, "salary"=:p2 WHERE id = :p3'
        assert params == {"p1": "new", "p2": 10, "p3": 7}

    def test_double_digit_placeholders(self):
        values = list(range(1, 12))
        sql = " AND ".join(f"c{i} = ${i}" for i in values)

        statement, params = bind_positional(sql, values)

        assert statement.endswith("c11 = :p11")
        assert "c1 = :p1 " in statement
        assert params["p11"] == 11

    def test_literal_only_clause(self):
        statement, params = bind_positional('SELECT 1 WHERE "equity" >= 0', [])

        assert statement == 'SELECT 1 WHERE "equity" >= 0'
        assert params == {}

    def test_missing_value_fails(self):
        with pytest.raises(ValueError):
            bind_positional("SELECT $2", ["only one"])


class TestExecute:
    """Tests for execute against the test database"""

    def test_filter_clause_runs(self, db_session, seed):
        filter_cols, values = sql_for_filtered_data({"minSalary": 150, "hasEquity": True}, JOB_FILTERS)

        rows = execute(
            db_session,
            f"SELECT title FROM jobs WHERE {filter_cols} ORDER BY title",
            values,
        ).mappings().all()

        assert [row["title"] for row in rows] == ["j2"]
