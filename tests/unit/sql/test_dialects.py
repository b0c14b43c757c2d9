"""
Unit tests for SQL dialects.
"""

import pytest

from table_gateway.sql.core.types import ColumnType
from table_gateway.sql.dialects import (
    AnsiDialect,
    MySQLDialect,
    PostgreSQLDialect,
    SQLiteDialect,
    get_dialect,
)


class TestGetDialect:
    """Tests for dialect resolution."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("sqlite", SQLiteDialect),
            ("postgresql", PostgreSQLDialect),
            ("pgsql", PostgreSQLDialect),
            ("MySQL", MySQLDialect),
            ("mariadb", MySQLDialect),
            ("oracle", AnsiDialect),
            ("", AnsiDialect),
        ],
    )
    def test_resolves_by_name(self, name, expected):
        assert type(get_dialect(name)) is expected


class TestAnsiDialect:
    """Tests for the ANSI base dialect."""

    @pytest.fixture
    def dialect(self):
        return AnsiDialect()

    def test_quote(self, dialect):
        assert dialect.quote("users.name") == '"users"."name"'

    def test_flag_literal_string_column(self, dialect):
        """String flag columns get a quoted literal."""
        assert dialect.flag_literal(1, ColumnType.STRING) == "'1'"

    @pytest.mark.parametrize("column_type", [ColumnType.INTEGER, ColumnType.BOOLEAN])
    def test_flag_literal_other_columns(self, dialect, column_type):
        assert dialect.flag_literal(0, column_type) == "0"

    def test_build_insert(self, dialect):
        sql = dialect.build_insert("users", ["name", "active"])

        assert sql == 'INSERT INTO "users" ("name", "active") VALUES (?, ?)'

    def test_default_values_not_supported(self, dialect):
        """Without DEFAULT VALUES an empty column list is emitted."""
        assert dialect.build_default_values_insert("users") == 'INSERT INTO "users" () VALUES ()'


class TestEngineDialects:
    """Tests for engine-specific dialects."""

    @pytest.mark.parametrize("dialect", [SQLiteDialect(), PostgreSQLDialect()])
    def test_default_values_insert(self, dialect):
        assert dialect.build_default_values_insert("t") == 'INSERT INTO "t" DEFAULT VALUES'

    def test_postgresql_boolean_flag_literal(self):
        """PostgreSQL compares boolean columns with TRUE/FALSE, not 1/0."""
        dialect = PostgreSQLDialect()

        assert dialect.flag_literal(1, ColumnType.BOOLEAN) == "TRUE"
        assert dialect.flag_literal(0, ColumnType.BOOLEAN) == "FALSE"
        assert dialect.flag_literal(1, ColumnType.STRING) == "'1'"
        assert dialect.flag_literal(0, ColumnType.INTEGER) == "0"

    def test_returning_support(self):
        assert PostgreSQLDialect().supports_returning
        assert not SQLiteDialect().supports_returning
        assert not MySQLDialect().supports_returning

    def test_mysql_quotes_with_backticks(self):
        dialect = MySQLDialect()

        assert dialect.quote("users.*") == "`users`.*"
        assert dialect.build_insert("users", ["name"]) == "INSERT INTO `users` (`name`) VALUES (?)"

    def test_mysql_all_defaults_insert(self):
        assert MySQLDialect().build_default_values_insert("t") == "INSERT INTO `t` () VALUES ()"
