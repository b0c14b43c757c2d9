"""
Unit tests for SQL statement builders.
"""

import pytest

from table_gateway.sql.core.parameters import BoundParameter
from table_gateway.sql.core.statement import Clause
from table_gateway.sql.core.types import ColumnType
from table_gateway.sql.dialects import MySQLDialect, PostgreSQLDialect, SQLiteDialect
from table_gateway.sql.operations import (
    DeleteBuilder,
    InsertBuilder,
    SelectBuilder,
    UpdateBuilder,
)

INT = ColumnType.INTEGER
STR = ColumnType.STRING


class TestInsertBuilder:
    """Tests for InsertBuilder."""

    def test_insert_binds_in_column_order(self):
        statement = InsertBuilder(PostgreSQLDialect()).insert(
            "app.users", [("name", "x", STR), ("age", 3, INT)]
        )

        assert statement.sql == 'INSERT INTO "app"."users" ("name", "age") VALUES (?, ?)'
        assert statement.parameters == (
            BoundParameter(1, "x", STR),
            BoundParameter(2, 3, INT),
        )

    def test_empty_columns_insert_defaults(self):
        statement = InsertBuilder(SQLiteDialect()).insert("users", [])

        assert statement.sql == 'INSERT INTO "users" DEFAULT VALUES'
        assert statement.parameters == ()

    def test_returning_on_postgresql(self):
        builder = InsertBuilder(PostgreSQLDialect())

        statement = builder.insert("users", [("name", "x", STR)], returning="id")
        defaults = builder.insert("users", [], returning="id")

        assert statement.sql == 'INSERT INTO "users" ("name") VALUES (?) RETURNING "id"'
        assert statement.parameters == (BoundParameter(1, "x", STR),)
        assert defaults.sql == 'INSERT INTO "users" DEFAULT VALUES RETURNING "id"'

    def test_returning_ignored_without_dialect_support(self):
        statement = InsertBuilder(SQLiteDialect()).insert(
            "users", [("name", "x", STR)], returning="id"
        )

        assert statement.sql == 'INSERT INTO "users" ("name") VALUES (?)'

    def test_mysql_insert_defaults(self):
        statement = InsertBuilder(MySQLDialect()).insert_defaults("users")

        assert statement.sql == "INSERT INTO `users` () VALUES ()"


class TestSelectBuilder:
    """Tests for SelectBuilder."""

    @pytest.fixture
    def builder(self):
        return SelectBuilder(SQLiteDialect())

    def test_count_without_where(self, builder):
        assert builder.count("users").sql == 'SELECT count(*) FROM "users"'

    def test_count_with_where(self, builder):
        where = Clause('WHERE "id" = ?', (BoundParameter(1, 5, INT),))

        statement = builder.count("users", where)

        assert statement.sql == 'SELECT count(*) FROM "users" WHERE "id" = ?'
        assert statement.parameters == where.parameters

    def test_select_with_where_and_order(self, builder):
        where = Clause("WHERE \"active\" = '1'")

        statement = builder.select("users", where, 'ORDER BY "name" DESC')

        assert statement.sql == (
            "SELECT * FROM \"users\" WHERE \"active\" = '1' ORDER BY \"name\" DESC"
        )
        assert statement.parameters == ()

    def test_select_all(self, builder):
        assert builder.select("users").sql == 'SELECT * FROM "users"'

    def test_by_key(self, builder):
        statement = builder.by_key("users", "id", 7, INT)

        assert statement.sql == 'SELECT * FROM "users" WHERE "id" = ?'
        assert statement.parameters == (BoundParameter(1, 7, INT),)


class TestUpdateBuilder:
    """Tests for UpdateBuilder."""

    @pytest.fixture
    def builder(self):
        return UpdateBuilder(SQLiteDialect())

    def test_update_binds_key_last(self, builder):
        statement = builder.update(
            "users", [("name", "y", STR), ("age", 4, INT)], "id", 9, INT
        )

        assert statement.sql == 'UPDATE "users" SET "name" = ?, "age" = ? WHERE "id" = ?'
        assert [p.value for p in statement.parameters] == ["y", 4, 9]
        assert [p.position for p in statement.parameters] == [1, 2, 3]

    def test_update_key_binds_new_then_old(self, builder):
        statement = builder.update_key("users", "code", "old", "new", STR)

        assert statement.sql == 'UPDATE "users" SET "code" = ? WHERE "code" = ?'
        assert statement.parameters == (
            BoundParameter(1, "new", STR),
            BoundParameter(2, "old", STR),
        )

    def test_set_flag_inlines_literal(self, builder):
        statement = builder.set_flag("users", "active", "'0'", "id", 3, INT)

        assert statement.sql == "UPDATE \"users\" SET \"active\" = '0' WHERE \"id\" = ?"
        assert statement.parameters == (BoundParameter(1, 3, INT),)


class TestDeleteBuilder:
    """Tests for DeleteBuilder."""

    def test_delete(self):
        statement = DeleteBuilder(MySQLDialect()).delete("users", "id", 3, INT)

        assert statement.sql == "DELETE FROM `users` WHERE `id` = ?"
        assert statement.parameters == (BoundParameter(1, 3, INT),)
