"""
Unit tests for SQL core utilities: identifier, parameters, types.
"""

import pytest

from table_gateway.errors import ConfigurationError
from table_gateway.sql.core.identifier import quote_char_for, quote_identifier
from table_gateway.sql.core.parameters import (
    BoundParameter,
    bind_positional,
    build_indexed_params,
    to_indexed_placeholders,
)
from table_gateway.sql.core.types import ColumnSchema, ColumnType


class TestQuoteIdentifier:
    """Tests for quote_identifier function."""

    def test_quote_plain_name(self):
        """Plain names should be double-quoted."""
        assert quote_identifier("a") == '"a"'

    def test_quote_table_column(self):
        """Dotted names are quoted segment by segment."""
        assert quote_identifier("a.b") == '"a"."b"'

    def test_quote_table_star(self):
        """A star segment stays bare."""
        assert quote_identifier("a.*") == '"a".*'

    def test_quote_chinese_column(self):
        """Non-ASCII names should be double-quoted."""
        assert quote_identifier("年金计划号") == '"年金计划号"'

    def test_embedded_quotes_not_escaped(self):
        """Embedded quote characters are passed through untouched."""
        assert quote_identifier('col"x') == '"col"x"'

    def test_quote_mysql_dialect(self):
        """MySQL dialect should use backticks."""
        assert quote_identifier("a.b", dialect="mysql") == "`a`.`b`"
        assert quote_identifier("a.*", dialect="mariadb") == "`a`.*"

    @pytest.mark.parametrize("dialect", ["postgresql", "sqlite", "ansi", "unknown"])
    def test_non_mysql_dialects_use_double_quotes(self, dialect):
        assert quote_char_for(dialect) == '"'


class TestBindPositional:
    """Tests for bind_positional function."""

    def test_positions_start_at_one(self):
        params = bind_positional([("x", ColumnType.STRING), (2, ColumnType.INTEGER)])

        assert params == (
            BoundParameter(1, "x", ColumnType.STRING),
            BoundParameter(2, 2, ColumnType.INTEGER),
        )

    def test_empty(self):
        assert bind_positional([]) == ()


class TestIndexedPlaceholders:
    """Tests for named placeholder rewriting."""

    def test_build_indexed_params(self):
        assert build_indexed_params(3) == ["p_0", "p_1", "p_2"]

    def test_rewrite_placeholders(self):
        sql, names = to_indexed_placeholders('UPDATE "t" SET "a" = ? WHERE "id" = ?')

        assert sql == 'UPDATE "t" SET "a" = :p_0 WHERE "id" = :p_1'
        assert names == ["p_0", "p_1"]

    def test_question_marks_inside_quotes_are_kept(self):
        """Quoted identifiers and literals may contain '?'."""
        sql, names = to_indexed_placeholders("SELECT * FROM \"what?\" WHERE `x?` = '?' AND \"a\" = ?")

        assert sql == "SELECT * FROM \"what?\" WHERE `x?` = '?' AND \"a\" = :p_0"
        assert names == ["p_0"]

    def test_no_placeholders(self):
        assert to_indexed_placeholders('SELECT count(*) FROM "t"') == (
            'SELECT count(*) FROM "t"',
            [],
        )


class TestColumnSchema:
    """Tests for ColumnType parsing and ColumnSchema."""

    def test_parse_names_and_aliases(self):
        assert ColumnType.parse("integer") is ColumnType.INTEGER
        assert ColumnType.parse("INT") is ColumnType.INTEGER
        assert ColumnType.parse("str") is ColumnType.STRING
        assert ColumnType.parse(ColumnType.BOOLEAN) is ColumnType.BOOLEAN

    def test_parse_unknown_type(self):
        with pytest.raises(ConfigurationError, match="Invalid column type"):
            ColumnType.parse("decimal128", column="price")

    def test_schema_preserves_order(self):
        schema = ColumnSchema({"id": "integer", "name": "string", "active": "string"})

        assert list(schema) == ["id", "name", "active"]
        assert schema["name"] is ColumnType.STRING
        assert len(schema) == 3

    def test_schema_is_read_only(self):
        schema = ColumnSchema({"id": "integer"})

        with pytest.raises(TypeError):
            schema["id"] = ColumnType.STRING  # type: ignore[index]

    def test_empty_schema_rejected(self):
        with pytest.raises(ConfigurationError):
            ColumnSchema({})
