"""
SQL identifier handling utilities.

Provides quoting of table and column names for the supported dialects.
Dotted names are quoted segment by segment and a bare ``*`` segment is kept
as-is, so ``table``, ``table.column`` and ``table.*`` all render correctly.

Quoting only prevents identifier syntax errors; it is not an injection
guard. Only schema-defined names may be passed here, values are always bound
as parameters.
"""

ANSI_QUOTE = '"'
MYSQL_QUOTE = "`"

# Dialect names that quote identifiers with backticks
BACKTICK_DIALECTS = frozenset({"mysql", "mariadb"})


def quote_char_for(dialect: str) -> str:
    """Return the identifier quote character for a dialect name."""
    if dialect.lower() in BACKTICK_DIALECTS:
        return MYSQL_QUOTE
    return ANSI_QUOTE


def quote_identifier(name: str, dialect: str = "ansi") -> str:
    """
    Quote a SQL identifier (table or column name).

    Args:
        name: The identifier to quote, optionally dotted
        dialect: Database dialect name ("postgresql", "sqlite", "mysql", ...)

    Returns:
        Properly quoted identifier

    Examples:
        >>> quote_identifier("users")
        '"users"'
        >>> quote_identifier("users.name")
        '"users"."name"'
        >>> quote_identifier("users.*")
        '"users".*'
        >>> quote_identifier("users.name", dialect="mysql")
        '`users`.`name`'
    """
    quote = quote_char_for(dialect)
    parts = [
        part if part == "*" else f"{quote}{part}{quote}" for part in name.split(".")
    ]
    return ".".join(parts)
