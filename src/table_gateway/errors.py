"""
Exception hierarchy for the table gateway.

All errors raised by the gateway itself derive from ``DaoError``. Errors
raised by the database driver (connectivity, constraint violations) are not
translated and propagate unchanged.
"""

from typing import Optional


class DaoError(Exception):
    """Base exception for all gateway errors."""

    pass


class ConfigurationError(DaoError):
    """
    Raised when a gateway is constructed with an invalid configuration.

    This is a programmer error: the column schema or the configuration bag
    does not satisfy the gateway invariants.

    Args:
        message: Error description
        setting: Name of the offending configuration entry (optional)
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        self.setting = setting

        if setting:
            full_message = f"{message} (setting='{setting}')"
        else:
            full_message = message

        super().__init__(full_message)


class QueryBuildError(DaoError):
    """
    Raised when a filter or order-by specification cannot be compiled.

    Raised before any SQL executes.

    Args:
        reason: Error description
        clause: Which specification list failed ("filter" or "orderBy")
        position: Index of the offending entry in its list (optional)
    """

    def __init__(
        self,
        reason: str,
        clause: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.reason = reason
        self.clause = clause
        self.position = position

        # Build contextual error message
        context_parts = []
        if clause:
            context_parts.append(f"clause='{clause}'")
        if position is not None:
            context_parts.append(f"position={position}")

        if context_parts:
            full_message = f"{reason} ({', '.join(context_parts)})"
        else:
            full_message = reason

        super().__init__(full_message)


class MissingKeyError(DaoError):
    """
    Raised when create/update is called without a required key value.

    Args:
        key: Name of the key property
        operation: Operation that required it ("create" or "update")
    """

    def __init__(self, key: str, operation: str):
        self.key = key
        self.operation = operation
        super().__init__(f"Missing key property '{key}' on {operation}")
