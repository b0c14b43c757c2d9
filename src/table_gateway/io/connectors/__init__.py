"""Database connectors implementing the gateway connection contract."""

from .sqlalchemy_connection import SQLAlchemyConnection, SQLAlchemyStatement

__all__ = ["SQLAlchemyConnection", "SQLAlchemyStatement"]
