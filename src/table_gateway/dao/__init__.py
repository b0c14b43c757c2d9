"""Table gateway (DAO) layer."""

from .configuration import DaoConfiguration, DeleteMethod, build_configuration
from .connection import DaoConnection, PreparedStatement
from .gateway import Record, TableGateway

__all__ = [
    "DaoConfiguration",
    "DeleteMethod",
    "build_configuration",
    "DaoConnection",
    "PreparedStatement",
    "Record",
    "TableGateway",
]
