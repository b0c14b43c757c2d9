"""
Loader for YAML DAO definitions.

A definitions file maps a DAO name to the table it wraps, its column schema
and its gateway configuration::

    users:
      table: users
      columns:
        id: integer
        name: string
        active: string
      configuration:
        key: id
        deleteMethod: deactivate
        deactivateColumn: active

Structure is validated with Pydantic; the gateway configuration itself is
validated when the gateway is built from the definition.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from table_gateway.config.settings import get_settings
from table_gateway.errors import ConfigurationError
from table_gateway.sql.core.types import ColumnSchema
from table_gateway.utils.logging import get_logger

logger = get_logger(__name__)


class DaoDefinition(BaseModel):
    """Schema for one DAO entry of a definitions file."""

    model_config = ConfigDict(frozen=True)

    table: str = Field(..., min_length=1, description="Table name, optionally schema-qualified")
    columns: Dict[str, str] = Field(..., min_length=1, description="Column name → type name")
    configuration: Dict[str, Any] = Field(..., description="Gateway configuration bag")

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: Dict[str, str]) -> Dict[str, str]:
        try:
            ColumnSchema(v)
        except ConfigurationError as e:
            raise ValueError(str(e)) from e
        return v


def _resolve_path(path: Optional[str]) -> Path:
    if path is None:
        path = get_settings().dao_definitions_file
    if not path:
        raise ConfigurationError(
            "No DAO definitions file given and TG_DAO_DEFINITIONS_FILE is not set"
        )
    return Path(path)


def load_dao_definitions(path: Optional[str] = None) -> Dict[str, DaoDefinition]:
    """
    Load and validate a YAML DAO definitions file.

    Args:
        path: Path to the YAML file; defaults to settings.dao_definitions_file

    Returns:
        Mapping of DAO name to its definition

    Raises:
        ConfigurationError: If the file is missing, not valid YAML, or its
            structure is invalid
    """
    config_path = _resolve_path(path)
    if not config_path.exists():
        raise ConfigurationError(f"DAO definitions file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in DAO definitions file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError("DAO definitions file must contain a mapping")

    definitions: Dict[str, DaoDefinition] = {}
    for name, entry in data.items():
        try:
            definitions[str(name)] = DaoDefinition.model_validate(entry)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid DAO definition: {e}", setting=str(name)
            ) from e

    logger.debug(
        "dao_loader.load_dao_definitions.completed",
        path=str(config_path),
        definition_count=len(definitions),
    )
    return definitions


def load_dao_definition(name: str, path: Optional[str] = None) -> DaoDefinition:
    """
    Load one DAO definition by name.

    Raises:
        ConfigurationError: If validation fails or the name is not defined
    """
    definitions = load_dao_definitions(path)
    if name not in definitions:
        raise ConfigurationError(f"DAO '{name}' not found in definitions file")
    return definitions[name]
