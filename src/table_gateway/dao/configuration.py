"""
Gateway configuration validation.

The configuration bag accepted by a gateway uses the keys::

    key                 (required) primary key property
    keyIsAutogenerated  (bool, default True) key assigned by the database
    deleteMethod        ("delete" | "deactivate", default "delete")
    deactivateColumn    flag column, required for deleteMethod=deactivate
    activeValue         (int, default 1) flag value of an active row
    inactiveValue       (int, default 0) flag value of a deactivated row

snake_case spellings are accepted as well. Unknown keys are ignored. The
result is a frozen ``DaoConfiguration``; every violation is reported as a
``ConfigurationError`` at construction time.
"""

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from table_gateway.errors import ConfigurationError
from table_gateway.sql.core.types import ColumnSchema

# Values accepted for deleteMethod besides the canonical ones
_DELETE_METHOD_ALIASES = {
    "deletemethoddelete": "delete",
    "deletemethoddeactivate": "deactivate",
}


class DeleteMethod(str, Enum):
    """How ``delete`` removes a row."""

    DELETE = "delete"
    DEACTIVATE = "deactivate"


class DaoConfiguration(BaseModel):
    """Validated, immutable gateway configuration."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    key: StrictStr = Field(..., min_length=1, description="Primary key property")
    key_is_autogenerated: StrictBool = Field(
        default=True,
        validation_alias=AliasChoices("keyIsAutogenerated", "key_is_autogenerated"),
        description="Key assigned by the database (auto-increment)",
    )
    delete_method: DeleteMethod = Field(
        default=DeleteMethod.DELETE,
        validation_alias=AliasChoices("deleteMethod", "delete_method"),
        description="Hard delete or soft deactivate",
    )
    deactivate_column: Optional[StrictStr] = Field(
        default=None,
        validation_alias=AliasChoices("deactivateColumn", "deactivate_column"),
        description="Flag column used by soft deletes",
    )
    active_value: StrictInt = Field(
        default=1,
        validation_alias=AliasChoices("activeValue", "active_value"),
        description="Flag value of an active row",
    )
    inactive_value: StrictInt = Field(
        default=0,
        validation_alias=AliasChoices("inactiveValue", "inactive_value"),
        description="Flag value of a deactivated row",
    )

    @field_validator("delete_method", mode="before")
    @classmethod
    def _accept_delete_method_aliases(cls, v: Any) -> Any:
        if isinstance(v, str):
            normalized = v.strip().lower()
            return _DELETE_METHOD_ALIASES.get(normalized, normalized)
        return v

    @model_validator(mode="after")
    def _check_against_columns(self, info: ValidationInfo) -> "DaoConfiguration":
        columns = (info.context or {}).get("columns")
        if columns is not None:
            if self.key not in columns:
                raise ValueError(f"key '{self.key}' is not a column of the schema")
            if self.deactivate_column is not None and self.deactivate_column not in columns:
                raise ValueError(
                    f"deactivateColumn '{self.deactivate_column}' is not a column of the schema"
                )

        if self.delete_method is DeleteMethod.DEACTIVATE and self.deactivate_column is None:
            raise ValueError("deactivateColumn is required when deleteMethod is 'deactivate'")
        if self.active_value == self.inactive_value:
            raise ValueError("activeValue and inactiveValue must differ")
        return self

    @property
    def soft_deletes(self) -> bool:
        return self.delete_method is DeleteMethod.DEACTIVATE


def _format_validation_error(exc: ValidationError) -> ConfigurationError:
    first = exc.errors()[0]
    setting = ".".join(str(part) for part in first.get("loc", ())) or None
    message = first.get("msg", str(exc))
    if first.get("type") == "missing":
        message = "Setting is mandatory"
    return ConfigurationError(f"Invalid gateway configuration: {message}", setting=setting)


def build_configuration(
    columns: ColumnSchema, configuration: Optional[Mapping[str, Any]]
) -> DaoConfiguration:
    """
    Validate a configuration bag against a column schema.

    Args:
        columns: Column schema of the table
        configuration: Configuration bag (see module docstring)

    Returns:
        Frozen DaoConfiguration

    Raises:
        ConfigurationError: If the bag is not a mapping or violates any rule

    Examples:
        >>> schema = ColumnSchema({"id": "integer", "name": "string"})
        >>> build_configuration(schema, {"key": "id"}).key_is_autogenerated
        True
    """
    if not isinstance(configuration, Mapping):
        raise ConfigurationError("Invalid configuration. It must be a mapping")

    try:
        return DaoConfiguration.model_validate(
            dict(configuration), context={"columns": columns}
        )
    except ValidationError as e:
        raise _format_validation_error(e) from e
