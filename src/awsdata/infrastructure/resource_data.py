"""Schema-checked attribute store handed to data source read functions."""

from typing import Any, Optional

from awsdata.domain.base.exceptions import SchemaValidationError
from awsdata.domain.base.ports.attribute_store_port import AttributeStorePort
from awsdata.domain.schema import Schema, SchemaField, ValueType


class ResourceData(AttributeStorePort):
    """
    In-memory attribute store for a single data source read.

    Values supplied by the caller (``config``) and values written by the read
    function (``set``) are kept apart; a written value shadows the
    configured one, matching how the host framework reports computed
    attributes after a refresh.
    """

    def __init__(self, schema: Schema, config: Optional[dict[str, Any]] = None) -> None:
        self._schema = schema
        self._config: dict[str, Any] = {}
        self._state: dict[str, Any] = {}
        self._id = ""

        for key, value in (config or {}).items():
            field = self._field(key)
            if value is None:
                continue
            self._config[key] = self._coerce(key, field, value)

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        if not isinstance(value, str):
            raise SchemaValidationError(f"id must be a string, got {type(value).__name__}")
        self._id = value

    def get(self, key: str) -> Any:
        field = self._field(key)
        if key in self._state:
            return self._copy(self._state[key])
        if key in self._config:
            return self._copy(self._config[key])
        return field.type.zero_value()

    def get_ok(self, key: str) -> tuple[Any, bool]:
        field = self._field(key)
        value = self.get(key)
        return value, value != field.type.zero_value()

    def has_config(self, key: str) -> bool:
        self._field(key)
        return key in self._config

    def set(self, key: str, value: Any) -> None:
        field = self._field(key)
        if value is None:
            # written as unset: the zero value, never the configured value
            self._state[key] = field.type.zero_value()
            return
        self._state[key] = self._coerce(key, field, value)

    def validate(self) -> None:
        """
        Check the caller configuration against the schema.

        Raises:
            SchemaValidationError: If a required attribute is missing or a
                computed-only attribute was configured
        """
        errors = []
        for key, field in self._schema.items():
            if field.required and key not in self._config:
                errors.append(f"{key}: required attribute is not set")
            if key in self._config and not field.configurable:
                errors.append(f"{key}: computed attribute cannot be configured")
        if errors:
            raise SchemaValidationError(
                f"Invalid configuration - {'; '.join(errors)}",
                details={"errors": errors},
            )

    def to_dict(self) -> dict[str, Any]:
        """Flat snapshot of every schema attribute plus the id."""
        result: dict[str, Any] = {"id": self._id}
        for key in self._schema:
            result[key] = self.get(key)
        return result

    def _field(self, key: str) -> SchemaField:
        try:
            return self._schema[key]
        except KeyError:
            raise SchemaValidationError(
                f"Unknown attribute: {key}", details={"attribute": key}
            ) from None

    @staticmethod
    def _copy(value: Any) -> Any:
        return list(value) if isinstance(value, list) else value

    @staticmethod
    def _coerce(key: str, field: SchemaField, value: Any) -> Any:
        if not field.check(value):
            raise SchemaValidationError(
                f"Attribute {key} expects {field.type.value}"
                + (f" of {field.elem.value}" if field.elem else "")
                + f", got {value!r}",
                details={"attribute": key, "expected": field.type.value},
            )
        if field.type is ValueType.LIST:
            return list(value)
        if field.type is ValueType.FLOAT:
            return float(value)
        return value
