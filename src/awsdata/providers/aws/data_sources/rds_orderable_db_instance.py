"""aws_rds_orderable_db_instance data source."""

from typing import Optional

from pydantic import ValidationError

from awsdata.domain.base.exceptions import SchemaValidationError
from awsdata.domain.base.ports import AttributeStorePort, LoggingPort
from awsdata.domain.schema import Schema, SchemaField, ValueType
from awsdata.providers.aws.domain.rds.orderable_db_instance import (
    OrderableDBInstanceCriteria,
    OrderableDBInstanceOption,
)
from awsdata.providers.aws.infrastructure.aws_client import AWSClient
from awsdata.providers.aws.services.rds.orderable_db_instance_resolver import (
    OrderableDBInstanceResolver,
)

NAME = "aws_rds_orderable_db_instance"

_STRING_CRITERIA = (
    "availability_zone_group",
    "db_instance_class",
    "engine_version",
    "license_model",
    "storage_type",
)


def _computed(value_type: ValueType, elem: Optional[ValueType] = None) -> SchemaField:
    return SchemaField(value_type, computed=True, elem=elem)


def _criterion(value_type: ValueType) -> SchemaField:
    return SchemaField(value_type, optional=True, computed=True)


SCHEMA: Schema = {
    "availability_zone_group": _criterion(ValueType.STRING),
    "availability_zones": _computed(ValueType.LIST, ValueType.STRING),
    "db_instance_class": _criterion(ValueType.STRING),
    "engine": SchemaField(ValueType.STRING, required=True),
    "engine_version": _criterion(ValueType.STRING),
    "license_model": _criterion(ValueType.STRING),
    "max_iops_per_db_instance": _computed(ValueType.INT),
    "max_iops_per_gib": _computed(ValueType.FLOAT),
    "max_storage_size": _computed(ValueType.INT),
    "min_iops_per_db_instance": _computed(ValueType.INT),
    "min_iops_per_gib": _computed(ValueType.FLOAT),
    "min_storage_size": _computed(ValueType.INT),
    "multi_az_capable": _computed(ValueType.BOOL),
    "outpost_capable": _computed(ValueType.BOOL),
    "preferred_db_instance_classes": SchemaField(
        ValueType.LIST,
        optional=True,
        elem=ValueType.STRING,
        description="Ordered list of instance classes; the first one offered is selected",
    ),
    "read_replica_capable": _computed(ValueType.BOOL),
    "storage_type": _criterion(ValueType.STRING),
    "supported_engine_modes": _computed(ValueType.LIST, ValueType.STRING),
    "supports_enhanced_monitoring": _computed(ValueType.BOOL),
    "supports_global_databases": _computed(ValueType.BOOL),
    "supports_iam_database_authentication": _computed(ValueType.BOOL),
    "supports_iops": _computed(ValueType.BOOL),
    "supports_kerberos_authentication": _computed(ValueType.BOOL),
    "supports_performance_insights": _computed(ValueType.BOOL),
    "supports_storage_autoscaling": _computed(ValueType.BOOL),
    "supports_storage_encryption": _computed(ValueType.BOOL),
    "vpc": _criterion(ValueType.BOOL),
}


def criteria_from_resource_data(data: AttributeStorePort) -> OrderableDBInstanceCriteria:
    """Build search criteria from the configured attributes; empty strings count as unset."""
    values = {}
    for key in _STRING_CRITERIA:
        value, ok = data.get_ok(key)
        if ok:
            values[key] = value

    if data.has_config("vpc"):
        values["vpc"] = data.get("vpc")

    try:
        return OrderableDBInstanceCriteria(
            engine=data.get("engine"),
            preferred_db_instance_classes=tuple(data.get("preferred_db_instance_classes")),
            **values,
        )
    except ValidationError as e:
        raise SchemaValidationError(
            f"Invalid {NAME} configuration: {e.error_count()} error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e


def write_option(data: AttributeStorePort, option: OrderableDBInstanceOption) -> None:
    """Copy every attribute of option into data and use its class as the id."""
    data.set_id(option.db_instance_class or "")
    for key, value in option.to_attributes().items():
        data.set(key, value)


def read(
    data: AttributeStorePort,
    aws_client: AWSClient,
    logger: Optional[LoggingPort] = None,
) -> None:
    """
    Read the data source: resolve one orderable option and store its attributes.

    Raises:
        AWSError: If the RDS call fails
        NoMatchingOptionsError: If no option matches the configuration
        AmbiguousOptionsError: If several options match and no preference resolves them
    """
    criteria = criteria_from_resource_data(data)
    option = OrderableDBInstanceResolver(aws_client, logger).resolve(criteria)
    write_option(data, option)
