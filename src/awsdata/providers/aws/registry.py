"""Registry of the data sources offered by the AWS provider."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from awsdata.domain.base.exceptions import DataSourceNotFoundError
from awsdata.domain.base.ports import AttributeStorePort, LoggingPort
from awsdata.domain.schema import Schema
from awsdata.infrastructure.adapters.logging_adapter import LoggingAdapter
from awsdata.infrastructure.logging.logger import get_logger
from awsdata.infrastructure.resource_data import ResourceData
from awsdata.providers.aws.data_sources import rds_orderable_db_instance
from awsdata.providers.aws.infrastructure.aws_client import AWSClient

ReadFunc = Callable[[AttributeStorePort, AWSClient, Optional[LoggingPort]], None]

logger = get_logger(__name__)


@dataclass(frozen=True)
class DataSource:
    """A named data source: its attribute schema and read function."""

    name: str
    schema: Schema
    read: ReadFunc


DATA_SOURCES: dict[str, DataSource] = {
    rds_orderable_db_instance.NAME: DataSource(
        name=rds_orderable_db_instance.NAME,
        schema=rds_orderable_db_instance.SCHEMA,
        read=rds_orderable_db_instance.read,
    ),
}


def get_data_source(name: str) -> DataSource:
    """
    Look up a data source by name.

    Raises:
        DataSourceNotFoundError: If name is not registered
    """
    try:
        return DATA_SOURCES[name]
    except KeyError:
        raise DataSourceNotFoundError(
            f"Unknown data source: {name}",
            details={"available": sorted(DATA_SOURCES)},
        ) from None


def read_data_source(
    name: str,
    config: dict[str, Any],
    aws_client: AWSClient,
    logger_port: Optional[LoggingPort] = None,
) -> ResourceData:
    """
    Validate config against the data source schema and run its read function.

    Without logger_port, records from the read carry the data source name.

    Returns:
        The populated attribute store
    """
    data_source = get_data_source(name)
    data = ResourceData(data_source.schema, config)
    data.validate()

    logger.debug("Reading data source %s", name)
    logger_port = logger_port or LoggingAdapter(data_source.read.__module__, data_source=name)
    data_source.read(data, aws_client, logger_port)
    return data
