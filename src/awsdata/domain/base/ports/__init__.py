"""Domain ports."""

from awsdata.domain.base.ports.attribute_store_port import AttributeStorePort
from awsdata.domain.base.ports.logging_port import LoggingPort

__all__: list[str] = ["AttributeStorePort", "LoggingPort"]
