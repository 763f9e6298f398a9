"""awsdata - read-only AWS data lookups for an infrastructure provider plugin.

Key Components:
    - domain: Exceptions, ports and the declarative data-source schema
    - infrastructure: Logging and the schema-checked attribute store
    - config: Provider and logging configuration
    - providers: AWS client, data sources and status helpers

Usage:
    >>> awsdata rds-orderable-db-instance --engine mysql --storage-type standard
    >>> awsdata lex-slot-type-status MySlotType
"""

__version__ = "0.1.0"
