"""Resolve RDS orderable DB instance options to a single option."""

from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional

from botocore.exceptions import BotoCoreError, ClientError

from awsdata.domain.base.ports import LoggingPort
from awsdata.infrastructure.adapters.logging_adapter import LoggingAdapter
from awsdata.providers.aws.domain.rds.orderable_db_instance import (
    OrderableDBInstanceCriteria,
    OrderableDBInstanceOption,
)
from awsdata.providers.aws.exceptions.aws_exceptions import (
    AmbiguousOptionsError,
    NoMatchingOptionsError,
    convert_client_error,
)
from awsdata.providers.aws.infrastructure.aws_client import AWSClient
from awsdata.providers.aws.infrastructure.utils import iter_items

DESCRIBE_OPERATION = "describe_orderable_db_instance_options"
RESULT_KEY = "OrderableDBInstanceOptions"


def filter_by_storage_type(
    options: Iterable[OrderableDBInstanceOption], storage_type: Optional[str]
) -> list[OrderableDBInstanceOption]:
    """Keep options whose storage type equals storage_type exactly; no filter when None."""
    if storage_type is None:
        return list(options)
    return [option for option in options if option.storage_type == storage_type]


def select_option(
    options: Sequence[OrderableDBInstanceOption],
    preferred_classes: Sequence[str] = (),
    criteria: Optional[dict[str, Any]] = None,
) -> OrderableDBInstanceOption:
    """
    Pick exactly one option.

    The first entry of preferred_classes present anywhere in options wins,
    whatever its position in options. Without a preference hit a single
    option is accepted as is.

    Args:
        options: Candidate options in arrival order
        preferred_classes: Ordered instance class preference list
        criteria: Supplied search criteria, attached to errors

    Returns:
        The selected option

    Raises:
        NoMatchingOptionsError: If options is empty
        AmbiguousOptionsError: If several options remain and no preference matched
    """
    if not options:
        raise NoMatchingOptionsError(
            "no RDS Orderable DB Instance options found matching criteria; try different search",
            criteria or {},
        )

    # Several options may share a class (e.g. one per engine version); the last one seen wins
    by_class = {option.db_instance_class: option for option in options}

    for preferred in preferred_classes:
        if preferred in by_class:
            return by_class[preferred]

    if len(options) > 1:
        candidates = [option.db_instance_class for option in options]
        raise AmbiguousOptionsError(
            f"multiple RDS DB Instance Classes ({', '.join(map(str, candidates))}) "
            "match the criteria; try a different search",
            candidates,
        )

    return options[0]


class OrderableDBInstanceResolver:
    """Query RDS for orderable DB instance options and resolve the best match."""

    def __init__(self, aws_client: AWSClient, logger: Optional[LoggingPort] = None) -> None:
        self.aws_client = aws_client
        self._logger = logger or LoggingAdapter(__name__)

    def iter_options(self, criteria: OrderableDBInstanceCriteria) -> Iterator[OrderableDBInstanceOption]:
        """Lazily yield every option RDS returns for criteria, following the page marker."""
        params = criteria.to_request_params()
        self._logger.debug("Reading RDS Orderable DB Instance Options: %s", params)

        for option_data in iter_items(
            self.aws_client.rds_client, DESCRIBE_OPERATION, RESULT_KEY, **params
        ):
            if option_data is None:
                continue
            yield OrderableDBInstanceOption.from_describe_orderable_db_instance_options(option_data)

    def fetch_options(self, criteria: OrderableDBInstanceCriteria) -> list[OrderableDBInstanceOption]:
        """
        Retrieve every option matching criteria, then apply the storage type filter.

        Raises:
            AWSError: If the describe call fails; the botocore error is chained
        """
        try:
            options = list(self.iter_options(criteria))
        except (ClientError, BotoCoreError) as e:
            error = convert_client_error(e, "error reading RDS orderable DB instance options")
            self._logger.error(
                "Failed to read RDS orderable DB instance options: %s",
                error,
                extra={"criteria": criteria.describe(), "error_code": error.error_code},
            )
            raise error from e

        retained = filter_by_storage_type(options, criteria.storage_type)
        self._logger.debug(
            "Retrieved %d RDS orderable DB instance options, %d after storage type filter",
            len(options),
            len(retained),
        )
        return retained

    def resolve(self, criteria: OrderableDBInstanceCriteria) -> OrderableDBInstanceOption:
        """
        Resolve criteria to exactly one orderable option.

        Raises:
            AWSError: If the describe call fails
            NoMatchingOptionsError: If no option matches
            AmbiguousOptionsError: If several options match and no preference resolves them
        """
        options = self.fetch_options(criteria)
        selected = select_option(
            options,
            criteria.preferred_db_instance_classes,
            criteria=criteria.describe(),
        )
        self._logger.info(
            "Selected RDS DB instance class %s (engine %s %s, storage %s)",
            selected.db_instance_class,
            selected.engine,
            selected.engine_version,
            selected.storage_type,
        )
        return selected
