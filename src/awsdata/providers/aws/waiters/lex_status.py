"""Lex Model Building Service status refresh functions."""

from typing import Any, Callable, Optional

from botocore.exceptions import BotoCoreError, ClientError

from awsdata.infrastructure.logging.logger import get_logger
from awsdata.providers.aws.exceptions.aws_exceptions import (
    convert_client_error,
    error_code_equals,
)
from awsdata.providers.aws.infrastructure.aws_client import AWSClient

LEX_STATUS_CREATED = "Created"
LEX_STATUS_NOT_FOUND = "NotFound"
LEX_STATUS_UNKNOWN = "Unknown"

NOT_FOUND_ERROR_CODE = "NotFoundException"

# (value, state, error) as consumed by an external polling loop
StateRefreshFunc = Callable[[], tuple[Any, str, Optional[Exception]]]

logger = get_logger(__name__)


def lex_slot_type_status(conn: Any, name: str) -> StateRefreshFunc:
    """
    Build a refresh function reporting whether a Lex slot type exists.

    Every call issues a single GetSlotTypeVersions request; nothing is
    remembered between calls and nothing is retried.

    Args:
        conn: AWSClient, or a boto3 "lex-models" client
        name: Slot type name

    Returns:
        Callable returning (response, state, error)
    """

    def refresh() -> tuple[Any, str, Optional[Exception]]:
        client = conn.lex_models_client if isinstance(conn, AWSClient) else conn
        try:
            output = client.get_slot_type_versions(name=name)
        except (ClientError, BotoCoreError) as e:
            if error_code_equals(e, NOT_FOUND_ERROR_CODE):
                return None, LEX_STATUS_NOT_FOUND, None

            error = convert_client_error(e, f"error getting Lex slot type ({name}) versions")
            error.__cause__ = e
            logger.debug("Lex slot type %s status unknown: %s", name, error)
            return None, LEX_STATUS_UNKNOWN, error

        if not output or not output.get("slotTypes"):
            return None, LEX_STATUS_NOT_FOUND, None

        return output, LEX_STATUS_CREATED, None

    return refresh
