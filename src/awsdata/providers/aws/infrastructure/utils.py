"""Pagination helpers for boto3 clients."""

from collections.abc import Iterator
from typing import Any


def iter_pages(client: Any, operation_name: str, **kwargs: Any) -> Iterator[dict[str, Any]]:
    """
    Lazily yield response pages for a paginated operation.

    The botocore paginator follows the service cursor (``Marker`` or
    ``NextToken``) and issues one request per page as the iterator advances.
    ClientError is raised from the page that failed; nothing is retried here.

    Args:
        client: boto3 client exposing ``get_paginator``
        operation_name: Snake case operation name, e.g. "describe_orderable_db_instance_options"
        **kwargs: Request parameters for the operation

    Yields:
        Raw response pages in arrival order
    """
    paginator = client.get_paginator(operation_name)
    yield from paginator.paginate(**kwargs)


def iter_items(
    client: Any, operation_name: str, result_key: str, **kwargs: Any
) -> Iterator[Any]:
    """Lazily yield the entries under result_key across every page."""
    for page in iter_pages(client, operation_name, **kwargs):
        yield from page.get(result_key) or []
