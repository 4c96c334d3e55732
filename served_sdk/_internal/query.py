"""Query-string construction for list endpoints."""

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any
from urllib.parse import quote_plus

from served_sdk.models.common import QueryParams

DEFAULT_PAGE_SIZE = 50

QueryPair = tuple[str, Any]


def page_for(query: QueryParams) -> int:
    """Convert ``skip``/``take`` into the platform's 1-based page number."""
    take = query.take
    skip = query.skip
    if skip is not None and skip > 0 and take is not None and take > 0:
        return skip // take + 1
    return 1


def page_size_for(query: QueryParams) -> int:
    take = query.take
    if take is not None and take > 0:
        return take
    return DEFAULT_PAGE_SIZE


def format_query_value(value: Any) -> str:
    """Render a query value the way the platform expects it.

    Booleans keep their ``True``/``False`` spelling; dates are ISO 8601.
    """
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def build_query_string(
    query: QueryParams,
    extra_params: Iterable[QueryPair] | None = None,
) -> str:
    """Build ``?page=..&pageSize=..[&search=..][&sort=..][&extra..]``.

    Args:
        query: Pagination/sort/search parameters.
        extra_params: Resource-specific ``(key, value)`` pairs, appended in
            order after the standard parameters. ``None`` values are skipped.

    Returns:
        The query string including the leading ``?``, or ``""`` when there is
        nothing to send.
    """
    params: list[str] = [
        f"page={page_for(query)}",
        f"pageSize={page_size_for(query)}",
    ]

    if query.search:
        params.append(f"search={quote_plus(query.search)}")
    if query.sort:
        params.append(f"sort={quote_plus(query.sort)}")

    for key, value in extra_params or ():
        if value is None:
            continue
        params.append(f"{key}={quote_plus(format_query_value(value))}")

    return "?" + "&".join(params) if params else ""
