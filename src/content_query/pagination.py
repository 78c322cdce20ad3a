"""Pagination converter — start/offset and limit from query params."""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from .coercion import parse_integer
from .exceptions import InvalidPaginationError, TypeCoercionError

logger = logging.getLogger("content_query.pagination")

NO_LIMIT = -1


def convert_start(start: Any, param: str = "start") -> int:
    """Return *start* as a non-negative integer."""
    value = _to_integer(start, param)
    if value < 0:
        raise InvalidPaginationError(param, start)
    return value


def convert_limit(limit: Any, param: str = "limit") -> int | None:
    """Return *limit* as a non-negative integer, or ``None`` for ``-1``."""
    value = _to_integer(limit, param)
    if value == NO_LIMIT:
        return None
    if value < 0:
        raise InvalidPaginationError(param, limit)
    return value


def _to_integer(value: Any, param: str) -> int:
    try:
        return parse_integer(value, param=param)
    except TypeCoercionError as err:
        raise InvalidPaginationError(param, value) from err


class PaginationResult(NamedTuple):
    offset: int | None
    limit: int | None


class PaginationParser:
    """Parse start/offset and limit from query params.

    ``start`` wins over ``offset`` when both are given. A missing limit
    falls back to *default_limit*; with *max_limit* set, larger limits
    and the ``-1`` "no limit" sentinel are clamped to it.
    """

    def parse(
        self,
        query_params: dict[str, Any],
        *,
        start_key: str = "start",
        offset_key: str = "offset",
        limit_key: str = "limit",
        default_limit: int | None = None,
        max_limit: int | None = None,
    ) -> PaginationResult:
        offset: int | None = None
        if query_params.get(start_key) is not None:
            offset = convert_start(query_params[start_key], param=start_key)
        elif query_params.get(offset_key) is not None:
            offset = convert_start(query_params[offset_key], param=offset_key)

        limit: int | None
        if query_params.get(limit_key) is not None:
            limit = convert_limit(query_params[limit_key], param=limit_key)
            if max_limit is not None and (limit is None or limit > max_limit):
                logger.debug("Clamping %s=%s to %d", limit_key, limit, max_limit)
                limit = max_limit
        else:
            limit = default_limit
            if max_limit is not None and limit is not None:
                limit = min(limit, max_limit)
        return PaginationResult(offset=offset, limit=limit)
