"""Sort converter — ``sort`` query param -> ordered field/direction tree."""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from .exceptions import InvalidOrderError, InvalidSortError

SortNode = dict[str, Union["SortDirection", "SortNode"]]
SortSpec = list[SortNode]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, order: Any) -> SortDirection:
        """Return the direction for *order*, ignoring case."""
        if not isinstance(order, str):
            raise InvalidOrderError(order)
        try:
            return cls(order.strip().lower())
        except ValueError:
            raise InvalidOrderError(order) from None


def convert_sort(sort: Any) -> SortSpec:
    """Convert a sort clause to a list of sort nodes.

    Accepted shapes:

    - ``"title:desc,id"`` -> ``[{"title": DESC}, {"id": ASC}]``
    - ``["title:desc", {"author": {"name": "asc"}}]`` (flattened in order)
    - ``{"author": {"name": "asc"}}`` -> ``[{"author": {"name": ASC}}]``

    Dotted fields in the string form (``author.name:asc``) expand to the
    same nested shape as the object form.
    """
    if isinstance(sort, str):
        return [_convert_sort_token(token) for token in sort.split(",")]

    if isinstance(sort, list):
        converted: SortSpec = []
        for item in sort:
            converted.extend(convert_sort(item))
        return converted

    if isinstance(sort, dict):
        return [_convert_sort_object(sort)]

    raise InvalidSortError()


def _convert_sort_token(token: str) -> SortNode:
    # anything after a second colon is ignored
    field, *rest = token.split(":")[:2]
    field = field.strip()
    if not field:
        raise InvalidSortError(f"Invalid sort {token!r}. Field cannot be empty")

    direction = SortDirection.parse(rest[0]) if rest else SortDirection.ASC
    path = field.split(".")
    if any(not part for part in path):
        raise InvalidSortError(f"Invalid sort field {field!r}")

    node: SortNode = {path[-1]: direction}
    for part in reversed(path[:-1]):
        node = {part: node}
    return node


def _convert_sort_object(sort: dict[str, Any]) -> SortNode:
    converted: SortNode = {}
    for field, order in sort.items():
        if isinstance(order, dict):
            # relational sort
            converted[field] = _convert_sort_object(order)
        else:
            converted[field] = SortDirection.parse(order)
    return converted
