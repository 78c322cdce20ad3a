"""
Canonical query values handed to the persistence layer.

``Query`` is the top-level result of converting a request's params;
``NestedQuery`` is the per-relation query inside an object-form
populate. Unset entries are ``None`` and are omitted from ``to_dict()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from .publication_state import PublicationStateFilter
    from .sort import SortSpec

PopulateSpec = Union[bool, list[str], dict[str, Union[bool, "NestedQuery"]]]


@dataclass(frozen=True)
class NestedQuery:
    order_by: SortSpec | None = None
    where: Any = None
    select: list[str] | None = None
    populate: PopulateSpec | None = None
    count: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        return _render(self, "count")


@dataclass
class Query:
    """Mutable so ``convert_publication_state`` can attach ``filters``.

    Attributes:
        order_by: Converted ``sort``.
        where: Sanitized ``filters``.
        select: Converted ``fields``; ``None`` selects everything.
        populate: Converted ``populate``.
        offset: Converted ``start``/``offset``.
        limit: Converted ``limit``; ``None`` means no limit.
        count: Converted ``count``.
        filters: Deferred publication-state predicate, resolved by the
            executor against the concrete schema.
    """

    order_by: SortSpec | None = None
    where: Any = None
    select: list[str] | None = None
    populate: PopulateSpec | None = None
    offset: int | None = None
    limit: int | None = None
    count: bool | None = None
    filters: PublicationStateFilter | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the persistence-layer shape."""
        return _render(self, "offset", "limit", "count", "filters")


def render_populate(populate: PopulateSpec) -> Any:
    if isinstance(populate, dict):
        return {
            key: value.to_dict() if isinstance(value, NestedQuery) else value
            for key, value in populate.items()
        }
    return populate


def _render(query: NestedQuery | Query, *extra: str) -> dict[str, Any]:
    """Shared rendering of the clause fields, omitting unset entries."""
    result: dict[str, Any] = {}
    if query.order_by is not None:
        result["orderBy"] = query.order_by
    if query.where is not None:
        result["where"] = query.where
    if query.select is not None:
        result["select"] = query.select
    if query.populate is not None:
        result["populate"] = render_populate(query.populate)
    for name in extra:
        value = getattr(query, name)
        if value is not None:
            result[name] = value
    return result
