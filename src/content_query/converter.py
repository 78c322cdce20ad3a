"""QueryParamsConverter — raw REST query params -> canonical ``Query``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .coercion import convert_count
from .fields import convert_fields
from .filters import convert_filters
from .pagination import PaginationParser
from .populate import convert_populate
from .publication_state import convert_publication_state, has_draft_and_publish
from .query import Query
from .sort import convert_sort

if TYPE_CHECKING:
    from .ports import ISchemaRegistry


@dataclass(frozen=True)
class QueryConverterConfig:
    """Param names and limit policy for :class:`QueryParamsConverter`.

    Attributes:
        default_limit: Limit applied when the request sends none.
        max_limit: Upper bound for explicit limits; also replaces the
            ``-1`` "no limit" sentinel.
    """

    sort_key: str = "sort"
    filters_key: str = "filters"
    fields_key: str = "fields"
    populate_key: str = "populate"
    start_key: str = "start"
    offset_key: str = "offset"
    limit_key: str = "limit"
    count_key: str = "count"
    publication_state_key: str = "publicationState"
    default_limit: int | None = None
    max_limit: int | None = None

    def __post_init__(self) -> None:
        if self.default_limit is not None and self.default_limit <= 0:
            raise ValueError("default_limit must be a positive integer")
        if self.max_limit is not None and self.max_limit <= 0:
            raise ValueError("max_limit must be a positive integer")


class QueryParamsConverter:
    """Convert API params for one content type into a :class:`Query`."""

    def __init__(
        self,
        registry: ISchemaRegistry,
        config: QueryConverterConfig | None = None,
    ) -> None:
        if registry is None:
            raise ValueError(
                "registry parameter is required. "
                "Use InMemorySchemaRegistry from content_query.adapters "
                "to create one."
            )
        self._registry = registry
        self._config = config or QueryConverterConfig()
        self._pagination = PaginationParser()

    @property
    def config(self) -> QueryConverterConfig:
        return self._config

    def convert(self, uid: str, query_params: dict[str, Any]) -> Query:
        """Return the query for the content type registered under *uid*."""
        cfg = self._config
        schema = self._registry.get_schema(uid)
        query = Query()

        if query_params.get(cfg.sort_key) is not None:
            query.order_by = convert_sort(query_params[cfg.sort_key])

        if query_params.get(cfg.filters_key) is not None:
            query.where = convert_filters(
                query_params[cfg.filters_key], schema, self._registry
            )

        if query_params.get(cfg.fields_key) is not None:
            query.select = convert_fields(query_params[cfg.fields_key])

        if query_params.get(cfg.populate_key) is not None:
            query.populate = convert_populate(
                query_params[cfg.populate_key], schema, self._registry
            )

        pagination = self._pagination.parse(
            query_params,
            start_key=cfg.start_key,
            offset_key=cfg.offset_key,
            limit_key=cfg.limit_key,
            default_limit=cfg.default_limit,
            max_limit=cfg.max_limit,
        )
        query.offset = pagination.offset
        query.limit = pagination.limit

        if query_params.get(cfg.count_key) is not None:
            query.count = convert_count(query_params[cfg.count_key])

        convert_publication_state(
            has_draft_and_publish(schema),
            query_params,
            query,
            param=cfg.publication_state_key,
        )
        return query
