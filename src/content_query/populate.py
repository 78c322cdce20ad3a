"""Populate converter — ``populate`` query param -> relations to load."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .coercion import convert_count
from .exceptions import InvalidFiltersError, InvalidPopulateError
from .fields import WILDCARD, convert_fields, split_names, unique_names
from .filters import convert_filters, resolve_attribute_schema
from .query import NestedQuery
from .sort import convert_sort

if TYPE_CHECKING:
    from .ports import ISchemaRegistry
    from .query import PopulateSpec
    from .schema import Schema

logger = logging.getLogger("content_query.populate")

NESTED_POPULATE_KEYS = frozenset({"sort", "filters", "fields", "populate", "count"})


def convert_populate(
    populate: Any,
    schema: Schema | None = None,
    registry: ISchemaRegistry | None = None,
    depth: int = 0,
) -> PopulateSpec:
    """Convert a populate clause.

    - ``"*"`` at the top level -> ``True`` (populate everything)
    - ``"author,tags"`` or ``["author", "tags,author"]`` -> ``["author", "tags"]``
    - ``{"author": {...}}`` -> ``{"author": NestedQuery(...)}``

    *schema* is the schema the populated keys belong to. With a
    *registry* it lets nested ``filters`` be sanitized against the
    relation target, component or media schema.
    """
    if depth == 0 and populate == WILDCARD:
        return True

    if isinstance(populate, str):
        return unique_names(split_names(populate))

    if isinstance(populate, list):
        values: list[str] = []
        for value in populate:
            if not isinstance(value, str):
                raise InvalidPopulateError()
            values.extend(split_names(value))
        return unique_names(values)

    if isinstance(populate, dict):
        converted: dict[str, bool | NestedQuery] = {}
        for key, value in populate.items():
            nested_schema = (
                _nested_schema(schema, key, registry)
                if _needs_schema(value)
                else None
            )
            converted[key] = convert_nested_populate(value, nested_schema, registry)
        return converted

    raise InvalidPopulateError()


def convert_nested_populate(
    populate: Any,
    schema: Schema | None = None,
    registry: ISchemaRegistry | None = None,
) -> bool | NestedQuery:
    """Convert the value of one key of an object-form populate."""
    if populate == WILDCARD:
        return True

    if isinstance(populate, bool):
        return populate

    if not isinstance(populate, dict):
        raise InvalidPopulateError(
            f"Invalid nested populate {populate!r}. Expected '*' or an object"
        )

    unknown = set(populate) - NESTED_POPULATE_KEYS
    if unknown:
        logger.debug("Ignoring nested populate keys %s", sorted(unknown))

    # TODO: support pagination (start/limit) of populated relations
    query: dict[str, Any] = {}
    if _is_set(populate.get("sort")):
        query["order_by"] = convert_sort(populate["sort"])

    if _is_set(populate.get("filters")):
        if schema is None or registry is None:
            raise InvalidFiltersError(
                "Cannot filter a populated field without a resolvable schema"
            )
        query["where"] = convert_filters(populate["filters"], schema, registry)

    if _is_set(populate.get("fields")):
        query["select"] = convert_fields(populate["fields"])

    if _is_set(populate.get("populate")):
        query["populate"] = convert_populate(populate["populate"], schema, registry)

    if _is_set(populate.get("count")):
        query["count"] = convert_count(populate["count"])

    return NestedQuery(**query)


def _nested_schema(
    schema: Schema | None, key: str, registry: ISchemaRegistry | None
) -> Schema | None:
    if schema is None or registry is None:
        return None
    attribute = schema.get_attribute(key)
    if attribute is None:
        return None
    return resolve_attribute_schema(attribute, registry)


def _needs_schema(populate: Any) -> bool:
    return isinstance(populate, dict) and (
        _is_set(populate.get("filters")) or _is_set(populate.get("populate"))
    )


def _is_set(value: Any) -> bool:
    """Empty strings, ``False`` and zero count as absent; empty objects do not."""
    if value is None or isinstance(value, (str, int, float)):
        return bool(value)
    return True
