"""
Filters sanitizer — strip forbidden attributes from a filter tree.

Keys of a filter object are either attribute names of the current
schema or query operators (``$eq``, ``$and``, ...). Attribute keys that
cross a relation, component or media boundary re-root the walk on the
schema behind that boundary; operator keys keep the current schema.
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidFiltersError, SchemaNotFoundError
from .schema import UPLOAD_FILE_SCHEMA, UPLOAD_FILE_UID, AttributeKind

if TYPE_CHECKING:
    from .ports import ISchemaRegistry
    from .schema import AttributeDescriptor, Schema

logger = logging.getLogger("content_query.filters")


def convert_filters(filters: Any, schema: Schema, registry: ISchemaRegistry) -> Any:
    """Validate the ``filters`` param shape and sanitize it against *schema*."""
    if not isinstance(filters, (dict, list)):
        raise InvalidFiltersError()
    return sanitize_filters(filters, schema, registry)


def sanitize_filters(filters: Any, schema: Schema, registry: ISchemaRegistry) -> Any:
    """Return a sanitized deep copy of *filters*; the input is left untouched."""
    return _sanitize(copy.deepcopy(filters), schema, registry)


def resolve_attribute_schema(
    attribute: AttributeDescriptor, registry: ISchemaRegistry
) -> Schema | None:
    """Return the schema an attribute points into, if any.

    Relations resolve to their target, components to the component
    schema and media to the upload-file schema. Everything else
    (including dynamic zones and target-less morph relations) has none.
    """
    kind = attribute.kind
    if kind is AttributeKind.RELATION:
        return registry.get_schema(attribute.target) if attribute.target else None
    if kind is AttributeKind.COMPONENT:
        return registry.get_schema(attribute.component) if attribute.component else None
    if kind is AttributeKind.MEDIA:
        try:
            return registry.get_schema(UPLOAD_FILE_UID)
        except SchemaNotFoundError:
            return UPLOAD_FILE_SCHEMA
    return None


def _sanitize(filters: Any, schema: Schema, registry: ISchemaRegistry) -> Any:
    if isinstance(filters, list):
        sanitized = [_sanitize(item, schema, registry) for item in filters]
        return [item for item in sanitized if not _is_empty(item)]

    if not isinstance(filters, dict):
        return filters

    for key, value in list(filters.items()):
        attribute = schema.get_attribute(key)

        if attribute is None:
            # operator: same schema
            if isinstance(value, (dict, list)):
                filters[key] = _sanitize(value, schema, registry)

        elif not attribute.is_filterable:
            logger.debug("Removing %s attribute %r from filters", attribute.type, key)
            del filters[key]
            continue

        elif attribute.kind in (
            AttributeKind.RELATION,
            AttributeKind.COMPONENT,
            AttributeKind.MEDIA,
        ):
            nested_schema = resolve_attribute_schema(attribute, registry)
            if nested_schema is None:
                logger.debug("Removing unresolvable attribute %r from filters", key)
                del filters[key]
                continue
            filters[key] = _sanitize(value, nested_schema, registry)

        if _is_empty(filters[key]):
            logger.debug("Removing empty filter %r", key)
            del filters[key]

    return filters


def _is_empty(value: Any) -> bool:
    return isinstance(value, (dict, list)) and not value
