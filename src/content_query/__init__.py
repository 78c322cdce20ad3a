"""REST query-param conversion — sort, pagination, fields, populate,
filters sanitization and publication state."""

from __future__ import annotations

from .adapters import InMemorySchemaRegistry
from .coercion import convert_count, parse_boolean, parse_integer
from .converter import QueryConverterConfig, QueryParamsConverter
from .exceptions import (
    ContentQueryError,
    InvalidFieldsError,
    InvalidFiltersError,
    InvalidOrderError,
    InvalidPaginationError,
    InvalidPopulateError,
    InvalidPublicationStateError,
    InvalidSortError,
    SchemaNotFoundError,
    TypeCoercionError,
    ValidationError,
)
from .fields import convert_fields
from .filters import convert_filters, sanitize_filters
from .pagination import PaginationParser, PaginationResult, convert_limit, convert_start
from .populate import convert_nested_populate, convert_populate
from .ports import ISchemaRegistry
from .publication_state import (
    PublicationState,
    PublicationStateFilter,
    convert_publication_state,
    has_draft_and_publish,
)
from .query import NestedQuery, Query
from .schema import (
    ID_ATTRIBUTE,
    PUBLISHED_AT_ATTRIBUTE,
    UPLOAD_FILE_SCHEMA,
    UPLOAD_FILE_UID,
    AttributeDescriptor,
    AttributeKind,
    Schema,
    SchemaOptions,
)
from .sort import SortDirection, convert_sort

__all__ = [
    "ID_ATTRIBUTE",
    "PUBLISHED_AT_ATTRIBUTE",
    "UPLOAD_FILE_SCHEMA",
    "UPLOAD_FILE_UID",
    "AttributeDescriptor",
    "AttributeKind",
    "ContentQueryError",
    "ISchemaRegistry",
    "InMemorySchemaRegistry",
    "InvalidFieldsError",
    "InvalidFiltersError",
    "InvalidOrderError",
    "InvalidPaginationError",
    "InvalidPopulateError",
    "InvalidPublicationStateError",
    "InvalidSortError",
    "NestedQuery",
    "PaginationParser",
    "PaginationResult",
    "PublicationState",
    "PublicationStateFilter",
    "Query",
    "QueryConverterConfig",
    "QueryParamsConverter",
    "Schema",
    "SchemaNotFoundError",
    "SchemaOptions",
    "SortDirection",
    "TypeCoercionError",
    "ValidationError",
    "convert_count",
    "convert_fields",
    "convert_filters",
    "convert_limit",
    "convert_nested_populate",
    "convert_populate",
    "convert_publication_state",
    "convert_sort",
    "convert_start",
    "has_draft_and_publish",
    "parse_boolean",
    "parse_integer",
    "sanitize_filters",
]
