"""
Query-parameter exception hierarchy.

Every converter raises a ``ValidationError`` subclass at the point of
detection. Callers translate them into bad-request responses; each
exception provides ``to_dict()`` for that purpose.
"""

from __future__ import annotations

from typing import Any


class ContentQueryError(Exception):
    """Root exception for the content-query package."""

    code = "CONTENT_QUERY_ERROR"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": str(self),
        }


class SchemaNotFoundError(ContentQueryError):
    """Raised when the schema registry has no schema for a uid."""

    code = "SCHEMA_NOT_FOUND"

    def __init__(self, uid: str) -> None:
        self.uid = uid
        super().__init__(f"Schema {uid!r} not found")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": str(self),
            "uid": self.uid,
        }


class ValidationError(ContentQueryError):
    """Raised when a query parameter has an invalid shape or value.

    Carries structured errors: ``{param: [messages]}``.
    """

    code = "VALIDATION_ERROR"
    param = "__root__"

    def __init__(self, message: str, param: str | None = None) -> None:
        self.message = message
        self.param = param or self.param
        self.errors: dict[str, list[str]] = {self.param: [message]}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "errors": self.errors,
        }


class InvalidOrderError(ValidationError):
    """A sort direction is not one of asc|desc (any casing)."""

    code = "INVALID_ORDER"
    param = "sort"

    def __init__(self, order: Any = None) -> None:
        self.order = order
        super().__init__(
            f"Invalid order {order!r}. order can only be one of asc|desc|ASC|DESC"
        )


class InvalidSortError(ValidationError):
    code = "INVALID_SORT"
    param = "sort"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Invalid sort parameter. Expected a string, an array of strings, "
            "a sort object or an array of sort objects"
        )


class InvalidPopulateError(ValidationError):
    code = "INVALID_POPULATE"
    param = "populate"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Invalid populate parameter. Expected a string, an array of "
            "strings, a populate object"
        )


class InvalidFieldsError(ValidationError):
    code = "INVALID_FIELDS"
    param = "fields"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "Invalid fields parameter. Expected a string or an array of strings"
        )


class InvalidFiltersError(ValidationError):
    code = "INVALID_FILTERS"
    param = "filters"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or "The filters parameter must be an object or an array"
        )


class InvalidPaginationError(ValidationError):
    """Raised when start/limit is not a non-negative integer."""

    code = "INVALID_PAGINATION"

    def __init__(self, param: str, value: Any) -> None:
        self.value = value
        super().__init__(
            f"Invalid {param} parameter. Expected a positive integer, got {value!r}",
            param=param,
        )


class InvalidPublicationStateError(ValidationError):
    code = "INVALID_PUBLICATION_STATE"
    param = "publicationState"

    def __init__(self, state: Any, allowed: tuple[str, ...]) -> None:
        self.state = state
        expected = ",".join(f"'{s}'" for s in allowed)
        super().__init__(
            f"Invalid publicationState. Expected one of {expected} received: {state}."
        )


class TypeCoercionError(ValidationError):
    """Raised when a raw scalar cannot be coerced to the requested type."""

    code = "TYPE_COERCION_ERROR"
