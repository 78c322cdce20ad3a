"""ISchemaRegistry — protocol for schema lookup by uid."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .schema import Schema


@runtime_checkable
class ISchemaRegistry(Protocol):
    """Resolve content schemas by uid.

    Used to re-root filter sanitization on relation targets, components
    and the upload-file schema.
    """

    def get_schema(self, uid: str) -> Schema:
        """Return the schema registered under *uid*.

        Must raise :class:`~content_query.exceptions.SchemaNotFoundError`
        when *uid* is unknown.
        """
        ...
