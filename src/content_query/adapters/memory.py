"""InMemorySchemaRegistry — dict-backed schema registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..exceptions import SchemaNotFoundError
from ..schema import UPLOAD_FILE_SCHEMA, Schema

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


class InMemorySchemaRegistry:
    """In-memory implementation of ``ISchemaRegistry``.

    Stores schemas in a plain dict keyed by their ``uid``. The built-in
    upload-file schema is registered up front so ``media`` attributes
    always resolve.
    """

    def __init__(self, schemas: Iterable[Schema] = ()) -> None:
        self._store: dict[str, Schema] = {UPLOAD_FILE_SCHEMA.uid: UPLOAD_FILE_SCHEMA}
        for schema in schemas:
            self.register(schema)

    def register(self, schema: Schema | Mapping[str, Any]) -> Schema:
        """Add *schema*, parsing it first when given a raw definition."""
        if not isinstance(schema, Schema):
            schema = Schema.model_validate(schema)
        self._store[schema.uid] = schema
        return schema

    def get_schema(self, uid: str) -> Schema:
        try:
            return self._store[uid]
        except KeyError:
            raise SchemaNotFoundError(uid) from None

    def __contains__(self, uid: object) -> bool:
        return uid in self._store

    def __len__(self) -> int:
        return len(self._store)
