"""Publication-state converter — draft/publish mode -> deferred filter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from .exceptions import InvalidPublicationStateError
from .schema import PUBLISHED_AT_ATTRIBUTE

if TYPE_CHECKING:
    from .query import Query
    from .schema import Schema


class PublicationState(str, Enum):
    PREVIEW = "preview"
    LIVE = "live"


def has_draft_and_publish(schema: Schema | None) -> bool:
    return schema is not None and schema.options.draft_and_publish


@dataclass(frozen=True)
class PublicationStateFilter:
    """Pending publication-state predicate.

    The executor calls :meth:`resolve` with the schema it is building
    the query for; only then is it known whether a published-at
    attribute exists.
    """

    state: PublicationState

    def resolve(self, schema: Schema) -> dict[str, Any] | None:
        if self.state is PublicationState.LIVE and schema.has_attribute(
            PUBLISHED_AT_ATTRIBUTE
        ):
            return {PUBLISHED_AT_ATTRIBUTE: {"$notNull": True}}
        return None

    def __call__(self, schema: Schema) -> dict[str, Any] | None:
        return self.resolve(schema)

    def to_dict(self) -> dict[str, Any]:
        return {"publicationState": self.state.value}


def convert_publication_state(
    has_draft_publish: bool,
    params: dict[str, Any] | None = None,
    query: Query | None = None,
    param: str = "publicationState",
) -> PublicationStateFilter | None:
    """Attach the publication-state filter for *params* to *query*.

    Does nothing for content types without draft/publish or when the
    param is absent. The filter is also returned.
    """
    if not has_draft_publish:
        return None

    state = (params or {}).get(param)
    if state is None:
        return None

    try:
        publication_state = PublicationState(state)
    except ValueError:
        raise InvalidPublicationStateError(
            state, tuple(s.value for s in PublicationState)
        ) from None

    publication_filter = PublicationStateFilter(publication_state)
    if query is not None:
        query.filters = publication_filter
    return publication_filter
