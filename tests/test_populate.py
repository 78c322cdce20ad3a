"""Tests for the populate converter."""

from __future__ import annotations

import pytest

from content_query import InMemorySchemaRegistry, Schema
from content_query.exceptions import (
    InvalidFiltersError,
    InvalidOrderError,
    InvalidPopulateError,
    TypeCoercionError,
)
from content_query.populate import convert_nested_populate, convert_populate
from content_query.query import NestedQuery


def test_wildcard_populates_everything() -> None:
    assert convert_populate("*") is True


def test_wildcard_only_at_top_level() -> None:
    assert convert_populate("*", depth=1) == ["*"]


def test_string_split_and_trimmed() -> None:
    assert convert_populate("author, tags ,author") == ["author", "tags"]


def test_list_split_flattened_and_deduplicated() -> None:
    result = convert_populate(["a", "a,b"])
    assert set(result) == {"a", "b"}
    assert result == ["a", "b"]


def test_list_rejects_non_strings() -> None:
    with pytest.raises(InvalidPopulateError):
        convert_populate(["a", 1])
    with pytest.raises(InvalidPopulateError):
        convert_populate(["a", {"b": True}])


@pytest.mark.parametrize("value", [None, 3, True])
def test_invalid_shape_raises(value: object) -> None:
    with pytest.raises(InvalidPopulateError):
        convert_populate(value)


def test_object_with_wildcard_and_booleans() -> None:
    result = convert_populate({"author": "*", "tags": False, "cover": True})
    assert result == {"author": True, "tags": False, "cover": True}


def test_nested_query_without_schema() -> None:
    result = convert_populate(
        {
            "author": {
                "sort": "username:desc",
                "fields": ["username"],
                "populate": "articles",
                "count": "true",
            }
        }
    )
    assert result == {
        "author": NestedQuery(
            order_by=[{"username": "desc"}],
            select=["id", "username"],
            populate=["articles"],
            count=True,
        )
    }


def test_nested_absent_keys_are_omitted() -> None:
    nested = convert_nested_populate({"fields": "*"})
    assert nested == NestedQuery()
    assert nested.to_dict() == {}


def test_nested_filters_sanitized_against_target(
    article: Schema, registry: InMemorySchemaRegistry
) -> None:
    result = convert_populate(
        {"author": {"filters": {"pwd": "x", "username": {"$eq": "u"}}}},
        article,
        registry,
    )
    assert result == {"author": NestedQuery(where={"username": {"$eq": "u"}})}


def test_deeply_nested_populate_rerooted(
    article: Schema, registry: InMemorySchemaRegistry
) -> None:
    result = convert_populate(
        {
            "author": {
                "populate": {
                    "articles": {"filters": {"secret": "x", "title": "t"}, "sort": ["title"]}
                }
            }
        },
        article,
        registry,
    )
    assert result["author"].populate == {
        "articles": NestedQuery(order_by=[{"title": "asc"}], where={"title": "t"})
    }
    assert result["author"].to_dict() == {
        "populate": {"articles": {"orderBy": [{"title": "asc"}], "where": {"title": "t"}}}
    }


def test_nested_component_and_media_filters(
    article: Schema, registry: InMemorySchemaRegistry
) -> None:
    result = convert_populate(
        {
            "seo": {"filters": {"token": "t", "metaTitle": "m"}},
            "cover": {"filters": {"mime": "image/png"}},
        },
        article,
        registry,
    )
    assert result["seo"].where == {"metaTitle": "m"}
    assert result["cover"].where == {"mime": "image/png"}


def test_nested_filters_require_schema(
    article: Schema, registry: InMemorySchemaRegistry
) -> None:
    with pytest.raises(InvalidFiltersError):
        convert_populate({"author": {"filters": {"id": 1}}})
    with pytest.raises(InvalidFiltersError):
        convert_populate({"unknown": {"filters": {"id": 1}}}, article, registry)
    with pytest.raises(InvalidFiltersError):
        convert_populate({"blocks": {"filters": {"id": 1}}}, article, registry)


def test_nested_errors_propagate() -> None:
    with pytest.raises(InvalidOrderError):
        convert_populate({"author": {"sort": "username:sideways"}})
    with pytest.raises(TypeCoercionError):
        convert_populate({"author": {"count": "maybe"}})
    with pytest.raises(InvalidPopulateError):
        convert_populate({"author": 3})
    with pytest.raises(InvalidPopulateError):
        convert_nested_populate(["author"])


def test_nested_unknown_keys_ignored() -> None:
    assert convert_nested_populate({"on": {"x": True}}) == NestedQuery()


def test_schema_only_resolved_when_needed(registry: InMemorySchemaRegistry) -> None:
    schema = Schema.model_validate(
        {
            "uid": "api::post.post",
            "attributes": {
                "owner": {"type": "relation", "target": "plugin::users.user"}
            },
        }
    )
    result = convert_populate({"owner": {"fields": "name", "sort": "name"}}, schema, registry)
    assert result == {
        "owner": NestedQuery(order_by=[{"name": "asc"}], select=["id", "name"])
    }


@pytest.mark.parametrize("key", ["sort", "filters", "fields", "populate", "count"])
@pytest.mark.parametrize("value", ["", None, False, 0])
def test_nested_falsy_values_are_absent(key: str, value: object) -> None:
    assert convert_nested_populate({key: value}) == NestedQuery()


def test_nested_empty_values_omitted_alongside_others() -> None:
    result = convert_populate({"owner": {"sort": "", "fields": "name", "populate": ""}})
    assert result == {"owner": NestedQuery(select=["id", "name"])}


def test_nested_count_false_string_is_converted() -> None:
    assert convert_nested_populate({"count": "false"}) == NestedQuery(count=False)


def test_nested_empty_filters_object_is_kept(
    article: Schema, registry: InMemorySchemaRegistry
) -> None:
    result = convert_populate({"author": {"filters": {}}}, article, registry)
    assert result == {"author": NestedQuery(where={})}
