"""Shared fixtures for content-query tests."""

from __future__ import annotations

import pytest

from content_query import InMemorySchemaRegistry, Schema


ARTICLE = {
    "uid": "api::article.article",
    "attributes": {
        "title": {"type": "string"},
        "secret": {"type": "password"},
        "author": {"type": "relation", "relation": "manyToOne", "target": "api::user.user"},
        "blocks": {"type": "dynamiczone", "components": ["shared.seo"]},
        "seo": {"type": "component", "component": "shared.seo"},
        "cover": {"type": "media"},
        "publishedAt": {"type": "datetime"},
    },
    "options": {"draftAndPublish": True},
}

USER = {
    "uid": "api::user.user",
    "attributes": {
        "username": {"type": "string"},
        "pwd": {"type": "password"},
        "articles": {"type": "relation", "target": "api::article.article"},
    },
}

SEO = {
    "uid": "shared.seo",
    "attributes": {
        "metaTitle": {"type": "string"},
        "token": {"type": "password"},
    },
}

TAG = {
    "uid": "api::tag.tag",
    "attributes": {"name": {"type": "string"}},
    "options": {"draftAndPublish": True},
}


@pytest.fixture
def registry() -> InMemorySchemaRegistry:
    """Registry holding article, user, seo component and tag schemas."""
    registry = InMemorySchemaRegistry()
    for definition in (ARTICLE, USER, SEO, TAG):
        registry.register(definition)
    return registry


@pytest.fixture
def article(registry: InMemorySchemaRegistry) -> Schema:
    return registry.get_schema("api::article.article")


@pytest.fixture
def user(registry: InMemorySchemaRegistry) -> Schema:
    return registry.get_schema("api::user.user")
