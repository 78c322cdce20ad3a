"""Content schema model: attribute descriptors and well-known schemas."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

ID_ATTRIBUTE = "id"
PUBLISHED_AT_ATTRIBUTE = "publishedAt"
UPLOAD_FILE_UID = "plugin::upload.file"


class AttributeKind(str, Enum):
    """Attribute types the query converters treat specially.

    Every other attribute type (``string``, ``integer``, ``json``, ...)
    maps to ``OTHER``.
    """

    PASSWORD = "password"
    RELATION = "relation"
    COMPONENT = "component"
    MEDIA = "media"
    DYNAMIC_ZONE = "dynamiczone"
    OTHER = "other"

    @classmethod
    def of(cls, type_name: str) -> AttributeKind:
        try:
            kind = cls(type_name)
        except ValueError:
            return cls.OTHER
        return kind


class AttributeDescriptor(BaseModel):
    """One attribute of a schema.

    ``target`` is set for relations, ``component`` for components.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str
    target: str | None = None
    component: str | None = None

    @property
    def kind(self) -> AttributeKind:
        return AttributeKind.of(self.type)

    @property
    def is_filterable(self) -> bool:
        return self.kind not in (AttributeKind.PASSWORD, AttributeKind.DYNAMIC_ZONE)


class SchemaOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    draft_and_publish: bool = Field(default=False, alias="draftAndPublish")


class Schema(BaseModel):
    """Read-only content schema, usually parsed from a JSON definition::

        Schema.model_validate({
            "uid": "api::article.article",
            "attributes": {"title": {"type": "string"}},
            "options": {"draftAndPublish": True},
        })
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    uid: str
    attributes: dict[str, AttributeDescriptor] = Field(default_factory=dict)
    options: SchemaOptions = Field(default_factory=SchemaOptions)

    def get_attribute(self, name: str) -> AttributeDescriptor | None:
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes


UPLOAD_FILE_SCHEMA = Schema.model_validate(
    {
        "uid": UPLOAD_FILE_UID,
        "attributes": {
            "name": {"type": "string"},
            "alternativeText": {"type": "string"},
            "caption": {"type": "string"},
            "width": {"type": "integer"},
            "height": {"type": "integer"},
            "formats": {"type": "json"},
            "hash": {"type": "string"},
            "ext": {"type": "string"},
            "mime": {"type": "string"},
            "size": {"type": "decimal"},
            "url": {"type": "string"},
            "previewUrl": {"type": "string"},
            "provider": {"type": "string"},
            "provider_metadata": {"type": "json"},
            "related": {"type": "relation", "relation": "morphToMany"},
            "createdAt": {"type": "datetime"},
            "updatedAt": {"type": "datetime"},
        },
    }
)
