"""Dataclasses for schema catalog records.

This module contains the field and relation records a content schema store
exposes, plus helpers that build them from the loosely-typed dictionaries
such stores return. Missing keys and ``null`` blocks are tolerated; unknown
keys are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union

AllowedCollections = Union[str, tuple[str, ...]]


def _optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class FieldSchema:
    """Schema descriptor of a field."""

    is_primary_key: bool = False

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Optional["FieldSchema"]:
        if not isinstance(data, Mapping):
            return None
        return cls(is_primary_key=bool(data.get("is_primary_key", False)))


@dataclass(frozen=True)
class FieldMeta:
    """One declared field of one collection."""

    collection: str
    field: str
    schema: Optional[FieldSchema] = None

    @property
    def is_primary_key(self) -> bool:
        return bool(self.schema and self.schema.is_primary_key)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FieldMeta":
        return cls(
            collection=_optional_str(data.get("collection")) or "",
            field=_optional_str(data.get("field")) or "",
            schema=FieldSchema.from_dict(data.get("schema")),
        )


@dataclass(frozen=True)
class RelationMetaOptions:
    """The ``meta`` block of a relation record."""

    one_field: Optional[str] = None
    one_collection: Optional[str] = None
    many_collection: Optional[str] = None
    one_collection_field: Optional[str] = None
    one_allowed_collections: Optional[AllowedCollections] = None

    @classmethod
    def from_dict(
        cls, data: Optional[Mapping[str, Any]]
    ) -> Optional["RelationMetaOptions"]:
        if not isinstance(data, Mapping):
            return None

        allowed = data.get("one_allowed_collections")
        if isinstance(allowed, (list, tuple)):
            allowed = tuple(str(item) for item in allowed)
        elif allowed is not None:
            allowed = str(allowed)

        return cls(
            one_field=_optional_str(data.get("one_field")),
            one_collection=_optional_str(data.get("one_collection")),
            many_collection=_optional_str(data.get("many_collection")),
            one_collection_field=_optional_str(data.get("one_collection_field")),
            one_allowed_collections=allowed,
        )


@dataclass(frozen=True)
class RelationMeta:
    """One declared relation between two collections.

    ``collection``/``field`` is the owning (many) side holding the foreign key
    or the polymorphic discriminator; ``related_collection`` is the one side.
    """

    collection: str
    field: str
    related_collection: Optional[str] = None
    meta: Optional[RelationMetaOptions] = None

    @property
    def options(self) -> RelationMetaOptions:
        return self.meta or RelationMetaOptions()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RelationMeta":
        return cls(
            collection=_optional_str(data.get("collection")) or "",
            field=_optional_str(data.get("field")) or "",
            related_collection=_optional_str(data.get("related_collection")),
            meta=RelationMetaOptions.from_dict(data.get("meta")),
        )


def parse_fields(items: Iterable[Union[FieldMeta, Mapping[str, Any]]]) -> list[FieldMeta]:
    """Normalize a field catalog, keeping order and passing records through."""
    return [
        item if isinstance(item, FieldMeta) else FieldMeta.from_dict(item)
        for item in items
    ]


def parse_relations(
    items: Iterable[Union[RelationMeta, Mapping[str, Any]]],
) -> list[RelationMeta]:
    """Normalize a relation catalog, keeping order and passing records through."""
    return [
        item if isinstance(item, RelationMeta) else RelationMeta.from_dict(item)
        for item in items
    ]
