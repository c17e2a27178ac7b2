"""Resolved relationship values.

A resolved relationship is exactly one of :class:`ManyToOne`,
:class:`OneToMany` or :class:`AnyToOne`; ``None`` means the queried
``(collection, field)`` pair takes part in no relationship. Every value
carries a ``type`` tag (``"m2o"``, ``"o2m"``, ``"a2o"``) so consumers can
dispatch on it, or use the ``is_*`` guards below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Union

MANY_TO_ONE = "m2o"
ONE_TO_MANY = "o2m"
ANY_TO_ONE = "a2o"

RELATIONSHIP_KINDS = (MANY_TO_ONE, ONE_TO_MANY, ANY_TO_ONE)


@dataclass(frozen=True)
class RelationshipReference:
    """Target of a relationship: a collection and its primary key field."""

    collection: str
    pk: str

    def to_dict(self) -> dict[str, Any]:
        return {"collection": self.collection, "pk": self.pk}


@dataclass(frozen=True)
class ManyToOne:
    """The field holds a foreign key to exactly one other collection."""

    type: ClassVar[str] = MANY_TO_ONE
    many: ClassVar[bool] = False

    collection: str
    field: str
    ref: RelationshipReference

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "collection": self.collection,
            "field": self.field,
            "many": self.many,
            "ref": self.ref.to_dict(),
        }


@dataclass(frozen=True)
class OneToMany:
    """The (virtual) field lists rows of another collection pointing back here."""

    type: ClassVar[str] = ONE_TO_MANY
    many: ClassVar[bool] = True

    collection: str
    field: str
    ref: RelationshipReference

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "collection": self.collection,
            "field": self.field,
            "many": self.many,
            "ref": self.ref.to_dict(),
        }


@dataclass(frozen=True)
class AnyToOne:
    """The field is a polymorphic foreign key into any of ``refs``.

    Which collection a given row points to is decided at the data level by a
    companion discriminator field.
    """

    type: ClassVar[str] = ANY_TO_ONE

    collection: str
    field: str
    refs: tuple[RelationshipReference, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "collection": self.collection,
            "field": self.field,
            "refs": [ref.to_dict() for ref in self.refs],
        }


Relationship = Optional[Union[OneToMany, ManyToOne, AnyToOne]]


def is_relationship(relationship: Relationship = None) -> bool:
    return relationship is not None


def is_one_to_many(relationship: Relationship = None) -> bool:
    return getattr(relationship, "type", None) == ONE_TO_MANY


def is_many_to_one(relationship: Relationship = None) -> bool:
    return getattr(relationship, "type", None) == MANY_TO_ONE


def is_any_to_one(relationship: Relationship = None) -> bool:
    return getattr(relationship, "type", None) == ANY_TO_ONE
