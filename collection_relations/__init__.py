"""
Collection Relations

Resolves how a field of a content schema collection relates to other
collections: many-to-one, one-to-many or polymorphic any-to-one.
"""

__version__ = "0.1.0"

from .exceptions import CollectionRelationsError, MissingPrimaryKeyError
from .metadata import FieldMeta, FieldSchema, RelationMeta, RelationMetaOptions
from .relationships import (
    AnyToOne,
    ManyToOne,
    OneToMany,
    Relationship,
    RelationshipReference,
    find_primary_key,
    get_relationship,
    is_any_to_one,
    is_many_to_one,
    is_one_to_many,
    is_relationship,
)

__all__ = [
    "CollectionRelationsError",
    "MissingPrimaryKeyError",
    "FieldMeta",
    "FieldSchema",
    "RelationMeta",
    "RelationMetaOptions",
    "AnyToOne",
    "ManyToOne",
    "OneToMany",
    "Relationship",
    "RelationshipReference",
    "find_primary_key",
    "get_relationship",
    "is_any_to_one",
    "is_many_to_one",
    "is_one_to_many",
    "is_relationship",
]
