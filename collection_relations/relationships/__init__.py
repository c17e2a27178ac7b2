"""
Relationship resolution for content schema catalogs.

Usage:
    from collection_relations.relationships import get_relationship, is_any_to_one

    relationship = get_relationship(fields, relations, "articles", "author")
    if is_any_to_one(relationship):
        targets = [ref.collection for ref in relationship.refs]
"""

# Data types
from .types import (
    ANY_TO_ONE,
    MANY_TO_ONE,
    ONE_TO_MANY,
    RELATIONSHIP_KINDS,
    AnyToOne,
    ManyToOne,
    OneToMany,
    Relationship,
    RelationshipReference,
    is_any_to_one,
    is_many_to_one,
    is_one_to_many,
    is_relationship,
)

# Resolver
from .resolver import find_primary_key, get_relationship, parse_allowed_collections

# GraphQL types
from .graphql_types import (
    AnyToOneType,
    ManyToOneType,
    OneToManyType,
    RelationshipQuery,
    RelationshipReferenceType,
    RelationshipUnion,
)

__all__ = [
    "ANY_TO_ONE",
    "MANY_TO_ONE",
    "ONE_TO_MANY",
    "RELATIONSHIP_KINDS",
    "AnyToOne",
    "ManyToOne",
    "OneToMany",
    "Relationship",
    "RelationshipReference",
    "is_any_to_one",
    "is_many_to_one",
    "is_one_to_many",
    "is_relationship",
    "find_primary_key",
    "get_relationship",
    "parse_allowed_collections",
    "AnyToOneType",
    "ManyToOneType",
    "OneToManyType",
    "RelationshipQuery",
    "RelationshipReferenceType",
    "RelationshipUnion",
]
