"""GraphQL types for resolved relationships.

This module exposes relationship values through Graphene so downstream
consumers can query how a collection field relates to other collections.
The field and relation catalogs are read from the request context.
"""

import logging

import graphene
from graphql.error import GraphQLError

from ..exceptions import MissingPrimaryKeyError
from .resolver import get_relationship
from .types import RELATIONSHIP_KINDS

logger = logging.getLogger(__name__)


class RelationshipReferenceType(graphene.ObjectType):
    """GraphQL type for a relationship target."""

    collection = graphene.String(required=True, description="Target collection")
    pk = graphene.String(
        required=True, description="Primary key field of the target collection"
    )


class ManyToOneType(graphene.ObjectType):
    """GraphQL type for a foreign key pointing at one collection."""

    type = graphene.String(required=True, description="Relationship kind (m2o)")
    collection = graphene.String(required=True, description="Queried collection")
    field = graphene.String(required=True, description="Queried field")
    many = graphene.Boolean(required=True, description="Always false")
    ref = graphene.Field(RelationshipReferenceType, required=True)


class OneToManyType(graphene.ObjectType):
    """GraphQL type for the reverse side of a foreign key."""

    type = graphene.String(required=True, description="Relationship kind (o2m)")
    collection = graphene.String(required=True, description="Queried collection")
    field = graphene.String(required=True, description="Queried field")
    many = graphene.Boolean(required=True, description="Always true")
    ref = graphene.Field(RelationshipReferenceType, required=True)


class AnyToOneType(graphene.ObjectType):
    """GraphQL type for a polymorphic foreign key."""

    type = graphene.String(required=True, description="Relationship kind (a2o)")
    collection = graphene.String(required=True, description="Queried collection")
    field = graphene.String(required=True, description="Queried field")
    refs = graphene.List(
        graphene.NonNull(RelationshipReferenceType),
        required=True,
        description="Allowed target collections, in declared order",
    )


_TYPES_BY_KIND = dict(
    zip(RELATIONSHIP_KINDS, (ManyToOneType, OneToManyType, AnyToOneType))
)


class RelationshipUnion(graphene.Union):
    """Any resolved relationship."""

    class Meta:
        types = (ManyToOneType, OneToManyType, AnyToOneType)

    @classmethod
    def resolve_type(cls, instance, info):
        return _TYPES_BY_KIND.get(getattr(instance, "type", None))


def _get_catalogs(context):
    if isinstance(context, dict):
        return context.get("fields") or [], context.get("relations") or []
    return (
        getattr(context, "fields", None) or [],
        getattr(context, "relations", None) or [],
    )


class RelationshipQuery(graphene.ObjectType):
    """
    GraphQL queries for relationship resolution.

    The request context must carry ``fields`` and ``relations`` catalogs,
    either as attributes or as dictionary keys.
    """

    relationship = graphene.Field(
        RelationshipUnion,
        collection=graphene.String(required=True),
        field=graphene.String(required=True),
        description="Resolve the relationship of a collection field, if any",
    )

    def resolve_relationship(self, info, collection, field, **kwargs):
        fields, relations = _get_catalogs(info.context)
        try:
            return get_relationship(fields, relations, collection, field)
        except MissingPrimaryKeyError as e:
            logger.error("Relationship resolution failed for %s.%s: %s", collection, field, e)
            raise GraphQLError(e.message, extensions={"code": e.code})
