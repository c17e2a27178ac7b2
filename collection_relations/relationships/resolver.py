"""
Relationship resolution over schema catalog records.

``get_relationship`` classifies the relationship a ``(collection, field)``
pair takes part in, given the field catalog and the relation catalog of a
content schema. It is a pure function: inputs are never mutated and nothing
is cached between calls.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from ..conf import get_relationship_settings
from ..exceptions import MissingPrimaryKeyError
from ..metadata.types import (
    AllowedCollections,
    FieldMeta,
    RelationMeta,
    parse_fields,
    parse_relations,
)
from .types import (
    AnyToOne,
    ManyToOne,
    OneToMany,
    Relationship,
    RelationshipReference,
)

logger = logging.getLogger(__name__)

FieldInput = Union[FieldMeta, Mapping[str, Any]]
RelationInput = Union[RelationMeta, Mapping[str, Any]]


def find_primary_key(fields: Sequence[FieldMeta], collection: str) -> str:
    """
    Return the primary key field name of ``collection``.

    Args:
        fields: Field catalog to search
        collection: Collection whose primary key is wanted

    Returns:
        Name of the first field of ``collection`` flagged as primary key

    Raises:
        MissingPrimaryKeyError: If no field of ``collection`` is flagged
    """
    for candidate in fields:
        if candidate.collection == collection and candidate.is_primary_key:
            return candidate.field
    raise MissingPrimaryKeyError(collection)


def parse_allowed_collections(
    collections: AllowedCollections, separator: str = ","
) -> list[str]:
    """Split a polymorphic target list, trimming names and keeping order."""
    if isinstance(collections, str):
        collections = collections.split(separator)
    return [str(name).strip() for name in collections]


def _has_allowed_collections(value: Optional[AllowedCollections]) -> bool:
    # An empty sequence still declares the relation polymorphic.
    if value is None:
        return False
    return not isinstance(value, str) or bool(value)


def _is_owning_side(relation: RelationMeta, collection: str, field: str) -> bool:
    return relation.collection == collection and relation.field == field


def _is_reverse_side(relation: RelationMeta, collection: str, field: str) -> bool:
    return (
        relation.related_collection == collection
        and relation.options.one_field == field
    )


def _find_candidate(
    relations: Sequence[RelationMeta], collection: str, field: str
) -> Optional[RelationMeta]:
    # First match wins; duplicates are kept in list order, not disambiguated.
    matches = [
        relation
        for relation in relations
        if _is_owning_side(relation, collection, field)
        or _is_reverse_side(relation, collection, field)
    ]
    if not matches:
        return None

    if len(matches) > 1 and get_relationship_settings().warn_on_ambiguous_match:
        logger.warning(
            "%d relation records match %s.%s; using the first one",
            len(matches),
            collection,
            field,
        )
    return matches[0]


def _reference(fields: Sequence[FieldMeta], collection: str) -> RelationshipReference:
    return RelationshipReference(
        collection=collection, pk=find_primary_key(fields, collection)
    )


def get_relationship(
    fields: Iterable[FieldInput],
    relations: Iterable[RelationInput],
    collection: str,
    field: str,
) -> Relationship:
    """
    Resolve the relationship a ``(collection, field)`` pair takes part in.

    The first relation record owned by ``collection.field``, or whose reverse
    field on ``collection`` is ``field``, is classified in priority order:
    any-to-one, then many-to-one, then one-to-many.

    Args:
        fields: Field catalog, records or raw dictionaries
        relations: Relation catalog, records or raw dictionaries
        collection: Queried collection name
        field: Queried field name

    Returns:
        A ``ManyToOne``, ``OneToMany`` or ``AnyToOne`` value, or ``None``
        when no relationship applies

    Raises:
        MissingPrimaryKeyError: If a target collection has no primary key
    """
    field_catalog = parse_fields(fields)
    relation = _find_candidate(parse_relations(relations), collection, field)

    if relation is None:
        logger.debug("No relation found for %s.%s", collection, field)
        return None

    options = relation.options

    if (
        _is_owning_side(relation, collection, field)
        and options.one_collection_field
        and _has_allowed_collections(options.one_allowed_collections)
    ):
        separator = get_relationship_settings().allowed_collections_separator
        refs = tuple(
            _reference(field_catalog, name)
            for name in parse_allowed_collections(
                options.one_allowed_collections, separator
            )
        )
        logger.debug(
            "Resolved %s.%s as any-to-one over %d collections",
            collection,
            field,
            len(refs),
        )
        return AnyToOne(collection=collection, field=field, refs=refs)

    if _is_owning_side(relation, collection, field) and options.one_collection:
        return ManyToOne(
            collection=collection,
            field=field,
            ref=_reference(field_catalog, options.one_collection),
        )

    if _is_reverse_side(relation, collection, field) and options.many_collection:
        return OneToMany(
            collection=collection,
            field=field,
            ref=_reference(field_catalog, options.many_collection),
        )

    logger.debug("Relation for %s.%s matches no relationship shape", collection, field)
    return None
