"""Schema catalog records (fields and relations)."""

from .types import (
    FieldMeta,
    FieldSchema,
    RelationMeta,
    RelationMetaOptions,
    parse_fields,
    parse_relations,
)

__all__ = [
    "FieldMeta",
    "FieldSchema",
    "RelationMeta",
    "RelationMetaOptions",
    "parse_fields",
    "parse_relations",
]
