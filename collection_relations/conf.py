"""
Relationship resolution settings.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from django.conf import settings as django_settings

DEFAULT_ALLOWED_COLLECTIONS_SEPARATOR = ","


@dataclass(frozen=True)
class RelationshipSettings:
    allowed_collections_separator: str = DEFAULT_ALLOWED_COLLECTIONS_SEPARATOR
    warn_on_ambiguous_match: bool = True


@lru_cache(maxsize=1)
def get_relationship_settings() -> RelationshipSettings:
    raw = {}
    if django_settings.configured:
        raw = getattr(django_settings, "COLLECTION_RELATIONS", {}) or {}
    separator = str(
        raw.get("allowed_collections_separator", DEFAULT_ALLOWED_COLLECTIONS_SEPARATOR)
    )
    return RelationshipSettings(
        allowed_collections_separator=separator or DEFAULT_ALLOWED_COLLECTIONS_SEPARATOR,
        warn_on_ambiguous_match=bool(raw.get("warn_on_ambiguous_match", True)),
    )
