"""Domain exceptions for relationship resolution."""

from __future__ import annotations


class CollectionRelationsError(Exception):
    """Typed error carrying an issue code alongside the message."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class MissingPrimaryKeyError(CollectionRelationsError):
    """Raised when a referenced collection has no field flagged as primary key.

    This indicates malformed upstream metadata and is never recovered from
    internally: a relationship without a resolvable key target is unusable.
    """

    def __init__(self, collection: str) -> None:
        super().__init__(
            "missing_primary_key",
            f"Cannot find primary key for {collection}",
        )
        self.collection = collection
