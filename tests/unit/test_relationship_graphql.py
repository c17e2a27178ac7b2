from types import SimpleNamespace

import graphene
import pytest

from collection_relations.relationships.graphql_types import RelationshipQuery

pytestmark = pytest.mark.unit

QUERY = """
query Relationship($collection: String!, $field: String!) {
  relationship(collection: $collection, field: $field) {
    __typename
    ... on ManyToOneType { type many ref { collection pk } }
    ... on OneToManyType { type many ref { collection pk } }
    ... on AnyToOneType { type refs { collection pk } }
  }
}
"""

FIELDS = [
    {"collection": "articles", "field": "id", "schema": {"is_primary_key": True}},
    {"collection": "authors", "field": "uuid", "schema": {"is_primary_key": True}},
    {"collection": "blocks", "field": "id", "schema": {"is_primary_key": True}},
]

RELATIONS = [
    {
        "collection": "articles",
        "field": "author",
        "related_collection": "authors",
        "meta": {
            "one_field": "articles",
            "one_collection": "authors",
            "many_collection": "articles",
        },
    },
    {
        "collection": "blocks",
        "field": "item",
        "meta": {
            "one_collection_field": "collection",
            "one_allowed_collections": "articles,authors",
        },
    },
]


@pytest.fixture
def schema():
    return graphene.Schema(query=RelationshipQuery)


def _execute(schema, collection, field, context):
    return schema.execute(
        QUERY,
        variable_values={"collection": collection, "field": field},
        context_value=context,
    )


def test_many_to_one_is_exposed(schema):
    result = _execute(
        schema, "articles", "author", {"fields": FIELDS, "relations": RELATIONS}
    )

    assert result.errors is None
    assert result.data["relationship"] == {
        "__typename": "ManyToOneType",
        "type": "m2o",
        "many": False,
        "ref": {"collection": "authors", "pk": "uuid"},
    }


def test_context_object_catalogs_are_used(schema):
    context = SimpleNamespace(fields=FIELDS, relations=RELATIONS)

    result = _execute(schema, "authors", "articles", context)

    assert result.errors is None
    assert result.data["relationship"]["__typename"] == "OneToManyType"
    assert result.data["relationship"]["ref"] == {"collection": "articles", "pk": "id"}


def test_any_to_one_is_exposed(schema):
    result = _execute(schema, "blocks", "item", {"fields": FIELDS, "relations": RELATIONS})

    assert result.errors is None
    assert result.data["relationship"]["refs"] == [
        {"collection": "articles", "pk": "id"},
        {"collection": "authors", "pk": "uuid"},
    ]


def test_unrelated_field_is_null(schema):
    result = _execute(schema, "articles", "title", {"fields": FIELDS, "relations": RELATIONS})

    assert result.errors is None
    assert result.data["relationship"] is None


def test_missing_primary_key_surfaces_as_error(schema):
    fields = [item for item in FIELDS if item["collection"] != "authors"]

    result = _execute(schema, "articles", "author", {"fields": fields, "relations": RELATIONS})

    assert result.data["relationship"] is None
    assert result.errors[0].message == "Cannot find primary key for authors"
    assert result.errors[0].extensions == {"code": "missing_primary_key"}
