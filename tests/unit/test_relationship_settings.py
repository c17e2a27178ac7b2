import pytest
from django.test import override_settings

from collection_relations.conf import RelationshipSettings, get_relationship_settings

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clear_relationship_settings_cache():
    get_relationship_settings.cache_clear()
    yield
    get_relationship_settings.cache_clear()


def test_defaults_apply_without_overrides():
    assert get_relationship_settings() == RelationshipSettings()


@override_settings(
    COLLECTION_RELATIONS={
        "allowed_collections_separator": ";",
        "warn_on_ambiguous_match": False,
    }
)
def test_settings_are_read_from_django_settings():
    relationship_settings = get_relationship_settings()

    assert relationship_settings.allowed_collections_separator == ";"
    assert relationship_settings.warn_on_ambiguous_match is False


@override_settings(COLLECTION_RELATIONS={"allowed_collections_separator": ""})
def test_empty_separator_falls_back_to_comma():
    assert get_relationship_settings().allowed_collections_separator == ","


@override_settings(COLLECTION_RELATIONS=None)
def test_null_settings_use_defaults():
    assert get_relationship_settings() == RelationshipSettings()
