import django
from django.conf import settings


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")
    if not settings.configured:
        settings.configure(
            INSTALLED_APPS=[],
            COLLECTION_RELATIONS={},
        )
        django.setup()
