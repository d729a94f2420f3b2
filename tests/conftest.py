import django
import pytest
from django.conf import settings


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: tests spanning several components")

    if not settings.configured:
        settings.configure(
            DEBUG=False,
            INSTALLED_APPS=[],
            USE_TZ=True,
        )
        django.setup()


@pytest.fixture(autouse=True)
def _isolated_model_registry():
    from supermodel.factory import model_registry

    saved = model_registry.all()
    yield
    model_registry.clear()
    for name, model_class in saved.items():
        model_registry.register(name, model_class)
