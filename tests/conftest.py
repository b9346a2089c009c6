import pytest
from fastapi.testclient import TestClient

from dashboard_catalog.config import Settings
from dashboard_catalog.database.memory_store import MemoryStore
from dashboard_catalog.models.request_models import DashboardCreate
from dashboard_catalog.services.catalog_service import CatalogService, get_catalog_service


def make_dashboard(title: str, description: str = "", category: str = "data", **kwargs) -> DashboardCreate:
    return DashboardCreate(
        title=title,
        description=description,
        category=category,
        image_url=kwargs.pop("image_url", "https://example.com/image.png"),
        created_by=kwargs.pop("created_by", "Test Team"),
        **kwargs
    )


@pytest.fixture
def dashboard_factory():
    return make_dashboard


@pytest.fixture
def store():
    return MemoryStore(seed_sample_data=False)


@pytest.fixture
def settings():
    return Settings(seed_sample_data=False)


@pytest.fixture
def service(store, settings):
    return CatalogService(store, settings=settings)


@pytest.fixture
def client(service):
    from dashboard_catalog.api.main import app

    app.dependency_overrides[get_catalog_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
