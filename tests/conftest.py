"""
pytest configuration and fixtures for healing texts tests
"""

import pytest
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fastapi.testclient import TestClient

from api.app import create_app
from catalog import CatalogStore, QuoteRecord, catalog_store
from client.state import AppState, load_catalog


@pytest.fixture
def public_dir(tmp_path):
    """Static root inside a temporary directory"""
    return tmp_path / "public"


@pytest.fixture
def app(public_dir):
    """FastAPI application serving a temporary static root"""
    return create_app(static_dir=public_dir)


@pytest.fixture
def client(app):
    """Create test client"""
    return TestClient(app)


@pytest.fixture
def store():
    """The embedded catalog"""
    return catalog_store


@pytest.fixture
def sample_records():
    """Small catalog including an unknown category and missing metadata"""
    return [
        QuoteRecord(id=1, text="阳光明媚", image="/images/sunshine.jpg", category="nature",
                    author="自然之美", source="描述风景的美好"),
        QuoteRecord(id=2, text="人生如逆旅，我亦是行人。", image="/images/butterfly.jpg",
                    category="wisdom", author="苏轼", source="《临江仙·送钱穆父》"),
        QuoteRecord(id=3, text="微风 <轻拂>", image="/images/breeze.jpg", category="breeze"),
        QuoteRecord(id=4, text="海阔天空", image="/images/ocean.jpg", category="nature"),
    ]


@pytest.fixture
def sample_store(sample_records):
    return CatalogStore(sample_records)


@pytest.fixture
def loaded_state(store):
    """Client state after the catalog has been fetched"""
    return load_catalog(AppState(), store.all())


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
