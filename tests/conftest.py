import pytest
from fastapi.testclient import TestClient

from aldenair.main import app
from aldenair.core.session import session_manager
from aldenair.models.catalog import CatalogItem, ProductCategory, Variant
from aldenair.security.rate_limit import cart_rate_limit, checkout_rate_limit


@pytest.fixture(autouse=True)
def reset_state():
    """Each test starts with no cart sessions and fresh rate limits."""
    session_manager.sessions.clear()
    cart_rate_limit.limiter.clear()
    checkout_rate_limit.limiter.clear()
    yield
    session_manager.sessions.clear()
    cart_rate_limit.limiter.clear()
    checkout_rate_limit.limiter.clear()


@pytest.fixture
def test_client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def cart_id(test_client: TestClient) -> str:
    """Cart session created through the API"""
    response = test_client.post("/api/cart")
    assert response.status_code == 200
    return response.json()["cart"]["cart_id"]


@pytest.fixture
def item_a() -> CatalogItem:
    return CatalogItem(
        id="item-a",
        brand="Maison Luxe",
        name="Elégance Or",
        category=ProductCategory.WOMEN,
        size="50ml",
    )


@pytest.fixture
def variant_a() -> Variant:
    return Variant(
        id="variant-a",
        parent_item_id="item-a",
        number="A-50",
        name="Elégance Or 50ml",
        price_minor_units=4499,
    )


@pytest.fixture
def item_b() -> CatalogItem:
    return CatalogItem(
        id="item-b",
        brand="Parfum Royal",
        name="Rose Mystique",
        category=ProductCategory.WOMEN,
        size="30ml",
    )


@pytest.fixture
def variant_b() -> Variant:
    return Variant(
        id="variant-b",
        parent_item_id="item-b",
        number="B-30",
        name="Rose Mystique 30ml",
        price_minor_units=2999,
    )
