import pytest

from storefront.models.product import Product


@pytest.fixture
def make_product():
    counter = {"n": 0}

    def _make(**kwargs):
        counter["n"] += 1
        kwargs.setdefault("id", f"p{counter['n']}")
        kwargs.setdefault("name", f"Product {counter['n']}")
        return Product(**kwargs)

    return _make


@pytest.fixture
def rosary_and_cross():
    return [
        Product(id="rosary", name="Rosary Beads", tags=["prayer", "beads"], material="wood", price=100),
        Product(id="cross", name="Wooden Cross", tags=["wall", "wood"], material="wood", price=120),
    ]
