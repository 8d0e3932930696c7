import json

import pytest

from storefront.data_access.loader import load_products, product_from_record, products_from_records
from storefront.models.product import AdditionalInfoItem, Product
from storefront.utils.exceptions import DataLoadError


def test_product_from_record_fills_defaults():
    p = product_from_record({"id": 7, "name": "Cross", "category": None, "tags": None, "price": "12.5"})
    assert p.id == "7"
    assert p.category == ""
    assert p.description == ""
    assert p.material == ""
    assert p.tags == []
    assert p.price == 12.5
    assert p.additional_info == []


def test_product_from_record_cleans_values():
    p = product_from_record({
        "id": "a",
        "name": "Statue",
        "tags": ["statue", "", None, "resin"],
        "price": -3,
        "additional_info": [{"title": "Height", "description": "30 cm"}, "junk"],
    })
    assert p.tags == ["statue", "resin"]
    assert p.price == 0.0
    assert p.additional_info == [AdditionalInfoItem(title="Height", description="30 cm")]


def test_product_from_record_bad_price_is_zero():
    assert product_from_record({"id": "x", "price": "n/a"}).price == 0.0


@pytest.mark.parametrize("record", [{"name": "no id"}, {"id": ""}, ["id", "x"]])
def test_product_from_record_rejects_malformed(record):
    with pytest.raises(DataLoadError):
        product_from_record(record)


def test_products_from_records_accepts_wrapped_payload():
    products = products_from_records({"products": [{"id": "1", "name": "Cross"}]})
    assert [p.id for p in products] == ["1"]


def test_products_from_records_rejects_non_list():
    with pytest.raises(DataLoadError):
        products_from_records({"error": "boom"})


def test_load_products_from_file(tmp_path):
    path = tmp_path / "products.json"
    path.write_text(json.dumps([{"id": "1", "name": "Cross"}, {"id": "2", "name": "Rosary"}]), encoding="utf-8")
    products = load_products(str(path))
    assert [p.name for p in products] == ["Cross", "Rosary"]


def test_load_products_missing_file(tmp_path):
    with pytest.raises(DataLoadError, match="File not found"):
        load_products(str(tmp_path / "missing.json"))


def test_load_products_invalid_json(tmp_path):
    path = tmp_path / "products.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DataLoadError, match="Invalid JSON"):
        load_products(str(path))


def test_bundled_catalog_loads():
    products = load_products()
    assert products
    assert all(isinstance(p.category, str) for p in products)


def test_product_constructor_fills_missing_fields():
    p = Product(id="a", name=None, description=None, tags=None, price="3", additional_info=None)
    assert p.name == ""
    assert p.description == ""
    assert p.tags == []
    assert p.price == 3.0
    assert p.additional_info == []
