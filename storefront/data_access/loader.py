import json
from typing import Any, List, Mapping, Optional

from storefront.config.paths import PRODUCTS_PATH
from storefront.models.product import TEXT_FIELDS, AdditionalInfoItem, Product
from storefront.utils.exceptions import DataLoadError
from storefront.utils.logger import logger

def _load_json(path: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        logger.error(f"File not found: {path}")
        raise DataLoadError(f"File not found: {path}") from e
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {path}")
        raise DataLoadError(f"Invalid JSON in {path}") from e

def _as_text(value: Any) -> str:
    return "" if value is None else str(value)

def _as_price(value: Any) -> float:
    try:
        price = float(value)
    except (TypeError, ValueError):
        return 0.0
    if price != price or price < 0:  # NaN or negative
        return 0.0
    return price

def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0

def _as_additional_info(value: Any) -> List[AdditionalInfoItem]:
    if not isinstance(value, list):
        return []
    items = []
    for entry in value:
        if isinstance(entry, Mapping):
            items.append(AdditionalInfoItem(
                title=_as_text(entry.get("title")),
                description=_as_text(entry.get("description")),
            ))
    return items

def product_from_record(record: Any) -> Product:
    """Build a fully populated Product from a raw catalog row.

    Missing or null text fields become empty strings and missing tags an
    empty list, so scoring code never has to deal with absent values.
    """
    if not isinstance(record, Mapping):
        raise DataLoadError(f"Product record must be an object, got {type(record).__name__}")
    if record.get("id") in (None, ""):
        raise DataLoadError(f"Product record without id: {record.get('name')!r}")

    raw_tags = record.get("tags") or []
    if isinstance(raw_tags, str):
        raw_tags = [raw_tags]

    fields = {name: _as_text(record.get(name)) for name in TEXT_FIELDS}
    return Product(
        id=str(record["id"]),
        tags=[str(t) for t in raw_tags if t],
        price=_as_price(record.get("price")),
        additional_info=_as_additional_info(record.get("additional_info")),
        quantity=_as_int(record.get("quantity")),
        **fields,
    )

def products_from_records(raw: Any) -> List[Product]:
    # the products API sometimes wraps the list as {"products": [...]}
    if isinstance(raw, Mapping) and isinstance(raw.get("products"), list):
        raw = raw["products"]
    if not isinstance(raw, list):
        raise DataLoadError(f"Expected a list of products, got {type(raw).__name__}")
    return [product_from_record(item) for item in raw]

def load_products(path: Optional[str] = None) -> List[Product]:
    path = path or PRODUCTS_PATH
    products = products_from_records(_load_json(path))
    logger.info(f"Loaded {len(products)} products from {path}")
    return products
