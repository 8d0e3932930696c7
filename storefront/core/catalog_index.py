from typing import Dict, List, Sequence

from storefront.config.settings import FALLBACK_CATEGORY
from storefront.models.product import CategoryWithTags, Product
from storefront.core.ranking import ensure_products

def build_category_index(products: Sequence[Product]) -> List[CategoryWithTags]:
    """Map each category to the distinct tags seen on its products.

    Products without a category are grouped under ``"Others"``. Categories
    and tags both keep first-seen order.
    """
    products = ensure_products(products)

    index: Dict[str, Dict[str, None]] = {}
    for p in products:
        category = p.category or FALLBACK_CATEGORY
        tags = index.setdefault(category, {})
        for tag in p.tags:
            if tag:
                tags.setdefault(tag, None)

    return [CategoryWithTags(category=cat, tags=list(tags)) for cat, tags in index.items()]

def collect_tags(products: Sequence[Product]) -> List[str]:
    products = ensure_products(products)
    seen: Dict[str, None] = {}
    for p in products:
        for tag in p.tags:
            if tag:
                seen.setdefault(tag, None)
    return list(seen)
