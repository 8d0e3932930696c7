from typing import Callable, List, Optional

from storefront.models.product import Product
from storefront.data_access.loader import load_products
from storefront.utils.logger import logger

class ProductCache:
    """Holds the product collection between requests.

    The owner calls ``invalidate()`` whenever product data is modified; the
    next ``get()`` reloads through ``loader``.
    """

    def __init__(self, loader: Callable[[], List[Product]] = load_products) -> None:
        self._loader = loader
        self._products: Optional[List[Product]] = None

    @property
    def is_populated(self) -> bool:
        return self._products is not None

    def get(self) -> List[Product]:
        if self._products is None:
            self.set(self._loader())
        return self._products

    def set(self, products: List[Product]) -> None:
        self._products = list(products)
        logger.info(f"Product cache populated with {len(self._products)} products")

    def invalidate(self) -> None:
        self._products = None
        logger.info("Product cache invalidated")
