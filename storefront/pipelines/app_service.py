import math
from typing import Any, Dict, List, Optional, Sequence, Tuple
import networkx as nx

from storefront.config.settings import ITEMS_PER_PAGE, RELATED_COUNT
from storefront.models.product import CategoryWithTags, Product, ScoredCandidate
from storefront.data_access.cache import ProductCache
from storefront.core.catalog_graph import build_catalog_graph
from storefront.core.catalog_index import build_category_index, collect_tags
from storefront.core.ranking import score_search, score_related
from storefront.core.visualize import visualize_related
from storefront.utils.exceptions import ProductNotFoundError
from storefront.utils.logger import logger

def paginate(items: Sequence[Any], page: int, per_page: int) -> Tuple[List[Any], int]:
    """Return the slice for ``page`` (1-based) and the total page count."""
    per_page = max(1, per_page)
    total_pages = math.ceil(len(items) / per_page)
    page = max(1, page)
    start = (page - 1) * per_page
    return list(items[start:start + per_page]), total_pages

class StorefrontService:
    """High-level service used by the Streamlit storefront."""

    def __init__(self, cache: Optional[ProductCache] = None) -> None:
        self.cache = cache or ProductCache()
        self._graph: Optional[nx.Graph] = None
        self._graph_source: Optional[List[Product]] = None

    @property
    def products(self) -> List[Product]:
        return self.cache.get()

    def refresh(self) -> List[Product]:
        self.cache.invalidate()
        return self.products

    @property
    def graph(self) -> nx.Graph:
        products = self.products
        # rebuilt whenever the cache hands out a different collection
        if self._graph is None or self._graph_source is not products:
            self._graph = build_catalog_graph(products)
            self._graph_source = products
        return self._graph

    def category_index(self) -> List[CategoryWithTags]:
        return build_category_index(self.products)

    def all_tags(self) -> List[str]:
        return collect_tags(self.products)

    def get_product(self, key: str) -> Optional[Product]:
        for p in self.products:
            if p.id == key or (p.slug and p.slug == key):
                return p
        return None

    def search(
        self,
        query: str,
        tags: List[str],
        page: int = 1,
        per_page: int = ITEMS_PER_PAGE,
    ) -> Dict[str, Any]:
        ranked = score_search(self.products, query, tags)
        query = (query or "").strip()
        page_items, total_pages = paginate(ranked, page, per_page)

        if not ranked:
            if query:
                message = f'No products found matching your search: "{query}".'
            else:
                message = "No products found for the selected filters."
        elif query or tags:
            message = f"{len(ranked)} matching products."
        else:
            message = f"Showing all {len(ranked)} products."

        logger.info(f"Search query={query!r} tags={tags} -> {len(ranked)} results")
        return {
            "results": page_items,
            "total": len(ranked),
            "page": max(1, page),
            "total_pages": total_pages,
            "message": message,
        }

    def related(self, key: str, limit: int = RELATED_COUNT) -> List[ScoredCandidate]:
        reference = self.get_product(key)
        if reference is None:
            raise ProductNotFoundError(key)
        return score_related(reference, self.products)[:limit]

    def build_visualization(self, reference: Product, related: List[ScoredCandidate]):
        return visualize_related(self.graph, reference, [c.product for c in related])
