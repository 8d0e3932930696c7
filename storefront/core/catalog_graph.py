from typing import Sequence
import networkx as nx

from storefront.config.settings import FALLBACK_CATEGORY
from storefront.models.product import Product
from storefront.utils.logger import logger

def product_node_id(product_id: str) -> str:
    return f"product:{product_id}"

def build_catalog_graph(products: Sequence[Product]) -> nx.Graph:
    """Product / category / tag / material graph used to explain suggestions."""
    G = nx.Graph()

    for p in products:
        pid = product_node_id(p.id)
        category = p.category or FALLBACK_CATEGORY
        G.add_node(
            pid,
            node_type="product",
            name=p.name,
            product_id=p.id,
            category=category,
            price=p.price,
            tags=list(p.tags),
        )

        cid = f"category:{category}"
        if cid not in G:
            G.add_node(cid, node_type="category", name=category)
        G.add_edge(pid, cid, edge_type="IN_CATEGORY")

        for tag in p.tags:
            if not tag:
                continue
            tid = f"tag:{tag}"
            if tid not in G:
                G.add_node(tid, node_type="tag", name=tag)
            G.add_edge(pid, tid, edge_type="HAS_TAG")

        if p.material:
            mid = f"material:{p.material}"
            if mid not in G:
                G.add_node(mid, node_type="material", name=p.material)
            G.add_edge(pid, mid, edge_type="MADE_OF")

    logger.info(f"Catalog graph built: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")
    return G
