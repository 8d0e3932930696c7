from typing import List, Optional
import matplotlib.pyplot as plt
import networkx as nx

from storefront.models.product import Product
from storefront.core.catalog_graph import product_node_id

NODE_COLORS = {
    "category": "#cfe2ff",
    "tag": "#ffccd5",
    "material": "#ffd6a5",
}

def visualize_related(G: nx.Graph, reference: Product, related: List[Product]) -> Optional[plt.Figure]:
    if not related:
        return None

    root_id = product_node_id(reference.id)
    target_ids = [product_node_id(p.id) for p in related if product_node_id(p.id) in G]
    if root_id not in G or not target_ids:
        return None

    nodes = {root_id}
    edges = set()

    for tid in target_ids:
        try:
            path = nx.shortest_path(G, source=root_id, target=tid)
        except nx.NetworkXNoPath:
            continue
        for a, b in zip(path, path[1:]):
            nodes.add(a)
            nodes.add(b)
            edges.add((a, b))

    if not edges:
        return None

    sub = G.edge_subgraph(list(edges)).copy()

    fig, ax = plt.subplots(figsize=(10, 6))
    shells = [
        [root_id],
        [n for n in sub.nodes() if n != root_id and n not in target_ids],
        [t for t in target_ids if t in sub],
    ]
    pos = nx.shell_layout(sub, nlist=[s for s in shells if s])

    colors = []
    for n in sub.nodes():
        if n == root_id:
            colors.append("#ffe680")   # reference
        elif n in target_ids:
            colors.append("#b3ffb3")   # suggestions
        else:
            colors.append(NODE_COLORS.get(sub.nodes[n].get("node_type"), "#f0f0f0"))

    nx.draw_networkx_nodes(sub, pos, ax=ax, node_size=650, node_color=colors, edgecolors="#000000")
    nx.draw_networkx_edges(sub, pos, ax=ax, alpha=0.7, width=1.5, edge_color="#bbbbbb")

    labels = {n: sub.nodes[n].get("name", n) for n in sub.nodes()}
    nx.draw_networkx_labels(sub, pos, ax=ax, labels=labels, font_size=8, font_color="#000000")

    ax.set_facecolor("#050b16")
    ax.set_title(f"How '{reference.name}' connects to suggested products", fontsize=10)
    ax.axis("off")
    return fig
