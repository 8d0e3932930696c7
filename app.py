import matplotlib.pyplot as plt
import streamlit as st
from storefront.config.settings import ITEMS_PER_PAGE, RELATED_COUNT
from storefront.pipelines.app_service import StorefrontService

service = StorefrontService()

st.set_page_config(layout="wide", page_title="Storefront")

# ---------- Global CSS ----------
st.markdown("""
<style>
body, .main, .stApp {
    background-color: #050b16;
    color: #e0e6f0;
}
.block-container {
    padding-top: 2.8rem;
    padding-bottom: 1.5rem;
}

/* Hero area */
.hero-title {
    font-size: 30px;
    font-weight: 800;
    background: linear-gradient(90deg, #5ab0ff, #9f7bff);
    -webkit-background-clip: text;
    color: transparent;
}
.hero-subtitle {
    font-size: 14px;
    color: #9ca7c6;
}

/* Product cards */
.product-card {
    border: 1px solid #1f2a3a;
    border-radius: 14px;
    padding: 14px 16px;
    margin-bottom: 12px;
    background: radial-gradient(circle at top left, #1a2740 0%, #050b16 55%);
    box-shadow: 0 4px 10px rgba(0,0,0,0.7);
}
.product-title {
    font-weight: 700;
    font-size: 17px;
    margin-bottom: 4px;
    color: #ffffff;
}
.product-price {
    font-size: 15px;
    font-weight: 600;
    color: #4fe3c1;
}
.product-meta {
    font-size: 13px;
    color: #d0d6e0;
}

/* Badges */
.badge {
    display: inline-block;
    padding: 2px 8px;
    border-radius: 999px;
    font-size: 11px;
    font-weight: 600;
    margin-right: 6px;
}
.badge-category {
    background: rgba(93, 156, 255, 0.16);
    color: #78aaff;
    border: 1px solid rgba(93, 156, 255, 0.4);
}
.badge-score {
    background: rgba(255, 200, 97, 0.16);
    color: #ffc861;
    border: 1px solid rgba(255, 200, 97, 0.4);
}

/* Tag chips, active filters highlighted */
.tag-list {
    margin-top: 6px;
}
.tag-chip {
    display: inline-block;
    padding: 1px 7px;
    margin: 0 4px 4px 0;
    border-radius: 4px;
    font-size: 11px;
    color: #b8c2dc;
    background: #0d1a2d;
    border: 1px dashed #2c3e5c;
}
.tag-chip-active {
    color: #050b16;
    background: #4fe3c1;
    border: 1px solid #4fe3c1;
}

/* Related products column */
.related-heading {
    font-size: 13px;
    text-transform: uppercase;
    letter-spacing: 0.08em;
    color: #9ca7c6;
    margin: 10px 0 6px 0;
}
</style>
""", unsafe_allow_html=True)

def tag_chips(tags, active=()):
    active = {t.lower() for t in active}
    chips = "".join(
        f"<span class='tag-chip{' tag-chip-active' if t.lower() in active else ''}'>{t}</span>"
        for t in tags
    )
    return f"<div class='tag-list'>{chips}</div>" if chips else ""

def product_card(product, score=None, badge=None, active_tags=()):
    score_badge = f"<span class='badge badge-score'>{badge or 'Score'} {score:.2f}</span>" if score else ""
    st.markdown(
        f"""
        <div class="product-card">
            <div class="product-title">{product.name}</div>
            <div class="product-meta">
                <span class="badge badge-category">{product.category or 'Others'}</span>
                {score_badge}
            </div>
            <div class="product-price">₹{product.price:g}</div>
            <div class="product-meta">Material: {product.material or '-'} · Size: {product.size or '-'}</div>
            {tag_chips(product.tags, active_tags)}
        </div>
        """,
        unsafe_allow_html=True,
    )

# ---------- Hero header ----------
st.markdown('<div class="hero-title">Storefront</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="hero-subtitle">'
    'Search the catalog, filter by tags, and open any product to see related items.</div>',
    unsafe_allow_html=True
)
st.write("")

# ---------- Sidebar: filter panel ----------
with st.sidebar:
    st.subheader("Filter by tags")
    active_tags = []
    for group in service.category_index():
        with st.expander(group.category):
            picked = st.multiselect("Tags", options=group.tags, default=[], key=f"tags_{group.category}")
            active_tags.extend(t for t in picked if t not in active_tags)
    if st.button("Reload catalog"):
        service.refresh()

# ---------- Layout: two columns ----------
left_col, right_col = st.columns([1.5, 1])

with left_col:
    query = st.text_input("Search products", key="query")
    page = st.number_input("Page", min_value=1, value=1, step=1, key="page")

    result = service.search(query, active_tags, page=int(page), per_page=ITEMS_PER_PAGE)
    st.info(result["message"])
    for cand in result["results"]:
        product_card(cand.product, cand.score, active_tags=active_tags)
    if result["total_pages"] > 1:
        st.caption(f"Page {result['page']} of {result['total_pages']}")

with right_col:
    names = {p.name: p.id for p in service.products}
    selected = st.selectbox("Product details", ["(none)"] + list(names), key="detail")

    if selected != "(none)":
        reference = service.get_product(names[selected])
        related = service.related(reference.id, limit=RELATED_COUNT)

        tab_related, tab_graph = st.tabs(["You may also like", "Connections"])
        with tab_related:
            product_card(reference)
            st.markdown('<div class="related-heading">You may also like</div>', unsafe_allow_html=True)
            for cand in related:
                product_card(cand.product, cand.score, badge="Match")
        with tab_graph:
            fig = service.build_visualization(reference, related)
            if fig:
                st.pyplot(fig)
                plt.close(fig)
            else:
                st.write("No shared tags, categories or materials to show.")
