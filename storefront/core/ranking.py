from collections import abc
from typing import Iterable, List, Optional, Sequence

from storefront.models.product import Product, ScoredCandidate
from storefront.core.tokenizer import tokenize
from storefront.core.scorers import score_search_tokens, score_active_tags, score_relatedness
from storefront.utils.exceptions import InvalidInputError
from storefront.utils.logger import logger

def ensure_products(products: object, arg_name: str = "products") -> Sequence[Product]:
    """Fail fast unless ``products`` is a list or tuple of Product records."""
    if not isinstance(products, (list, tuple)):
        raise InvalidInputError(
            f"{arg_name} must be a list or tuple of Product, got {type(products).__name__}"
        )
    for idx, p in enumerate(products):
        if not isinstance(p, Product):
            raise InvalidInputError(
                f"{arg_name}[{idx}] must be a Product, got {type(p).__name__}"
            )
    return products

def _ensure_query(query_text: object) -> str:
    if query_text is None:
        return ""
    if not isinstance(query_text, str):
        raise InvalidInputError(f"query_text must be a string, got {type(query_text).__name__}")
    return query_text

def _ensure_tags(active_tags: object) -> List[str]:
    if active_tags is None:
        return []
    if isinstance(active_tags, (str, bytes)) or not isinstance(active_tags, abc.Iterable):
        raise InvalidInputError(
            f"active_tags must be an iterable of strings, got {type(active_tags).__name__}"
        )
    tags = list(active_tags)
    for tag in tags:
        if not isinstance(tag, str):
            raise InvalidInputError(f"active_tags entries must be strings, got {type(tag).__name__}")
    return tags

def _sort_by_score(scored: List[ScoredCandidate]) -> List[ScoredCandidate]:
    # list.sort is stable, so equal scores keep their input order
    scored.sort(key=lambda c: c.score, reverse=True)
    return scored

def score_search(
    products: Sequence[Product],
    query_text: Optional[str],
    active_tags: Optional[Iterable[str]],
) -> List[ScoredCandidate]:
    """Score and order products against a free-text query and tag filters.

    With no query tokens and no active tags every product is returned with a
    score of 0 in its original order. Otherwise products scoring 0 are dropped
    and the rest are ordered by descending score. An empty-string tag still
    counts as a filter; it matches no product.
    """
    products = ensure_products(products)
    tokens = tokenize(_ensure_query(query_text))
    tags = _ensure_tags(active_tags)

    if not tokens and not tags:
        return [ScoredCandidate(product=p, score=0.0) for p in products]

    scored: List[ScoredCandidate] = []
    for p in products:
        s = score_search_tokens(p, tokens) + score_active_tags(p, tags)
        if s > 0:
            scored.append(ScoredCandidate(product=p, score=s))

    logger.debug(
        f"Search scored {len(products)} products for {len(tokens)} tokens and "
        f"{len(tags)} tags, {len(scored)} matched"
    )
    return _sort_by_score(scored)

def score_related(reference: Product, products: Sequence[Product]) -> List[ScoredCandidate]:
    if not isinstance(reference, Product):
        raise InvalidInputError(f"reference must be a Product, got {type(reference).__name__}")
    products = ensure_products(products)

    scored = [
        ScoredCandidate(product=p, score=score_relatedness(p, reference))
        for p in products
        if p.id != reference.id
    ]
    logger.debug(f"Related scoring for '{reference.id}' ranked {len(scored)} candidates")
    return _sort_by_score(scored)

def rank_by_search(
    products: Sequence[Product],
    query_text: Optional[str],
    active_tags: Optional[Iterable[str]] = None,
) -> List[Product]:
    return [c.product for c in score_search(products, query_text, active_tags)]

def rank_related(reference: Product, products: Sequence[Product]) -> List[Product]:
    """Every other product ordered by similarity to ``reference``. Not truncated."""
    return [c.product for c in score_related(reference, products)]
