from typing import Iterable, List

from storefront.models.product import Product
from storefront.core.tokenizer import split_words

# Text search weights, applied once per query token
NAME_WEIGHT = 3.0
DESCRIPTION_WEIGHT = 2.0
MATERIAL_WEIGHT = 2.0
TAG_TEXT_WEIGHT = 1.0

# Tag filter weight, applied once per matching active tag
ACTIVE_TAG_WEIGHT = 5.0

# Relatedness weights
SHARED_TAG_WEIGHT = 3.0
SAME_MATERIAL_WEIGHT = 2.0
SAME_SIZE_WEIGHT = 1.0
NAME_WORD_WEIGHT = 1.5
PRICE_PROXIMITY_MAX = 5.0
PRICE_PROXIMITY_SCALE = 100.0
DESCRIPTION_WORD_WEIGHT = 0.2
ADDITIONAL_INFO_BONUS = 0.5

def _lower_tags(product: Product) -> List[str]:
    return [t.lower() for t in product.tags]

# ---------- text search ----------

def name_match(product: Product, token: str) -> float:
    return NAME_WEIGHT if token in product.name.lower() else 0.0

def description_match(product: Product, token: str) -> float:
    return DESCRIPTION_WEIGHT if token in product.description.lower() else 0.0

def material_match(product: Product, token: str) -> float:
    return MATERIAL_WEIGHT if token in product.material.lower() else 0.0

def tag_text_match(product: Product, token: str) -> float:
    return TAG_TEXT_WEIGHT if any(token in tag for tag in _lower_tags(product)) else 0.0

SEARCH_SCORERS = (name_match, description_match, material_match, tag_text_match)

def score_search_tokens(product: Product, tokens: List[str]) -> float:
    score = 0.0
    for token in tokens:
        for scorer in SEARCH_SCORERS:
            score += scorer(product, token)
    return score

def score_active_tags(product: Product, active_tags: Iterable[str]) -> float:
    """Exact, case-insensitive tag filter. Each distinct active tag counts once."""
    candidate_tags = set(_lower_tags(product))
    wanted = {t.lower() for t in active_tags}
    return ACTIVE_TAG_WEIGHT * len(wanted & candidate_tags)

# ---------- relatedness ----------

def tag_overlap(candidate: Product, reference: Product) -> float:
    return SHARED_TAG_WEIGHT * len(set(candidate.tags) & set(reference.tags))

def material_equality(candidate: Product, reference: Product) -> float:
    return SAME_MATERIAL_WEIGHT if candidate.material == reference.material else 0.0

def size_equality(candidate: Product, reference: Product) -> float:
    return SAME_SIZE_WEIGHT if candidate.size == reference.size else 0.0

def name_word_overlap(candidate: Product, reference: Product) -> float:
    candidate_words = set(split_words(candidate.name))
    shared = [w for w in split_words(reference.name) if w in candidate_words]
    return NAME_WORD_WEIGHT * len(shared)

def price_proximity(candidate: Product, reference: Product) -> float:
    diff = abs(candidate.price - reference.price)
    return max(0.0, PRICE_PROXIMITY_MAX - diff / PRICE_PROXIMITY_SCALE)

def description_word_overlap(candidate: Product, reference: Product) -> float:
    reference_words = set(split_words(reference.description))
    shared = [w for w in split_words(candidate.description) if w in reference_words]
    return DESCRIPTION_WORD_WEIGHT * len(shared)

def additional_info_bonus(candidate: Product, reference: Product) -> float:
    # Only a product compared with itself qualifies, and rank_related drops the
    # reference before scoring, so this never contributes to related results.
    return ADDITIONAL_INFO_BONUS if candidate.id == reference.id else 0.0

RELATEDNESS_SCORERS = (
    tag_overlap,
    material_equality,
    size_equality,
    name_word_overlap,
    price_proximity,
    description_word_overlap,
    additional_info_bonus,
)

def score_relatedness(candidate: Product, reference: Product) -> float:
    return sum(scorer(candidate, reference) for scorer in RELATEDNESS_SCORERS)
