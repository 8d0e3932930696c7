import pytest

from storefront.core import scorers
from storefront.models.product import AdditionalInfoItem


def test_search_tokens_accumulate_across_fields(make_product):
    p = make_product(name="Wooden Cross", description="olive wood", material="wood", tags=["woodwork"])
    # name 3 + description 2 + material 2 + tag 1
    assert scorers.score_search_tokens(p, ["wood"]) == 8
    assert scorers.score_search_tokens(p, ["wood", "cross"]) == 11


def test_search_tokens_zero_when_nothing_matches(make_product):
    p = make_product(name="Rosary", material="crystal")
    assert scorers.score_search_tokens(p, ["brass"]) == 0


def test_tag_text_match_counts_once_per_token(make_product):
    p = make_product(tags=["prayer", "prayer-cards"])
    assert scorers.tag_text_match(p, "prayer") == scorers.TAG_TEXT_WEIGHT


def test_active_tags_exact_case_insensitive(make_product):
    p = make_product(tags=["Prayer", "beads"])
    assert scorers.score_active_tags(p, ["prayer"]) == 5
    assert scorers.score_active_tags(p, ["pray"]) == 0
    assert scorers.score_active_tags(p, ["prayer", "BEADS"]) == 10


def test_active_tags_tolerate_duplicates(make_product):
    p = make_product(tags=["prayer", "prayer"])
    assert scorers.score_active_tags(p, ["prayer", "Prayer"]) == 5


def test_related_scenario_total(make_product):
    reference = make_product(name="Wooden Cross", tags=["wall", "wood"], material="wood", size="M", price=120)
    candidate = make_product(name="Small Wooden Cross", tags=["wall"], material="wood", size="M", price=125)

    assert scorers.tag_overlap(candidate, reference) == 3
    assert scorers.material_equality(candidate, reference) == 2
    assert scorers.size_equality(candidate, reference) == 1
    assert scorers.name_word_overlap(candidate, reference) == 3
    assert scorers.price_proximity(candidate, reference) == pytest.approx(4.95)
    assert scorers.score_relatedness(candidate, reference) == pytest.approx(12.95)


def test_material_equality_is_case_sensitive(make_product):
    a = make_product(material="Wood")
    b = make_product(material="wood")
    assert scorers.material_equality(a, b) == 0


def test_price_proximity_bounds_and_monotonic(make_product):
    reference = make_product(price=1000)
    values = [
        scorers.price_proximity(make_product(price=1000 + diff), reference)
        for diff in range(0, 701, 50)
    ]
    assert values[0] == 5
    assert all(0 <= v <= 5 for v in values)
    assert all(a >= b for a, b in zip(values, values[1:]))
    assert scorers.price_proximity(make_product(price=1500), reference) == 0
    assert scorers.price_proximity(make_product(price=400), reference) == 0


def test_description_word_overlap_counts_candidate_words(make_product):
    reference = make_product(description="olive wood cross")
    candidate = make_product(description="wood wood statue")
    assert scorers.description_word_overlap(candidate, reference) == pytest.approx(0.4)


def test_empty_names_share_no_words(make_product):
    a = make_product(name="")
    b = make_product(name="")
    assert scorers.name_word_overlap(a, b) == 0


def test_additional_info_bonus_ignores_equal_content(make_product):
    info = [AdditionalInfoItem(title="Height", description="30 cm")]
    a = make_product(additional_info=list(info))
    b = make_product(additional_info=list(info))
    assert scorers.additional_info_bonus(a, b) == 0
    assert scorers.additional_info_bonus(a, a) == scorers.ADDITIONAL_INFO_BONUS


def test_tag_overlap_counts_distinct_shared_tags(make_product):
    candidate = make_product(tags=["wall", "wall"])
    reference = make_product(tags=["wall"])
    assert scorers.tag_overlap(candidate, reference) == 3
    assert scorers.tag_overlap(reference, candidate) == 3
