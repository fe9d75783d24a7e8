from conftest import make_recipe
from recipe_finder.services.reasons import explain_similarity, shared_terms


def test_reasons_for_full_match_follow_fixed_order():
    target = make_recipe("1", "Italian", "Dessert", ["sweet", "baked"], ["flour", "sugar"])
    candidate = make_recipe("2", "Italian", "Dessert", ["sweet", "quick"], ["flour", "butter"])

    assert explain_similarity(target, candidate) == [
        "Same cuisine (Italian)",
        "Same category (Dessert)",
        "Similar tags: sweet",
        "Similar ingredients: flour",
    ]


def test_category_only_reason():
    target = make_recipe("1", "Italian", "Dessert", ["sweet"], ["sugar"])
    candidate = make_recipe("2", "American", "Dessert", ["chocolate"], ["cocoa"])

    assert explain_similarity(target, candidate) == ["Same category (Dessert)"]


def test_fallback_reason_when_nothing_matches():
    target = make_recipe("1", "Italian", "Dessert", ["sweet"], ["sugar"])
    candidate = make_recipe("2", "Indian", "Curry", ["spicy"], ["chicken"])

    assert explain_similarity(target, candidate) == ["Similar recipe"]


def test_reasons_keep_target_casing():
    target = make_recipe("1", "A", "B", ["Sweet", "BAKED"], ["Plain Flour"])
    candidate = make_recipe("2", "C", "D", ["baked", "sweet"], ["plain flour"])

    assert explain_similarity(target, candidate) == [
        "Similar tags: Sweet, BAKED",
        "Similar ingredients: Plain Flour",
    ]


def test_reasons_truncate_shared_items():
    tags = ["a", "b", "c", "d", "e"]
    ingredients = ["x", "y", "z"]
    target = make_recipe("1", "A", "B", tags, ingredients)
    candidate = make_recipe("2", "C", "D", list(reversed(tags)), list(reversed(ingredients)))

    assert explain_similarity(target, candidate) == [
        "Similar tags: a, b, c",
        "Similar ingredients: x, y",
    ]


def test_reasons_report_case_variants_once():
    target = make_recipe("1", "A", "B", ["Spicy", "spicy", "hot"], [])
    candidate = make_recipe("2", "C", "D", ["SPICY", "hot"], [])

    assert explain_similarity(target, candidate) == ["Similar tags: Spicy, hot"]


def test_cuisine_reason_is_case_sensitive():
    target = make_recipe("1", "Italian", "Dessert", ["sweet"], [])
    candidate = make_recipe("2", "italian", "Salad", ["sweet"], [])

    assert explain_similarity(target, candidate) == ["Similar tags: sweet"]


def test_shared_terms_preserves_target_order():
    assert shared_terms(["c", "a", "B"], ["b", "A", "c"]) == ["c", "a", "B"]
    assert shared_terms([], ["a"]) == []
