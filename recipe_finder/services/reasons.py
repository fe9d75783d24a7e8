from typing import List, Sequence
from recipe_finder.models import Recipe
from recipe_finder.core.rules import (
    MAX_REASON_INGREDIENTS,
    MAX_REASON_TAGS,
    REASON_FALLBACK,
    REASON_SAME_CATEGORY,
    REASON_SAME_CUISINE,
    REASON_SIMILAR_INGREDIENTS,
    REASON_SIMILAR_TAGS,
)
from recipe_finder.services.similarity import normalize_terms


def explain_similarity(target: Recipe, candidate: Recipe) -> List[str]:
    """Build human-readable reasons for recommending candidate next to target.

    Reasons come in a fixed order: cuisine, category, tags, ingredients.
    Shared tags/ingredients are listed in the target's order and casing.
    The list is never empty; "Similar recipe" is used when nothing matched.
    """
    reasons: List[str] = []

    if target.cuisine == candidate.cuisine:
        reasons.append(REASON_SAME_CUISINE.format(target.cuisine))

    if target.category == candidate.category:
        reasons.append(REASON_SAME_CATEGORY.format(target.category))

    common_tags = shared_terms(target.tags, candidate.tags)
    if common_tags:
        reasons.append(REASON_SIMILAR_TAGS.format(", ".join(common_tags[:MAX_REASON_TAGS])))

    common_ingredients = shared_terms(target.ingredients, candidate.ingredients)
    if common_ingredients:
        reasons.append(
            REASON_SIMILAR_INGREDIENTS.format(", ".join(common_ingredients[:MAX_REASON_INGREDIENTS]))
        )

    return reasons or [REASON_FALLBACK]


def shared_terms(target_terms: Sequence[str], candidate_terms: Sequence[str]) -> List[str]:
    """Target terms that also appear in candidate_terms, ignoring case.

    Each term is reported once, using its first spelling in the target.
    """
    candidate_keys = normalize_terms(candidate_terms)
    seen = set()
    shared: List[str] = []
    for term in target_terms:
        key = term.lower()
        if key in candidate_keys and key not in seen:
            seen.add(key)
            shared.append(term)
    return shared
