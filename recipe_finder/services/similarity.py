from typing import Iterable, Set
from recipe_finder.models import Recipe
from recipe_finder.core.rules import SIMILARITY_WEIGHTS


def score_similarity(target: Recipe, candidate: Recipe) -> float:
    """Score how similar a candidate recipe is to the target.

    Args:
        target: Recipe the user is looking at.
        candidate: Recipe to compare against it.

    Returns:
        A score in [0, 1] where higher is more similar.

    Notes:
        - Cuisine and category are exact, case-sensitive matches on the stored value.
        - Tags and ingredients use Jaccard overlap of lower-cased sets.
        - An empty union contributes nothing.
    """
    score = 0.0

    if target.cuisine == candidate.cuisine:
        score += SIMILARITY_WEIGHTS["cuisine"]

    if target.category == candidate.category:
        score += SIMILARITY_WEIGHTS["category"]

    score += SIMILARITY_WEIGHTS["tags"] * jaccard(
        normalize_terms(target.tags), normalize_terms(candidate.tags)
    )
    score += SIMILARITY_WEIGHTS["ingredients"] * jaccard(
        normalize_terms(target.ingredients), normalize_terms(candidate.ingredients)
    )

    # Weights sum to 1.0; guard against float rounding past it.
    return min(score, 1.0)


def jaccard(left: Set[str], right: Set[str]) -> float:
    """Intersection over union, 0.0 when both sets are empty."""
    union = left | right
    if not union:
        return 0.0
    return len(left & right) / len(union)


def normalize_terms(terms: Iterable[str]) -> Set[str]:
    """Lower-case a list of labels into a set for comparison."""
    return {term.lower() for term in terms}
