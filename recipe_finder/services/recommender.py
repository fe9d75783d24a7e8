from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence
from recipe_finder.models import Recipe, RecommendationResult
from recipe_finder.core.rules import DEFAULT_RECOMMENDATION_LIMIT, MIN_SIMILARITY_SCORE
from recipe_finder.core.logging_config import get_logger
from recipe_finder.services.similarity import score_similarity
from recipe_finder.services.reasons import explain_similarity

logger = get_logger(__name__)


def recommend(
    target: Recipe,
    pool: Sequence[Recipe],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    min_score: float = MIN_SIMILARITY_SCORE,
    workers: int = 1
) -> List[RecommendationResult]:
    """Rank the pool by similarity to the target recipe.

    Args:
        target: Recipe to find neighbours for.
        pool: Candidate recipes. The target itself is skipped by id.
        limit: Maximum number of results. Zero or less returns nothing.
        min_score: Candidates scoring at or below this are dropped.
        workers: Threads used to score candidates; 1 scores inline.

    Returns:
        Results ordered by descending score. Equal scores keep pool order.
    """
    if limit <= 0:
        return []

    candidates = [recipe for recipe in pool if recipe.id != target.id]
    if not candidates:
        return []

    if workers > 1 and len(candidates) > 1:
        with ThreadPoolExecutor(max_workers=min(workers, len(candidates))) as executor:
            # map() yields in submission order, so ties stay in pool order.
            scored = list(executor.map(lambda candidate: _evaluate(target, candidate), candidates))
    else:
        scored = [_evaluate(target, candidate) for candidate in candidates]

    qualifying = [result for result in scored if result.score > min_score]
    qualifying.sort(key=lambda result: result.score, reverse=True)

    logger.debug(
        f"Recipe {target.id}: {len(qualifying)}/{len(candidates)} candidates above {min_score}, "
        f"returning {min(limit, len(qualifying))}"
    )
    return qualifying[:limit]


def _evaluate(target: Recipe, candidate: Recipe) -> RecommendationResult:
    return RecommendationResult(
        recipe=candidate,
        score=score_similarity(target, candidate),
        reasons=explain_similarity(target, candidate)
    )
