from typing import Dict

# --- Similarity Weights ---
# Contribution of each factor to the similarity score. Sums to 1.0.
SIMILARITY_WEIGHTS: Dict[str, float] = {
    "cuisine": 0.40,
    "category": 0.30,
    "tags": 0.20,
    "ingredients": 0.10,
}

# Candidates scoring at or below this are not recommended.
MIN_SIMILARITY_SCORE = 0.1

DEFAULT_RECOMMENDATION_LIMIT = 6

# --- Reason Templates ---
REASON_SAME_CUISINE = "Same cuisine ({})"
REASON_SAME_CATEGORY = "Same category ({})"
REASON_SIMILAR_TAGS = "Similar tags: {}"
REASON_SIMILAR_INGREDIENTS = "Similar ingredients: {}"
REASON_FALLBACK = "Similar recipe"

# How many shared items each reason lists.
MAX_REASON_TAGS = 3
MAX_REASON_INGREDIENTS = 2
