"""Scoring package.

Category score functions plus the weighted overall score.
"""

from .categories import (
    score_accessibility,
    score_content,
    score_design,
    score_performance,
    score_psychology,
    score_seo,
)
from .overall import calculate_overall_score, resolve_weights
from .weights import CATEGORY_KEYS, DEFAULT_CATEGORY_WEIGHTS
