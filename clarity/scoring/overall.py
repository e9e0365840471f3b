from ..util import round_half_up
from .weights import CATEGORY_KEYS, DEFAULT_CATEGORY_WEIGHTS


def resolve_weights(overrides: dict | None = None) -> dict:
    weights = dict(DEFAULT_CATEGORY_WEIGHTS)
    for name, weight in (overrides or {}).items():
        if name in weights:
            weights[name] = float(weight)
    return weights


def calculate_overall_score(analyses: dict, weights: dict | None = None) -> int:
    """Weighted sum of the category scores, rounded half up.

    ``analyses`` is keyed like the report (``contentAnalysis`` ...). A missing
    category contributes nothing.
    """
    weights = resolve_weights(weights)
    total = 0.0
    for category, weight in weights.items():
        result = analyses.get(CATEGORY_KEYS[category]) or {}
        total += result.get("score", 0) * weight
    return round_half_up(total)
