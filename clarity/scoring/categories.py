"""Fixed-weight score functions, one per audit category.

Each takes the features its analyzer extracted and returns a 0-100 score.
"""

from ..util import round_half_up
from .util import award, cap


def score_content(word_count: int, readability: int, spelling_issues: int,
                  has_clear_value: bool, min_words: int = 300) -> int:
    score = 70
    score += award(word_count >= min_words, 10)
    score += award(readability >= 60, 10)
    score += award(spelling_issues == 0, 5)
    score += award(has_clear_value, 5)
    return int(cap(score, high=100))


def score_seo(title_length: int, description_length: int, proper_structure: bool,
              schema_markup: bool, mobile_optimized: bool,
              title_range=(30, 60), desc_min_length: int = 120) -> int:
    score = 50
    score += award(title_range[0] <= title_length <= title_range[1], 15)
    score += award(description_length >= desc_min_length, 15)
    score += award(proper_structure, 10)
    score += award(schema_markup, 5)
    score += award(mobile_optimized, 5)
    return int(cap(score, high=100))


def score_performance(scripts: int, minified_css: bool, minified_js: bool,
                      lazy_loading: bool, max_scripts: int = 10) -> int:
    score = 80
    score -= award(scripts > max_scripts, 10)
    score += award(minified_css, 5)
    score += award(minified_js, 5)
    score += award(lazy_loading, 10)
    return int(cap(score))


def score_design(visual_hierarchy: int, whitespace: int, readable_size: bool, font_variety: int) -> int:
    score = 60
    score += award(visual_hierarchy >= 70, 15)
    score += award(whitespace >= 70, 10)
    score += award(readable_size, 10)
    score += award(3 <= font_variety <= 6, 5)
    return int(cap(score, high=100))


def score_psychology(trust_signals: int, cta_count: int, cta_above_fold: bool, social_proof: bool) -> int:
    score = 50
    score += award(trust_signals >= 3, 20)
    score += award(cta_count >= 1, 10)
    score += award(cta_above_fold, 10)
    score += award(social_proof, 10)
    return int(cap(score, high=100))


def score_accessibility(aria_score: float, alt_score: float, semantic_html: bool, has_lang: bool) -> int:
    score = (aria_score + alt_score) / 2
    score += award(semantic_html, 10)
    score += award(has_lang, 5)
    return round_half_up(min(100, score))
