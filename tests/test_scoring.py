"""Tests for the category score functions and the weighted overall score."""

import pytest

from clarity.scoring import (
    calculate_overall_score,
    resolve_weights,
    score_accessibility,
    score_content,
    score_design,
    score_performance,
    score_psychology,
    score_seo,
)
from clarity.util import round_half_up


class TestCategoryScores:
    def test_content_baseline_and_cap(self):
        assert score_content(10, 40, 2, False) == 70
        assert score_content(300, 60, 0, True) == 100

    def test_seo_components(self):
        assert score_seo(0, 0, False, False, False) == 50
        assert score_seo(45, 130, True, True, True) == 100
        # Title too long, description present but short
        assert score_seo(61, 119, True, False, True) == 65

    def test_performance_penalty_and_clamp(self):
        assert score_performance(11, False, False, False) == 70
        assert score_performance(10, False, False, False) == 80
        assert score_performance(2, True, True, True) == 100

    def test_design_font_variety_window(self):
        assert score_design(50, 50, False, 2) == 60
        assert score_design(50, 50, False, 3) == 65
        assert score_design(50, 50, False, 7) == 60
        assert score_design(90, 80, True, 4) == 100

    def test_psychology(self):
        assert score_psychology(2, 0, False, False) == 50
        assert score_psychology(3, 1, True, True) == 100

    def test_accessibility_rounds_half_up_and_caps(self):
        assert score_accessibility(41, 100, False, False) == 71  # 70.5
        assert score_accessibility(100, 100, True, True) == 100
        assert score_accessibility(0, 0, False, True) == 5


class TestOverallScore:
    def _analyses(self, **scores):
        keys = {
            "content": "contentAnalysis", "seo": "seoAnalysis", "performance": "performanceAnalysis",
            "design": "designAnalysis", "psychology": "psychologyAnalysis", "accessibility": "accessibilityAnalysis",
        }
        return {keys[name]: {"score": value} for name, value in scores.items()}

    def test_uniform_scores(self):
        analyses = self._analyses(content=80, seo=80, performance=80, design=80, psychology=80, accessibility=80)
        assert calculate_overall_score(analyses) == 80

    def test_weighted_sum(self):
        analyses = self._analyses(content=100, seo=0, performance=0, design=0, psychology=0, accessibility=0)
        assert calculate_overall_score(analyses) == 25

    def test_missing_category_contributes_nothing(self):
        analyses = self._analyses(content=100, seo=100)
        assert calculate_overall_score(analyses) == 45

    def test_weight_override(self):
        weights = resolve_weights({"content": 1.0, "unknown": 5})
        assert weights["content"] == 1.0
        assert "unknown" not in weights
        analyses = self._analyses(content=50, seo=0, performance=0, design=0, psychology=0, accessibility=0)
        assert calculate_overall_score(analyses, {"content": 1.0}) == 50


@pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (70.49, 70), (84.999, 85)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
