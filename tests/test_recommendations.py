"""Tests for recommendation rules and insight counting."""

from clarity.recommendations import (
    Issue,
    Recommendation,
    count_free_insights,
    count_premium_insights,
    generate_recommendations,
)


def _analyses(title=True, description=True, spelling=0, lazy=True, psychology=80, design=80):
    return {
        "seoAnalysis": {"metaTags": {"title": {"present": title}, "description": {"present": description}}},
        "contentAnalysis": {"spellingIssues": [{}] * min(spelling, 5), "spellingIssueCount": spelling},
        "performanceAnalysis": {"optimizations": {"lazyLoading": lazy}},
        "psychologyAnalysis": {"score": psychology},
        "designAnalysis": {"score": design},
    }


class TestGenerateRecommendations:
    def test_healthy_page_has_none(self):
        recs = generate_recommendations(_analyses())
        assert recs == {"criticalIssues": [], "quickWins": [], "strategicImprovements": []}

    def test_missing_meta(self):
        recs = generate_recommendations(_analyses(title=False, description=False))
        assert [(i.severity, i.title) for i in recs["criticalIssues"]] == [
            ("critical", "Missing Page Title"), ("high", "Missing Meta Description"),
        ]
        assert all(not i.premium for i in recs["criticalIssues"])

    def test_spelling_premium_uses_full_count(self):
        few = generate_recommendations(_analyses(spelling=3))["quickWins"][0]
        many = generate_recommendations(_analyses(spelling=8))["quickWins"][0]
        assert few.description == "Found 3 spelling issues"
        assert few.premium is False
        assert many.description == "Found 8 spelling issues"
        assert many.premium is True

    def test_strategic_thresholds(self):
        recs = generate_recommendations(_analyses(psychology=69, design=70))
        assert [r.title for r in recs["strategicImprovements"]] == ["Enhance Trust Signals"]
        assert recs["strategicImprovements"][0].premium is True


class TestInsightCounts:
    def test_counts(self):
        critical = [Issue("critical", "SEO", "t", "d", "i"), Issue("high", "SEO", "t", "d", "i", premium=True)]
        quick = [Recommendation("t", "d", "high", "low", "Content", premium=True), Recommendation("t", "d", "medium", "low", "Performance")]
        strategic = [Recommendation("t", "d", "high", "medium", "Design", premium=True)]
        assert count_free_insights(critical, quick) == 2
        assert count_premium_insights(critical, quick, strategic) == 3

    def test_to_dict(self):
        rec = Recommendation("Implement Lazy Loading", "d", "medium", "low", "Performance")
        assert rec.to_dict() == {
            "title": "Implement Lazy Loading", "description": "d", "impact": "medium",
            "effort": "low", "category": "Performance", "premium": False,
        }


def test_denylist_alone_never_makes_spelling_fix_premium():
    # At most one issue per denylisted word, so the count tops out at the free limit.
    rec = generate_recommendations(_analyses(spelling=5))["quickWins"][0]
    assert rec.premium is False
