# clarity/recommendations.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List


@dataclass
class Issue:
    severity: str  # critical | high | medium | low
    category: str
    title: str
    description: str
    impact: str
    premium: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Recommendation:
    title: str
    description: str
    impact: str  # high | medium | low
    effort: str  # low | medium | high
    category: str
    premium: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Spelling quick wins beyond this many issues are premium.
FREE_SPELLING_ISSUES = 5


def generate_recommendations(analyses: Dict[str, Any]) -> Dict[str, List]:
    critical_issues: List[Issue] = []
    quick_wins: List[Recommendation] = []
    strategic: List[Recommendation] = []

    seo = analyses.get("seoAnalysis", {})
    content = analyses.get("contentAnalysis", {})
    performance = analyses.get("performanceAnalysis", {})
    meta = seo.get("metaTags", {})

    if not meta.get("title", {}).get("present"):
        critical_issues.append(Issue(
            'critical', 'SEO', 'Missing Page Title',
            'Your page is missing a title tag, which is crucial for SEO',
            'Search engines cannot properly index your page',
        ))
    if not meta.get("description", {}).get("present"):
        critical_issues.append(Issue(
            'high', 'SEO', 'Missing Meta Description',
            'No meta description found',
            'Lower click-through rates from search results',
        ))

    spelling_count = content.get("spellingIssueCount", len(content.get("spellingIssues", [])))
    if spelling_count > 0:
        quick_wins.append(Recommendation(
            'Fix Spelling Errors', f'Found {spelling_count} spelling issues',
            'high', 'low', 'Content', premium=spelling_count > FREE_SPELLING_ISSUES,
        ))
    if not performance.get("optimizations", {}).get("lazyLoading"):
        quick_wins.append(Recommendation(
            'Implement Lazy Loading', 'Add lazy loading to images for faster initial page load',
            'medium', 'low', 'Performance',
        ))

    if analyses.get("psychologyAnalysis", {}).get("score", 0) < 70:
        strategic.append(Recommendation(
            'Enhance Trust Signals', 'Add testimonials, security badges, and social proof',
            'high', 'medium', 'Psychology', premium=True,
        ))
    if analyses.get("designAnalysis", {}).get("score", 0) < 70:
        strategic.append(Recommendation(
            'Improve Visual Hierarchy', 'Optimize typography and spacing for better readability',
            'high', 'medium', 'Design', premium=True,
        ))

    return {
        "criticalIssues": critical_issues,
        "quickWins": quick_wins,
        "strategicImprovements": strategic,
    }


def count_free_insights(critical_issues, quick_wins) -> int:
    return sum(1 for item in list(critical_issues) + list(quick_wins) if not item.premium)


def count_premium_insights(critical_issues, quick_wins, strategic) -> int:
    return sum(1 for item in list(critical_issues) + list(quick_wins) + list(strategic) if item.premium)
