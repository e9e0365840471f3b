# clarity/analyzer.py
import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from urllib.parse import urlparse

from .accessibility import AccessibilityAnalyzer
from .base_module import PageFetcher
from .config import DEFAULT_CONFIG, module_config
from .content import ContentAnalyzer
from .design import DesignAnalyzer
from .errors import AnalysisError, InvalidURLError
from .performance import PerformanceAnalyzer
from .psychology import PsychologyAnalyzer
from .recommendations import count_free_insights, count_premium_insights, generate_recommendations
from .scoring import calculate_overall_score
from .seo import SEOAnalyzer

logger = logging.getLogger(__name__)

# Report key -> (analyzer class, config section)
ANALYSIS_MODULES = {
    "contentAnalysis": (ContentAnalyzer, "ContentAnalyzer"),
    "seoAnalysis": (SEOAnalyzer, "SEOAnalyzer"),
    "performanceAnalysis": (PerformanceAnalyzer, "PerformanceAnalyzer"),
    "designAnalysis": (DesignAnalyzer, "DesignAnalyzer"),
    "psychologyAnalysis": (PsychologyAnalyzer, "PsychologyAnalyzer"),
    "accessibilityAnalysis": (AccessibilityAnalyzer, "AccessibilityAnalyzer"),
}

CAPABILITIES = [
    'Content Analysis',
    'SEO Analysis',
    'Performance Analysis',
    'Design Analysis',
    'Psychology Analysis',
    'Accessibility Analysis',
]


def normalize_url(url: str) -> str:
    url = (url or "").strip()
    if url and '://' not in url:
        return 'http://' + url
    return url


def is_valid_url(url: str) -> bool:
    try:
        result = urlparse(normalize_url(url))
        _ = result.port  # ValueError on a non-numeric or out-of-range port
    except ValueError:
        return False
    return result.scheme in ('http', 'https') and bool(result.netloc) and ' ' not in result.netloc


class WebsiteAnalyzer:
    """
    Runs a full clarity audit for one URL: fetch once, fan the six analyzers
    out over the parsed page, then score and derive recommendations.
    """

    def __init__(self, config=None, fetcher=None):
        self.config = config if config else DEFAULT_CONFIG
        self.fetcher = fetcher if fetcher is not None else PageFetcher(self.config.get("Global", {}))
        self.workers = int(self.config.get("Api", {}).get("workers", len(ANALYSIS_MODULES)))
        self.modules = {
            key: cls(config=module_config(self.config, section))
            for key, (cls, section) in ANALYSIS_MODULES.items()
        }

    def analyze(self, url: str) -> dict:
        if not is_valid_url(url):
            raise InvalidURLError(url)
        url = normalize_url(url)
        logger.info("Starting clarity analysis for %s", url)

        try:
            page = self.fetcher.fetch(url)
            report = self.analyze_page(page)
        except AnalysisError as e:
            raise AnalysisError(f"Analysis failed: {e}", reason=e.reason) from e
        except Exception as e:
            logger.exception("Unexpected error analysing %s", url)
            raise AnalysisError(f"Analysis failed: {e}") from e

        logger.info("Analysis of %s completed. Overall score: %s", url, report["overallScore"])
        return report

    def analyze_page(self, page) -> dict:
        """Score an already parsed page. Analyzer exceptions propagate."""
        # Warm the shared text caches before the threads read them.
        _ = (page.body_text, page.document_text)

        with ThreadPoolExecutor(max_workers=max(1, self.workers)) as ex:
            futures = {key: ex.submit(module.analyze, page) for key, module in self.modules.items()}
            analyses = {key: fut.result() for key, fut in futures.items()}

        weights = self.config.get("Scoring", {}).get("category_weights")
        recommendations = generate_recommendations(analyses)
        critical = recommendations["criticalIssues"]
        quick_wins = recommendations["quickWins"]
        strategic = recommendations["strategicImprovements"]

        return {
            "url": page.url,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "overallScore": calculate_overall_score(analyses, weights),
            **analyses,
            "criticalIssues": [item.to_dict() for item in critical],
            "quickWins": [item.to_dict() for item in quick_wins],
            "strategicImprovements": [item.to_dict() for item in strategic],
            "freeInsightsCount": count_free_insights(critical, quick_wins),
            "premiumInsightsAvailable": count_premium_insights(critical, quick_wins, strategic),
        }
