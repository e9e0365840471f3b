# clarity/performance.py
from .base_module import AuditModule
from .page import ParsedPage
from .scoring import score_performance

SCRIPT_WEIGHT = 0.2
STYLESHEET_WEIGHT = 0.15
IMAGE_WEIGHT = 0.1


def estimate_load_time(scripts: int, styles: int, images: int) -> float:
    """Seconds, from resource counts alone."""
    return scripts * SCRIPT_WEIGHT + styles * STYLESHEET_WEIGHT + images * IMAGE_WEIGHT


class PerformanceAnalyzer(AuditModule):
    """Resource counts and static optimisation hints. Nothing is downloaded."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.max_scripts = self.config.get("max_scripts", 10)

    def analyze(self, page: ParsedPage) -> dict:
        script_tags = page.select('script[src]')
        stylesheet_tags = page.select('link[rel="stylesheet"]')
        images = page.select_count('img')

        minified_css = any('.min.css' in (tag.get('href') or '') for tag in stylesheet_tags)
        minified_js = any('.min.js' in (tag.get('src') or '') for tag in script_tags)
        lazy_loading = page.select_count('img[loading="lazy"]') > 0

        return {
            "score": score_performance(len(script_tags), minified_css, minified_js, lazy_loading, self.max_scripts),
            "estimatedLoadTime": round(estimate_load_time(len(script_tags), len(stylesheet_tags), images), 2),
            "resourcesSize": {
                "images": images,
                "scripts": len(script_tags),
                "styles": len(stylesheet_tags),
            },
            "optimizations": {
                "minifiedCSS": minified_css,
                "minifiedJS": minified_js,
                "compressedImages": False,  # needs the image bytes
                "lazyLoading": lazy_loading,
            },
        }
