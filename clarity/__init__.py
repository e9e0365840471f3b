"""Website clarity audit.

Fetches one page and scores its content, SEO, performance, design,
persuasion and accessibility with fixed heuristics.
"""

from .analyzer import WebsiteAnalyzer, normalize_url, is_valid_url
from .config import DEFAULT_CONFIG, load_config
from .errors import AnalysisError, FetchError, InvalidURLError
from .page import ParsedPage

__version__ = "1.0.0"
