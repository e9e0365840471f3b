"""SEO analysis package."""

from .analyzer import SEOAnalyzer
