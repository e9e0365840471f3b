"""Content analysis package.

Provides `ContentAnalyzer` orchestrating readability, spelling and
structure helpers implemented in sibling modules.
"""

from .analyzer import ContentAnalyzer
