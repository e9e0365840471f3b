# clarity/psychology.py
from .base_module import AuditModule
from .page import ParsedPage
from .scoring import score_psychology
from .util import contains_any

CTA_SELECTOR = 'button, a.button, a.btn, .cta'
ACTION_WORDS = ('buy', 'get', 'start', 'try', 'download', 'subscribe', 'contact', 'learn')
URGENCY_WORDS = ('now', 'today', 'limited')
SOCIAL_PROOF_WORDS = ('customers', 'reviews', 'testimonial')
BADGE_ALT_WORDS = ('secure', 'ssl', 'verified')


def _is_https(page: ParsedPage) -> bool:
    canonical = page.soup.select_one('link[rel="canonical"]')
    canonical_href = (canonical.get("href") or "") if canonical else ""
    return canonical_href.startswith('https://') or page.final_url.startswith('https://')


def detect_trust_signals(page: ParsedPage) -> dict:
    text = page.document_text
    signals = {
        'SSL Certificate': _is_https(page),
        'Contact Information': contains_any(text, ('contact', 'email', 'phone')),
        'Privacy Policy': page.select_count('a[href*="privacy"]') > 0,
        'Terms of Service': page.select_count('a[href*="terms"]') > 0,
        'Testimonials': 'testimonial' in text or page.select_count('.testimonial') > 0,
        'Security Badge': any(
            contains_any(img.get("alt") or "", BADGE_ALT_WORDS) for img in page.select('img[alt]')
        ),
    }
    present = [name for name, found in signals.items() if found]
    missing = [name for name, found in signals.items() if not found]
    return {"score": len(present) / len(signals) * 100, "present": present, "missing": missing}


def assess_cta_clarity(cta_count: int, cta_text: str) -> int:
    if cta_count == 0:
        return 0
    has_action_word = contains_any(cta_text, ACTION_WORDS)
    if has_action_word and 1 <= cta_count <= 3:
        return 90
    if has_action_word:
        return 75
    return 60


class PsychologyAnalyzer(AuditModule):
    """Persuasion cues: trust signals, calls to action, urgency and social proof."""

    def analyze(self, page: ParsedPage) -> dict:
        trust_signals = detect_trust_signals(page)
        ctas = page.select(CTA_SELECTOR)
        cta_text = "".join(tag.get_text() for tag in ctas).lower()
        has_urgency = contains_any(cta_text, URGENCY_WORDS)
        has_social_proof = contains_any(page.document_text, SOCIAL_PROOF_WORDS)
        # Without layout information any CTA counts as above the fold.
        above_fold = len(ctas) > 0
        clarity = assess_cta_clarity(len(ctas), cta_text)

        return {
            "score": score_psychology(len(trust_signals["present"]), len(ctas), above_fold, has_social_proof),
            "trustSignals": trust_signals,
            "ctaPlacement": {
                "score": clarity,
                "ctaCount": len(ctas),
                "aboveFold": above_fold,
                "clarity": clarity,
            },
            "colorPsychology": {
                "score": 70,
                "dominantColors": [],
                "emotionalImpact": "Professional",
                "brandAlignment": 75,
            },
            "urgencyTriggers": has_urgency,
            "socialProof": has_social_proof,
        }
