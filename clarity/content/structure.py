from ..page import ParsedPage

CTA_PHRASES = ('contact', 'get started', 'buy now')


def analyze_heading_structure(page: ParsedPage) -> dict:
    h1 = page.select_count('h1')
    h2 = page.select_count('h2')
    h3 = page.select_count('h3')
    proper = h1 == 1 and h2 > 0
    return {
        "h1Count": h1,
        "h2Count": h2,
        "h3Count": h3,
        "properHierarchy": proper,
        "score": 90 if proper else 60,
    }


def has_call_to_action(page: ParsedPage) -> bool:
    link_text = page.all_text('button, a').lower()
    return any(phrase in link_text for phrase in CTA_PHRASES)


def has_clear_value(page: ParsedPage) -> bool:
    title = page.all_text('title').lower()
    h1 = page.first_text('h1').lower()
    return len(title) > 10 and len(h1) > 10


def assess_message_clarity(page: ParsedPage) -> int:
    h1 = page.first_text('h1')
    title = page.all_text('title')
    if len(h1) > 20 and len(title) > 20:
        return 90
    if len(h1) > 10 or len(title) > 10:
        return 70
    return 40
