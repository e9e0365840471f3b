import re

from spellchecker import SpellChecker

COMMON_MISSPELLINGS = {
    'recieve': 'receive',
    'occured': 'occurred',
    'seperate': 'separate',
    'definately': 'definitely',
    'alot': 'a lot',
}

GRAMMAR_PATTERNS = [
    ('your welcome', "you're welcome", 'grammar'),
]


def detect_spelling_issues(text: str) -> list:
    """Denylisted misspellings found anywhere in the text (substring match)."""
    lowered = text.lower()
    issues = []
    for word, suggestion in COMMON_MISSPELLINGS.items():
        position = lowered.find(word)
        if position != -1:
            issues.append({"word": word, "suggestion": suggestion, "position": position})
    return issues


def detect_grammar_issues(text: str) -> list:
    return [
        {"text": phrase, "suggestion": suggestion, "type": kind}
        for phrase, suggestion, kind in GRAMMAR_PATTERNS
        if phrase in text
    ]


def dictionary_check(text: str, language: str = "en", sample_limit: int = 2000) -> dict:
    """Unknown words according to pyspellchecker's frequency dictionary."""
    try:
        spell = SpellChecker(language=language)
    except ValueError as e:
        # Unsupported language
        return {"status": "error", "language": language, "error_message": str(e),
                "unknownWordsSample": [], "unknownWordsCount": 0}
    words = re.findall(r'\b[a-zA-Z]+\b', text)[:sample_limit]
    unknown = spell.unknown([w.lower() for w in words if not w.isupper()])
    filtered = sorted(w for w in unknown if len(w) > 3)
    return {
        "status": "completed",
        "language": language,
        "unknownWordsSample": filtered[:20],
        "unknownWordsCount": len(filtered),
    }
