from ..base_module import AuditModule
from ..page import ParsedPage
from ..scoring import score_content
from .readability import flesch_details, sentence_length_score
from .spelling import detect_grammar_issues, detect_spelling_issues, dictionary_check
from .structure import analyze_heading_structure, assess_message_clarity, has_call_to_action, has_clear_value
from .text_utils import split_words


class ContentAnalyzer(AuditModule):
    """Word count, readability, spelling and messaging checks on the body text."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.issue_limit = self.config.get("free_tier_issue_limit", 5)
        self.min_words = self.config.get("min_words", 300)
        self.run_dictionary_check = self.config.get("dictionary_check", True)
        self.spellcheck_lang = self.config.get("spellcheck_language", "en")

    def analyze(self, page: ParsedPage) -> dict:
        text = page.body_text
        word_count = len(split_words(text))
        readability = sentence_length_score(text)
        spelling_issues = detect_spelling_issues(text)
        grammar_issues = detect_grammar_issues(text)
        clear_value = has_clear_value(page)

        results = {
            "score": score_content(word_count, readability, len(spelling_issues), clear_value, self.min_words),
            "wordCount": word_count,
            "readabilityScore": readability,
            "readabilityDetails": flesch_details(text),
            "spellingIssues": spelling_issues[:self.issue_limit],
            "spellingIssueCount": len(spelling_issues),
            "grammarIssues": grammar_issues[:self.issue_limit],
            "grammarIssueCount": len(grammar_issues),
            "headingStructure": analyze_heading_structure(page),
            "contentQuality": {
                "hasClearValue": clear_value,
                "hasCallToAction": has_call_to_action(page),
                "messageClarity": assess_message_clarity(page),
            },
        }
        if self.run_dictionary_check:
            results["dictionaryCheck"] = dictionary_check(text, self.spellcheck_lang)
        return results
