import re

from ..util import count_split
from .text_utils import count_syllables


def sentence_length_score(text: str) -> int:
    """Coarse readability from average words per sentence.

    Both counts are raw split pieces, so empty fragments count as well.
    """
    sentences = count_split(r'[.!?]+', text)
    words = count_split(r'\s+', text)
    avg_words_per_sentence = words / max(sentences, 1)
    if avg_words_per_sentence <= 15:
        return 90
    if avg_words_per_sentence <= 20:
        return 75
    if avg_words_per_sentence <= 25:
        return 60
    return 40


def flesch_details(text_content: str) -> dict:
    words = [w for w in re.findall(r"\b[\w'-]+\b", text_content) if w]
    sentences = [s for s in re.split(r'[.!?]+', text_content) if s.strip()]
    num_words = len(words)
    num_sentences = len(sentences)
    if num_words < 100 or num_sentences < 3:
        return {
            "fleschReadingEase": None,
            "interpretation": "Not enough content (at least 100 words and 3 sentences recommended).",
        }
    num_syllables = sum(count_syllables(word) for word in words)
    asl = num_words / num_sentences
    asw = num_syllables / num_words
    score = round(206.835 - 1.015 * asl - 84.6 * asw, 2)

    if score >= 90:
        interpretation = "Very easy to read."
    elif score >= 70:
        interpretation = "Easy to read."
    elif score >= 60:
        interpretation = "Plain English."
    elif score >= 50:
        interpretation = "Fairly difficult to read."
    elif score >= 30:
        interpretation = "Difficult to read."
    else:
        interpretation = "Very difficult to read."
    return {
        "fleschReadingEase": score,
        "interpretation": interpretation,
        "fleschKincaidGrade": round(0.39 * asl + 11.8 * asw - 15.59, 2),
        "avgSentenceLength": round(asl, 2),
        "avgSyllablesPerWord": round(asw, 2),
    }
