import re


def split_words(text: str) -> list:
    """Non-empty whitespace-separated tokens."""
    return [w for w in re.split(r'\s+', text) if w]


def count_syllables(word: str) -> int:
    word = word.lower()
    if not word:
        return 0
    word = re.sub(r'[^a-z]', '', word)
    if len(word) <= 3:
        return 1
    if word.endswith("e") and not word.endswith("le"):
        word = word[:-1]
    vowels = "aeiouy"
    syllable_count = 0
    prev_char_was_vowel = False
    for char in word:
        is_vowel = char in vowels
        if is_vowel and not prev_char_was_vowel:
            syllable_count += 1
        prev_char_was_vowel = is_vowel
    return max(1, syllable_count)
