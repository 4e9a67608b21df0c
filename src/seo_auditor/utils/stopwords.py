# src/seo_auditor/utils/stopwords.py
import functools
import re
from typing import FrozenSet, Optional, Set

# Closed-class English words that carry little weight in titles and URLs.
COMMON_WORDS_EN: FrozenSet[str] = frozenset({
    "a", "about", "above", "across", "after", "again", "against", "all", "almost", "along", "also", "although",
    "among", "an", "and", "any", "are", "around", "as", "at", "bad", "be", "because", "been", "before", "behind",
    "below", "beneath", "beside", "besides", "between", "beyond", "but", "by", "can", "child", "could", "day", "did",
    "do", "does", "down", "during", "enough", "even", "except", "first", "five", "for", "four", "from", "good", "had",
    "has", "have", "he", "her", "hers", "him", "his", "however", "i", "if", "in", "inside", "into", "is", "it", "its",
    "just", "last", "like", "man", "many", "may", "me", "might", "more", "most", "much", "must", "my", "near", "new", "next",
    "night", "nor", "now", "of", "off", "on", "one", "only", "onto", "or", "other", "our", "out", "outside", "over",
    "past", "quite", "rather", "really", "round", "should", "she", "since", "so", "some", "still", "that", "the",
    "their", "them", "then", "therefore", "these", "they", "this", "those", "though", "three", "through",
    "throughout", "time", "to", "too", "toward", "towards", "two", "under", "underneath", "unless", "until", "up",
    "upon", "us", "very", "was", "we", "well", "were", "while", "will", "with", "within", "without", "woman",
    "would", "year", "yet", "you", "your",
})

_NON_WORD = re.compile(r"[^\w\s]")


def with_common_words(func):
    """Injects COMMON_WORDS_EN when the caller does not pass its own word set."""
    @functools.wraps(func)
    def wrapper(text, common_words=None, *args, **kwargs):
        if common_words is None:
            common_words = COMMON_WORDS_EN
        return func(text, common_words, *args, **kwargs)
    return wrapper


@with_common_words
def common_word_ratio(text: str, common_words: Optional[Set[str]] = None) -> float:
    """
    Returns the percentage (0-100) of tokens in `text` that are common words.

    The text is lowercased and stripped of everything that is not a word
    character or whitespace before it is split on whitespace. Text without
    tokens scores 0.
    """
    words = _NON_WORD.sub("", text.lower()).split()
    if not words:
        return 0.0

    matches = sum(1 for word in words if word in common_words)
    return (matches / len(words)) * 100
