"""Heuristic text segmentation and capitalization checks used by the prose rules."""

import re
from typing import List

_SENTENCE_TERMINATORS = re.compile(r"[.!?]+")
_WHITESPACE = re.compile(r"\s+")


def split_into_sentences(text: str) -> List[str]:
    """Split text on runs of '.', '!' and '?', dropping empty segments.

    Abbreviations, decimal numbers and quoted punctuation are not special-cased,
    so "e.g. 3.5" yields three segments.
    """
    return [s.strip() for s in _SENTENCE_TERMINATORS.split(text) if s.strip()]


def count_words(text: str) -> int:
    return len(text.split())


def _is_capitalized(word: str) -> bool:
    # Non-letters equal their uppercase form, so "42" counts as capitalized.
    return len(word) > 0 and word[0] == word[0].upper()


def is_sentence_case(text: str) -> bool:
    """Return True if text reads as sentence case rather than title case.

    The first character must be uppercase. After that, the text is rejected
    once capitalized words (from the second word on) reach half of the total
    word count. The split keeps a leading empty token for text that starts with
    whitespace, and that token still counts towards the total.
    """
    if not text:
        return True
    if not _is_capitalized(text):
        return False

    words = _WHITESPACE.split(text)
    if len(words) <= 1:
        return True

    capitalized = sum(1 for word in words[1:] if _is_capitalized(word))
    return capitalized < len(words) / 2
