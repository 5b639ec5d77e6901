from .base import BaseRule
from .heading_rules import HeadingCaseRule
from .phrase_rules import BannedPhrasesRule
from .sentence_rules import MaxSentencesInParagraphRule, MaxWordsInSentenceRule, MinimumWordsInSentenceRule

__all__ = [
    "BaseRule",
    "BannedPhrasesRule",
    "HeadingCaseRule",
    "MaxSentencesInParagraphRule",
    "MaxWordsInSentenceRule",
    "MinimumWordsInSentenceRule",
]
