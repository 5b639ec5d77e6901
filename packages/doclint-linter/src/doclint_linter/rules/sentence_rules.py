from typing import Iterator, List, Tuple

from doclint_markdown import ASTWalker, Document, Paragraph

from ..config import MaxSentencesArgs, MaxWordsArgs, MinimumWordsArgs, RuleName
from ..text_utils import count_words, split_into_sentences
from .base import BaseRule


def _paragraph_sentences(tree: Document) -> Iterator[Tuple[Paragraph, List[str]]]:
    for paragraph in ASTWalker.paragraphs(tree):
        yield paragraph, split_into_sentences(ASTWalker.get_text(paragraph))


class MinimumWordsInSentenceRule(BaseRule[MinimumWordsArgs]):
    @property
    def name(self) -> RuleName:
        return RuleName.MINIMUM_WORDS_IN_SENTENCE

    @property
    def description(self) -> str:
        return "Flag sentences with fewer than `min` words (one diagnostic per sentence)."

    def check(self, tree: Document, args: MinimumWordsArgs) -> Iterator[Paragraph]:
        for paragraph, sentences in _paragraph_sentences(tree):
            for sentence in sentences:
                word_count = count_words(sentence)
                if 0 < word_count < args.min:
                    yield paragraph


class MaxWordsInSentenceRule(BaseRule[MaxWordsArgs]):
    @property
    def name(self) -> RuleName:
        return RuleName.MAX_WORDS_IN_SENTENCE

    @property
    def description(self) -> str:
        return "Flag sentences with more than `limit` words (one diagnostic per sentence)."

    def check(self, tree: Document, args: MaxWordsArgs) -> Iterator[Paragraph]:
        for paragraph, sentences in _paragraph_sentences(tree):
            for sentence in sentences:
                if count_words(sentence) > args.limit:
                    yield paragraph


class MaxSentencesInParagraphRule(BaseRule[MaxSentencesArgs]):
    @property
    def name(self) -> RuleName:
        return RuleName.MAX_SENTENCES_IN_PARAGRAPH

    @property
    def description(self) -> str:
        return "Flag paragraphs with more than `limit` sentences (once per paragraph)."

    def check(self, tree: Document, args: MaxSentencesArgs) -> Iterator[Paragraph]:
        for paragraph, sentences in _paragraph_sentences(tree):
            if len(sentences) > args.limit:
                yield paragraph
