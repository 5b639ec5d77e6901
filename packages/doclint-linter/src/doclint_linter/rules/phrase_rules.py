from typing import Iterator, Union

from doclint_markdown import ASTWalker, Document, Heading, Paragraph

from ..config import BannedPhrasesArgs, RuleName
from .base import BaseRule


class BannedPhrasesRule(BaseRule[BannedPhrasesArgs]):
    @property
    def name(self) -> RuleName:
        return RuleName.BANNED_PHRASES

    @property
    def description(self) -> str:
        return "Flag paragraphs and headings containing a banned phrase (case-insensitive)."

    def check(self, tree: Document, args: BannedPhrasesArgs) -> Iterator[Union[Paragraph, Heading]]:
        for node in ASTWalker.find_all(tree, (Paragraph, Heading)):
            text = ASTWalker.get_text(node).lower()
            # One hit per matching phrase; overlapping phrases are reported separately.
            for phrase in args.phrases:
                if phrase.lower() in text:
                    yield node
