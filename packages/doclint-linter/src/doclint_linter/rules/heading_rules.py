from typing import Iterator

from doclint_markdown import ASTWalker, Document, Heading

from ..config import HeadingCaseArgs, RuleName
from ..text_utils import is_sentence_case
from .base import BaseRule


class HeadingCaseRule(BaseRule[HeadingCaseArgs]):
    @property
    def name(self) -> RuleName:
        return RuleName.HEADING_CASE

    @property
    def description(self) -> str:
        return "Headings should be written in sentence case, not title case."

    def check(self, tree: Document, args: HeadingCaseArgs) -> Iterator[Heading]:
        for heading in ASTWalker.headings(tree):
            if not is_sentence_case(ASTWalker.get_text(heading)):
                yield heading
