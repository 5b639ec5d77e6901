from typing import Dict, List, Optional

from .config import RuleName
from .rules.base import BaseRule


class RuleRegistry:
    """Maps every catalog entry to its evaluator"""

    def __init__(self):
        self._rules: Dict[RuleName, BaseRule] = {}
        self._load_builtin_rules()

    def register(self, rule: BaseRule):
        self._rules[rule.name] = rule

    def get(self, key: str) -> Optional[BaseRule]:
        """Look up a rule by config key or rule id; None if it is not in the catalog"""
        name = RuleName.from_key(key)
        if name is None:
            return None
        return self._rules.get(name)

    def get_all_rules(self) -> List[BaseRule]:
        return [self._rules[name] for name in RuleName if name in self._rules]

    def _load_builtin_rules(self):
        from .rules.heading_rules import HeadingCaseRule
        from .rules.phrase_rules import BannedPhrasesRule
        from .rules.sentence_rules import (
            MaxSentencesInParagraphRule,
            MaxWordsInSentenceRule,
            MinimumWordsInSentenceRule,
        )

        self.register(HeadingCaseRule())
        self.register(MinimumWordsInSentenceRule())
        self.register(MaxWordsInSentenceRule())
        self.register(MaxSentencesInParagraphRule())
        self.register(BannedPhrasesRule())

        missing = [name.value for name in RuleName if name not in self._rules]
        if missing:
            raise RuntimeError(f"No evaluator registered for: {', '.join(missing)}")


# Built once at import; read-only afterwards.
registry = RuleRegistry()
