"""Configuration schema: rule catalog names, typed rule arguments and LintConfig."""

import re
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .models import OutputFormat, Severity


class RuleName(str, Enum):
    """The closed catalog of rules. Values are the ids reported in diagnostics."""

    HEADING_CASE = "heading-case"
    MINIMUM_WORDS_IN_SENTENCE = "minimum-words-in-sentence"
    MAX_WORDS_IN_SENTENCE = "max-words-in-sentence"
    MAX_SENTENCES_IN_PARAGRAPH = "max-sentences-in-paragraph"
    BANNED_PHRASES = "banned-phrases"

    @property
    def config_key(self) -> str:
        """camelCase key used in .doclint.json, e.g. 'headingCase'"""
        head, *rest = self.value.split("-")
        return head + "".join(part.capitalize() for part in rest)

    @classmethod
    def from_key(cls, key: str) -> Optional["RuleName"]:
        """Resolve a config key (camelCase or kebab-case id); None if unknown"""
        kebab = re.sub(r"(?<!^)(?=[A-Z])", "-", key).lower()
        try:
            return cls(kebab)
        except ValueError:
            return None


class RuleArgs(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class HeadingCaseArgs(RuleArgs):
    pass


class MinimumWordsArgs(RuleArgs):
    min: int = 10


class MaxWordsArgs(RuleArgs):
    limit: int = 25


class MaxSentencesArgs(RuleArgs):
    limit: int = 5


class BannedPhrasesArgs(RuleArgs):
    phrases: Tuple[str, ...] = ()


RULE_ARGS: Dict[RuleName, Type[RuleArgs]] = {
    RuleName.HEADING_CASE: HeadingCaseArgs,
    RuleName.MINIMUM_WORDS_IN_SENTENCE: MinimumWordsArgs,
    RuleName.MAX_WORDS_IN_SENTENCE: MaxWordsArgs,
    RuleName.MAX_SENTENCES_IN_PARAGRAPH: MaxSentencesArgs,
    RuleName.BANNED_PHRASES: BannedPhrasesArgs,
}

A = TypeVar("A", bound=RuleArgs)


class RuleConfig(BaseModel):
    """Per-rule entry: severity and wording are entirely configuration-driven"""

    model_config = ConfigDict(frozen=True)

    level: Severity
    message: str
    args: Dict[str, Any] = Field(default_factory=dict)

    def parsed_args(self, args_model: Type[A]) -> A:
        return args_model.model_validate(self.args)


class LintConfig(BaseModel):
    """Immutable configuration for one doclint invocation.

    Entries for keys outside the rule catalog are kept as given, whatever their
    shape; the engine skips them with a warning.
    """

    model_config = ConfigDict(frozen=True)

    rules: Dict[str, Any] = Field(default_factory=dict)
    # Left as a plain string: unknown formats are rejected when the report is rendered.
    format: str = OutputFormat.TEXT.value

    @model_validator(mode="before")
    @classmethod
    def _parse_known_rules(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not isinstance(data.get("rules"), dict):
            return data

        rules: Dict[str, Any] = {}
        seen: Dict[RuleName, str] = {}
        for key, entry in data["rules"].items():
            name = RuleName.from_key(key)
            if name is None:
                rules[key] = entry
                continue
            if name in seen:
                raise ValueError(f"rules '{seen[name]}' and '{key}' both configure '{name.value}'")
            seen[name] = key
            try:
                rule_config = RuleConfig.model_validate(entry)
                rule_config.parsed_args(RULE_ARGS[name])
            except ValidationError as e:
                raise ValueError(f"invalid rule '{key}': {e}") from e
            rules[key] = rule_config
        return {**data, "rules": rules}

    @classmethod
    def default(cls) -> "LintConfig":
        """The built-in configuration used when no config file is found"""
        return cls(
            rules={
                RuleName.HEADING_CASE.config_key: RuleConfig(
                    level=Severity.WARNING,
                    message="Heading should be in sentence case.",
                ),
                RuleName.MINIMUM_WORDS_IN_SENTENCE.config_key: RuleConfig(
                    level=Severity.WARNING,
                    message="Sentence may contain too few words",
                    args={"min": 10},
                ),
                RuleName.MAX_WORDS_IN_SENTENCE.config_key: RuleConfig(
                    level=Severity.ERROR,
                    message="Too many words in sentence.",
                    args={"limit": 25},
                ),
                RuleName.MAX_SENTENCES_IN_PARAGRAPH.config_key: RuleConfig(
                    level=Severity.ERROR,
                    message="Too many sentences in paragraph.",
                    args={"limit": 5},
                ),
                RuleName.BANNED_PHRASES.config_key: RuleConfig(
                    level=Severity.ERROR,
                    message="Banned phrase identified.",
                    args={"phrases": ["are used to", "has been", "has finished", "if you want to"]},
                ),
            },
            format=OutputFormat.TEXT.value,
        )
