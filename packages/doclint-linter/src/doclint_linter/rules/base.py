from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Type, TypeVar

from doclint_markdown import ASTWalker, Document, Node

from ..config import RULE_ARGS, RuleArgs, RuleConfig, RuleName
from ..models import Diagnostic

A = TypeVar("A", bound=RuleArgs)


class BaseRule(ABC, Generic[A]):
    """Abstract base class for all document rules.

    A rule is a pure evaluator: it reads the tree and its own configuration
    entry and returns diagnostics, without holding on to either.
    """

    @property
    @abstractmethod
    def name(self) -> RuleName:
        """Catalog entry implemented by this rule."""
        pass

    @property
    def rule_id(self) -> str:
        """Kebab-case id reported in diagnostics (e.g. 'heading-case')."""
        return self.name.value

    @property
    def args_model(self) -> Type[A]:
        return RULE_ARGS[self.name]

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    def evaluate(self, tree: Document, config: RuleConfig) -> List[Diagnostic]:
        """Run the check over tree using config's level, message and args."""
        args = config.parsed_args(self.args_model)
        return [self._create_diagnostic(node, config) for node in self.check(tree, args)]

    @abstractmethod
    def check(self, tree: Document, args: A) -> Iterable[Node]:
        """Yield the visited node once per violation."""
        pass

    # Helper method for consistent diagnostic creation
    def _create_diagnostic(self, node: Node, config: RuleConfig) -> Diagnostic:
        return Diagnostic(
            line=ASTWalker.get_line(node),
            rule=self.rule_id,
            severity=config.level,
            message=config.message,
        )
