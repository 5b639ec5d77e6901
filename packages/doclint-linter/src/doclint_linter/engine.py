"""Lint engine - runs the configured rules over a document and orders the results."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from doclint_markdown import Document, MarkdownParser

from .config import LintConfig, RuleConfig
from .models import Diagnostic
from .registry import RuleRegistry, registry
from .rules.base import BaseRule

logger = logging.getLogger(__name__)


class LinterEngine:
    """Core engine for linting markdown documents.

    Rules only read the tree, so with max_workers > 1 they are evaluated
    concurrently; results are still merged in configuration order before
    sorting, which keeps the output identical to a sequential run.
    """

    def __init__(
        self,
        config: LintConfig,
        rule_registry: Optional[RuleRegistry] = None,
        max_workers: Optional[int] = None,
    ):
        self.config = config
        self.registry = rule_registry or registry
        self.max_workers = max_workers
        self.parser = MarkdownParser()

    def lint(self, tree: Document) -> List[Diagnostic]:
        """Run every configured rule over tree and return diagnostics sorted by line"""
        jobs = self._resolve_rules()

        if self.max_workers and self.max_workers > 1 and len(jobs) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                results = list(pool.map(lambda job: job[0].evaluate(tree, job[1]), jobs))
        else:
            results = [rule.evaluate(tree, rule_config) for rule, rule_config in jobs]

        diagnostics: List[Diagnostic] = []
        for rule_diagnostics in results:
            diagnostics.extend(rule_diagnostics)

        # sorted() is stable: equal lines keep configuration order
        return sorted(diagnostics, key=lambda d: d.line)

    def lint_file(self, file_path: Path) -> List[Diagnostic]:
        """Parse and lint one file. OSError and ParseError propagate."""
        result = self.parser.parse_file(file_path)
        diagnostics = self.lint(result.tree)
        logger.debug(f"{file_path}: {len(diagnostics)} diagnostics")
        return diagnostics

    def lint_files(self, file_paths: Iterable[Path]) -> List[Tuple[Path, List[Diagnostic]]]:
        """Lint several files, in parallel when max_workers > 1.

        Results are returned in input order. The first failure is raised.
        """
        paths = list(file_paths)
        if self.max_workers and self.max_workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                return list(zip(paths, pool.map(self.lint_file, paths)))
        return [(path, self.lint_file(path)) for path in paths]

    def _resolve_rules(self) -> List[Tuple[BaseRule, RuleConfig]]:
        jobs = []
        for rule_key, rule_config in self.config.rules.items():
            rule = self.registry.get(rule_key)
            if rule is None:
                logger.warning(f"Unknown rule: {rule_key} (skipped)")
                continue
            jobs.append((rule, rule_config))
        return jobs


def lint(tree: Document, config: LintConfig, max_workers: Optional[int] = None) -> List[Diagnostic]:
    """Lint a parsed document with config. See LinterEngine.lint."""
    return LinterEngine(config, max_workers=max_workers).lint(tree)


def get_available_rules() -> dict[str, str]:
    """Map each rule id to its description"""
    return {rule.rule_id: rule.description for rule in registry.get_all_rules()}
