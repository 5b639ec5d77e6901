"""Rule engine for markdown prose and structure checks."""
from .config import LintConfig, RuleConfig, RuleName
from .engine import LinterEngine, get_available_rules, lint
from .errors import ConfigParseError, DoclintError, UnknownFormatError
from .models import Diagnostic, OutputFormat, Severity, has_errors
from .report import DiagnosticRecord, format_report

__all__ = [
    "ConfigParseError",
    "Diagnostic",
    "DiagnosticRecord",
    "DoclintError",
    "LintConfig",
    "LinterEngine",
    "OutputFormat",
    "RuleConfig",
    "RuleName",
    "Severity",
    "UnknownFormatError",
    "format_report",
    "get_available_rules",
    "has_errors",
    "lint",
]
