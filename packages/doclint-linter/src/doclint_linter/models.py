from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    """Diagnostic severity. Only ERROR makes a lint run fail."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


@dataclass(frozen=True)
class Diagnostic:
    """A single issue reported by one rule evaluation"""

    line: int  # 0 when the position is unknown
    rule: str
    severity: Severity
    message: str


def has_errors(diagnostics) -> bool:
    return any(d.severity == Severity.ERROR for d in diagnostics)
