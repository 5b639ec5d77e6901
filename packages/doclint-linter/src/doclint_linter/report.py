"""Rendering of ordered diagnostics into text lines or JSON-ready records."""

import re
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict

from .errors import UnknownFormatError
from .models import Diagnostic, OutputFormat, Severity

TEXT_LINE_PATTERN = re.compile(
    r"^(?P<file>.*?):(?P<line>\d+): (?P<message>.*) \[(?P<rule>[^\]]*)\] \[(?P<severity>info|warning|error)\]$"
)


class DiagnosticRecord(BaseModel):
    """JSON shape of one diagnostic; carries its own file name"""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int
    rule: str
    severity: Severity
    message: str


def format_text_line(file_name: str, diagnostic: Diagnostic) -> str:
    return (
        f"{file_name}:{diagnostic.line}: {diagnostic.message} "
        f"[{diagnostic.rule}] [{diagnostic.severity.value}]"
    )


def parse_text_line(line: str) -> Optional[Diagnostic]:
    """Recover a diagnostic from one line of a text report, or None if it does not match"""
    match = TEXT_LINE_PATTERN.match(line)
    if not match:
        return None
    return Diagnostic(
        line=int(match.group("line")),
        rule=match.group("rule"),
        severity=Severity(match.group("severity")),
        message=match.group("message"),
    )


def format_report(
    file_path: Union[str, Path],
    diagnostics: Sequence[Diagnostic],
    output_format: str,
) -> Union[str, List[DiagnosticRecord]]:
    """Render diagnostics for one file, in the order given.

    'text' gives newline-joined lines with no trailing newline; 'json' gives
    records for the caller to serialize. Anything else raises UnknownFormatError.
    """
    file_name = Path(file_path).name

    if output_format == OutputFormat.TEXT.value:
        return "\n".join(format_text_line(file_name, d) for d in diagnostics)
    if output_format == OutputFormat.JSON.value:
        return [
            DiagnosticRecord(
                file=file_name,
                line=d.line,
                rule=d.rule,
                severity=d.severity,
                message=d.message,
            )
            for d in diagnostics
        ]
    raise UnknownFormatError(output_format)
