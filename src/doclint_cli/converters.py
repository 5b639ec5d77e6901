from typing import List

from doclint_linter.report import DiagnosticRecord
from pydantic import TypeAdapter

_records_adapter = TypeAdapter(List[DiagnosticRecord])


def records_to_json(records: List[DiagnosticRecord]) -> str:
    """Serialize report records as a flat, 2-space indented JSON array"""
    return _records_adapter.dump_json(records, indent=2).decode("utf-8")
