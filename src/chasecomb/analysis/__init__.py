"""Analysis and export of combination sequences."""

from .export import combinations_frame, format_csv, write_csv
from .metrics import membership_matrix, summarize_transitions
from .report import EnumerationReport, generate_enumeration_report

__all__ = [
    "EnumerationReport",
    "combinations_frame",
    "format_csv",
    "generate_enumeration_report",
    "membership_matrix",
    "summarize_transitions",
    "write_csv",
]
