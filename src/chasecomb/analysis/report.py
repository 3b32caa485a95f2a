"""Enumeration report generation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from chasecomb.combination import CombinationSet

from .metrics import membership_matrix, summarize_transitions

DEFAULT_TRANSITION_SAMPLE = 10_000


@dataclass(frozen=True)
class EnumerationReport:
    """Combined JSON and Markdown enumeration report."""

    json_report: dict[str, Any]
    markdown_report: str


def generate_enumeration_report(
    combination_set: CombinationSet,
    *,
    limit: int | None = None,
    config_snapshot: dict[str, Any] | None = None,
) -> EnumerationReport:
    """Count a combination set and summarize its first ``limit`` combinations."""
    size = combination_set.size()
    sample = limit if limit is not None else DEFAULT_TRANSITION_SAMPLE
    transitions = summarize_transitions(membership_matrix(combination_set, limit=sample))

    report_json: dict[str, Any] = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "n": combination_set.n,
        "k": combination_set.k,
        # string keeps the exact value for JSON consumers without big integers
        "size": str(size),
        "long_size": combination_set.long_size(),
        "transitions": transitions,
        "config_snapshot": config_snapshot or {},
    }
    markdown = _to_markdown(report_json)
    return EnumerationReport(json_report=report_json, markdown_report=markdown)


def _to_markdown(report_json: dict[str, Any]) -> str:
    transitions = report_json["transitions"]
    long_size = report_json["long_size"]
    distribution = ", ".join(
        f"{distance}: {count}" for distance, count in transitions["hamming_distribution"].items()
    )

    return "\n".join(
        [
            "## Enumeration Summary",
            "",
            f"- Generated At: {report_json['generated_at']}",
            f"- Elements (n): {report_json['n']}",
            f"- Subset Size (k): {report_json['k']}",
            f"- Combinations: {report_json['size']}",
            f"- Fits int64: {'yes' if long_size is not None else 'no'}",
            "",
            "## Transitions",
            f"- Combinations Checked: {transitions['total_combinations']}",
            f"- Distinct Combinations: {transitions['distinct_combinations']}",
            f"- Hamming Distances: {distribution or 'n/a'}",
            f"- Max Shift: {transitions['max_shift']}",
            f"- Minimal Change: {'yes' if transitions['is_minimal_change'] else 'no'}",
        ]
    )
