"""Tabular views of a ValidationResult for coaches and tooling.

All functions are pure: they read a result and return a new DataFrame or
string.
"""

from __future__ import annotations

import pandas as pd

from season_validator.models.issue import ValidationResult

ISSUE_COLUMNS = [
    "severity",
    "rule_id",
    "entity_type",
    "entity_id",
    "field_path",
    "message",
    "suggested_fix",
    "doc_reference",
]


def issues_to_frame(result: ValidationResult) -> pd.DataFrame:
    """One row per issue, in run order, with the wire column names."""
    rows = [issue.to_dict() for issue in result.issues]
    return pd.DataFrame(rows, columns=ISSUE_COLUMNS)


def summarize_by_rule(result: ValidationResult) -> pd.DataFrame:
    """Issue counts per (rule_id, severity), sorted by rule_id."""
    frame = issues_to_frame(result)
    if frame.empty:
        return pd.DataFrame(columns=["rule_id", "severity", "count"])
    return (
        frame.groupby(["rule_id", "severity"], sort=True)
        .size()
        .reset_index(name="count")
    )


def format_report(result: ValidationResult) -> str:
    """Human-readable report: one line per issue followed by the gates."""
    lines = []
    for issue in result.issues:
        lines.append(
            f"[{issue.severity.value}] {issue.rule_id} "
            f"{issue.entity_type.value}:{issue.entity_id} "
            f"{issue.field_path} - {issue.message}"
        )
        if issue.suggested_fix:
            lines.append(f"    fix: {issue.suggested_fix}")

    summary = result.summary
    lines.append(
        f"{summary.total_count} issues "
        f"(critical={summary.critical_count}, blocking={summary.blocking_count}, "
        f"info={summary.info_count}) | can_save={result.can_save} "
        f"can_publish={result.can_publish}"
    )
    return "\n".join(lines)
