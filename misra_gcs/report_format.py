"""
Markdown rendering of a GCS Report.
"""

from typing import List

from .models import Report, RunResult


def format_report(report: Report, show_compliant: bool = True) -> str:
    """Render the Guideline Compliance Summary as Markdown.

    With ``show_compliant=False`` only guidelines that were violated,
    disapplied or re-categorized are listed.
    """
    lines: List[str] = []
    title = report.project_name or "Guideline Compliance Summary"
    if report.software_version:
        title += f" {report.software_version}"
    lines.append(f"## {title}")
    lines.append("")
    lines.append("| Field | Value |")
    lines.append("|-------|-------|")
    lines.append(f"| **Rule set** | {report.ruleset_version} |")
    lines.append(f"| **Warning parser** | {report.warning_parser} |")
    lines.append(f"| **Source files** | {len(report.source_files)} |")
    lines.append(f"| **Verdict** | {'Compliant' if report.compliant else '**Not compliant**'} |")
    lines.append("")

    lines.append("| Guideline | Category | Re-categorized | Compliance | Violations |")
    lines.append("|-----------|----------|----------------|------------|------------|")
    for r in report.guidelines:
        g = r.guideline
        if not show_compliant and r.violations == 0 and not g.recategorized:
            continue
        recat = f"{g.default_category.value} → {g.category.value}" if g.recategorized else ""
        count = str(r.violations) if r.violations else ""
        if r.deviations:
            count += f" ({r.deviations} deviated)"
        lines.append(
            f"| {g.code} | {g.category.value} | {recat} | {r.compliance_label} | {count} |"
        )

    lines.append("")
    lines.append("### Summary")
    lines.append(report.summary)

    if report.notes:
        lines.append("")
        lines.append("### Notes")
        header, *details = report.notes.split("\n")
        lines.append(header)
        lines.extend(f"- {d}" for d in details)

    return "\n".join(lines) + "\n"


def format_result(result: RunResult, show_compliant: bool = True) -> str:
    """Render a report plus the run's error code."""
    text = format_report(result.report, show_compliant=show_compliant)
    if result.error_code:
        text += f"\n**Error code**: {result.error_code}\n"
    return text
