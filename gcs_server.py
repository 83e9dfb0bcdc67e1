"""
MISRA GCS — MCP Server

Exposes the Guideline Compliance Summary engine via the Model Context
Protocol:

  1. list_warning_parsers — available analysis-tool adapters
  2. list_rule_sets       — supported MISRA rule sets and their catalogues
  3. check_compatibility  — does an adapter support a rule set?
  4. generate_gcs         — compute a GCS from files in a workspace
  5. run_gcs_job          — run a JSON-configured job incl. fail policy
  6. explain_guideline    — catalogue entry for one guideline
  7. export_report        — write the last report as JSON
"""

from mcp.server.fastmcp import FastMCP
import logging
import os
import sys

# Ensure misra_gcs is importable when run as a script
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from misra_gcs.engine import default_engine
from misra_gcs.errors import ConfigurationError
from misra_gcs.job import load_job_config, read_input, run_job
from misra_gcs.models import RunRequest
from misra_gcs.report_format import format_result
from misra_gcs.ruleset import Category, format_guideline_explanation

# ═══════════════════════════════════════════════════════════════════════
#  Server Setup
# ═══════════════════════════════════════════════════════════════════════

mcp = FastMCP("MISRA GCS")

# Read-only catalogues and adapters, shared by every tool call
engine = default_engine()

# Result of the most recent generate_gcs / run_gcs_job call
last_result = None


# ═══════════════════════════════════════════════════════════════════════
#  Tool 1: List Warning Parsers
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def list_warning_parsers() -> str:
    """
    Lists the analysis-tool adapters and the MISRA rule sets each supports.
    """
    result = "| Warning parser | Rule sets | Input |\n|---|---|---|\n"
    for p in engine.registry.all():
        versions = ", ".join(v for v in engine.rulesets.versions() if p.supports(v))
        result += f"| {p.name} | {versions} | {p.description} |\n"
    return result


# ═══════════════════════════════════════════════════════════════════════
#  Tool 2: List Rule Sets
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def list_rule_sets() -> str:
    """
    Lists the supported MISRA rule sets with guideline counts per category.
    """
    result = "| Rule set | Guidelines | Mandatory | Required | Advisory |\n|---|---|---|---|---|\n"
    for version in engine.rulesets.versions():
        guidelines = engine.rulesets.guidelines_for(version)
        counts = {c: 0 for c in Category}
        for g in guidelines:
            counts[g.category] += 1
        result += (
            f"| {version} | {len(guidelines)} | {counts[Category.MANDATORY]} | "
            f"{counts[Category.REQUIRED]} | {counts[Category.ADVISORY]} |\n"
        )
    return result


# ═══════════════════════════════════════════════════════════════════════
#  Tool 3: Check Compatibility
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def check_compatibility(warning_parser: str, rule_set: str) -> str:
    """
    Checks whether a warning parser supports a MISRA rule set.

    Args:
        warning_parser: Adapter name (e.g. 'Cppcheck', 'PC-lint Plus', 'Axivion').
        rule_set:       Rule set name (e.g. 'MISRA C:2012').
    """
    try:
        parser, version = engine.check_compatibility(warning_parser, rule_set)
    except ConfigurationError as e:
        return f"Error: {e}"
    return f"{version} is supported by {parser.name}."


# ═══════════════════════════════════════════════════════════════════════
#  Tool 4: Generate GCS
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def generate_gcs(
    warning_parser: str,
    rule_set: str,
    warnings_file: str,
    source_list_file: str,
    workspace_root: str,
    grp_file: str = "",
    tag_pattern: str = "",
    project_name: str = "",
    software_version: str = "",
    show_compliant: bool = False,
) -> str:
    """
    Computes a Guideline Compliance Summary from an analysis tool's output.

    Args:
        warning_parser:   Adapter name (see list_warning_parsers).
        rule_set:         MISRA rule set (e.g. 'MISRA C:2012').
        warnings_file:    Tool output, relative to workspace_root or absolute.
        source_list_file: File listing the analysed source files, one per line.
        workspace_root:   Root directory that all paths are made relative to.
        grp_file:         Optional Guideline Re-categorization Plan.
        tag_pattern:      Optional regular expression marking deviations.
        project_name:     Project name shown in the report.
        software_version: Software version shown in the report.
        show_compliant:   List every guideline, not only the interesting ones.
    """
    global last_result

    if not os.path.isdir(workspace_root):
        return f"Error: Workspace root not found at {workspace_root}"
    workspace_root = os.path.abspath(workspace_root)

    try:
        request = RunRequest(
            warning_parser=warning_parser,
            rule_set=rule_set,
            warnings=read_input(workspace_root, warnings_file),
            source_files=read_input(workspace_root, source_list_file),
            grp=read_input(workspace_root, grp_file) if grp_file.strip() else None,
            tag_pattern=tag_pattern or None,
            workspace_root=workspace_root,
            project_name=project_name,
            software_version=software_version,
        )
        last_result = engine.run(request)
    except ConfigurationError as e:
        return f"Error: {e}"

    return format_result(last_result, show_compliant=show_compliant)


# ═══════════════════════════════════════════════════════════════════════
#  Tool 5: Run GCS Job
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def run_gcs_job(config_path: str, workspace_root: str) -> str:
    """
    Runs a GCS job described by a JSON config file and reports whether the
    job fails under its fail_on_error / fail_on_incompliance policy.

    Args:
        config_path:    Path to the JSON job configuration.
        workspace_root: Workspace the configured file paths are relative to.
    """
    global last_result

    try:
        config = load_job_config(config_path)
    except ConfigurationError as e:
        return f"Error: {e}"

    try:
        outcome = run_job(config, workspace_root, engine=engine)
    except OSError as e:
        return f"Error: {e}"
    status = "**FAILED**" if outcome.failed else "passed"
    text = f"Job {status}.\n"
    for msg in outcome.messages:
        text += f"- {msg}\n"
    if outcome.result is not None:
        last_result = outcome.result
        text += "\n" + format_result(outcome.result, show_compliant=False)
    return text


# ═══════════════════════════════════════════════════════════════════════
#  Tool 6: Explain Guideline
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def explain_guideline(guideline: str, rule_set: str = "MISRA C:2012") -> str:
    """
    Returns the catalogue entry (category and headline) of a MISRA guideline.

    Args:
        guideline: Guideline reference (e.g. 'Rule 10.4', 'Dir 4.1', '5-0-3').
        rule_set:  MISRA rule set the guideline belongs to.
    """
    try:
        catalogue = engine.rulesets.catalogue(rule_set)
    except ConfigurationError as e:
        return f"Error: {e}"
    return format_guideline_explanation(catalogue, guideline)


# ═══════════════════════════════════════════════════════════════════════
#  Tool 7: Export Report
# ═══════════════════════════════════════════════════════════════════════

@mcp.tool()
def export_report(output_path: str) -> str:
    """
    Writes the most recent report, with its ingestion errors, as JSON.

    Args:
        output_path: Destination file.
    """
    if last_result is None:
        return "Error: No report generated yet. Call generate_gcs first."

    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(last_result.model_dump_json(indent=2))
    except OSError as e:
        return f"Error: Cannot write {output_path}: {e}"

    return (
        f"Report written to {output_path} "
        f"({len(last_result.report.guidelines)} guidelines, error code {last_result.error_code})."
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    mcp.run()
