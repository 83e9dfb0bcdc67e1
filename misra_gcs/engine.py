"""
Compliance Engine

One run = one (warning parser, rule set, GRP, warnings, source list) tuple
processed to a finished Report:

  1. Resolve the warning parser and rule set and check they are compatible.
     Configuration problems raise ConfigurationError before any parsing.
  2. Parse the GRP and apply it to the catalogue → effective guidelines.
  3. Ingest warnings and source files.
  4. Assess every effective guideline:
       Disapplied category        → Disapplied
       referenced by a violation  → Not compliant
       otherwise                  → Compliant
  5. Verdict: compliant iff no guideline is Not compliant.

Ingestion problems never stop a run; they are returned next to the Report
in RunResult.errors and summarised in Report.notes.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import IncompatibleRulesetError, UnsupportedRulesetError
from .grp import GrpProcessor, apply_grp
from .ingest import WarningIngestor
from .models import (
    ComplianceStatus,
    EffectiveGuideline,
    GuidelineResult,
    IngestionError,
    Report,
    RunRequest,
    RunResult,
    TextInput,
    Violation,
)
from .ruleset import Category, RulesetModel
from .warning_parsers import WarningParser, WarningParserRegistry, default_registry

logger = logging.getLogger(__name__)

NOTES_HEADER = "Errors occurred during processing. This report is not valid."


def assess(guideline: EffectiveGuideline, violation_count: int) -> ComplianceStatus:
    if guideline.category == Category.DISAPPLIED:
        return ComplianceStatus.DISAPPLIED
    if violation_count > 0:
        return ComplianceStatus.NOT_COMPLIANT
    return ComplianceStatus.COMPLIANT


def evaluate(
    guidelines: Iterable[EffectiveGuideline], violations: Iterable[Violation]
) -> List[GuidelineResult]:
    """Assess every guideline against the violations, keeping catalogue order."""
    counts: Dict[str, int] = {}
    deviations: Dict[str, int] = {}
    for v in violations:
        counts[v.guideline] = counts.get(v.guideline, 0) + 1
        if v.deviation:
            deviations[v.guideline] = deviations.get(v.guideline, 0) + 1

    return [
        GuidelineResult(
            guideline=g,
            status=assess(g, counts.get(g.code, 0)),
            violations=counts.get(g.code, 0),
            deviations=deviations.get(g.code, 0),
        )
        for g in guidelines
    ]


def build_summary(
    version: str,
    results: Sequence[GuidelineResult],
    violations: Sequence[Violation],
    source_files: Sequence[str],
    non_misra: int,
) -> str:
    by_status = {s: 0 for s in ComplianceStatus}
    failing = {c: 0 for c in (Category.MANDATORY, Category.REQUIRED, Category.ADVISORY)}
    for r in results:
        by_status[r.status] += 1
        if r.status == ComplianceStatus.NOT_COMPLIANT:
            failing[r.guideline.category] += 1

    deviation_count = sum(1 for v in violations if v.deviation)
    verdict = (
        "The code is MISRA compliant."
        if by_status[ComplianceStatus.NOT_COMPLIANT] == 0
        else "The code is not MISRA compliant."
    )
    return "\n".join([
        f"{version}: {len(results)} guidelines, "
        f"{by_status[ComplianceStatus.COMPLIANT]} compliant, "
        f"{by_status[ComplianceStatus.NOT_COMPLIANT]} not compliant, "
        f"{by_status[ComplianceStatus.DISAPPLIED]} disapplied.",
        f"Not compliant by category: "
        f"{failing[Category.MANDATORY]} mandatory, "
        f"{failing[Category.REQUIRED]} required, "
        f"{failing[Category.ADVISORY]} advisory.",
        f"Violations: {len(violations)}, of which {deviation_count} deviations.",
        f"Source files: {len(source_files)}. Non-MISRA warnings: {non_misra}.",
        verdict,
    ])


def build_notes(errors: Sequence[IngestionError]) -> str:
    if not errors:
        return ""
    return "\n".join([NOTES_HEADER] + [e.describe() for e in errors])


class ComplianceEngine:
    """Computes GCS reports.

    Holds only the read-only ruleset model and adapter registry, so one
    engine may serve any number of runs.
    """

    def __init__(self, rulesets: RulesetModel, registry: WarningParserRegistry):
        self.rulesets = rulesets
        self.registry = registry

    def check_compatibility(self, warning_parser: str, rule_set: str) -> Tuple[WarningParser, str]:
        """Resolve both names; raise ConfigurationError if they do not fit."""
        parser = self.registry.get(warning_parser)
        version = self.rulesets.resolve(rule_set)
        if not parser.supports(version):
            raise IncompatibleRulesetError(parser.name, version)
        return parser, version

    def run(self, request: RunRequest) -> RunResult:
        parser, version = self.check_compatibility(request.warning_parser, request.rule_set)
        catalogue = self.rulesets.catalogue(version)
        ingestor = WarningIngestor(
            parser, catalogue,
            workspace_root=request.workspace_root,
            tag_pattern=request.tag_pattern,
        )

        # ── GRP ──
        grp_source = request.grp.label if request.grp is not None else "grp"
        entries, parse_errors = GrpProcessor(catalogue, parser.parse_grp).parse(request.grp)
        effective, apply_errors = apply_grp(catalogue.guidelines, entries, source=grp_source)
        errors: List[IngestionError] = sorted(
            parse_errors + apply_errors, key=lambda e: e.line or 0
        )

        # ── Warnings and source files ──
        ingested = ingestor.parse_warnings(request.warnings)
        errors.extend(ingested.errors)
        source_files, file_errors = ingestor.parse_source_files(request.source_files)
        errors.extend(file_errors)

        # ── Assessment ──
        results = evaluate(effective, ingested.violations)
        compliant = all(r.status != ComplianceStatus.NOT_COMPLIANT for r in results)

        for e in errors:
            logger.warning("%s", e.describe())

        report = Report(
            ruleset_version=version,
            warning_parser=parser.name,
            project_name=request.project_name,
            software_version=request.software_version,
            compliant=compliant,
            guidelines=tuple(results),
            source_files=tuple(source_files),
            violations=tuple(ingested.violations),
            non_misra_warnings=ingested.non_misra,
            summary=build_summary(
                version, results, ingested.violations, source_files, ingested.non_misra
            ),
            notes=build_notes(errors),
        )
        result = RunResult(report=report, errors=tuple(errors))
        logger.info(
            "GCS %s / %s: %s, %d violations, error code %d",
            parser.name, version,
            "compliant" if compliant else "not compliant",
            len(ingested.violations), result.error_code,
        )
        return result


# ═══════════════════════════════════════════════════════════════════════
#  Module-level helpers (default tables)
# ═══════════════════════════════════════════════════════════════════════

_default_engine: Optional[ComplianceEngine] = None


def default_engine() -> ComplianceEngine:
    """Engine over the shipped catalogues and adapters, built on first use."""
    global _default_engine
    if _default_engine is None:
        _default_engine = ComplianceEngine(RulesetModel.default(), default_registry())
    return _default_engine


def is_compatible(warning_parser: str, rule_set: str) -> bool:
    """Whether the named adapter supports the named rule set.

    Unknown rule sets are simply not compatible; unknown adapters raise
    UnknownAdapterError.
    """
    engine = default_engine()
    try:
        version = engine.rulesets.resolve(rule_set)
    except UnsupportedRulesetError:
        return False
    return engine.registry.is_compatible(warning_parser, version)


def _as_input(label: str, lines: Optional[Sequence[str]]) -> TextInput:
    if lines is None:
        return TextInput(label=label, error="not provided")
    return TextInput(label=label, lines=tuple(lines))


def generate_gcs(
    warning_parser: str,
    rule_set: str,
    warnings: Optional[Sequence[str]],
    source_files: Optional[Sequence[str]],
    grp: Optional[Sequence[str]] = None,
    tag_pattern: Optional[str] = None,
    workspace_root: str = "",
    project_name: str = "",
    software_version: str = "",
) -> RunResult:
    """Run the default engine on already-read lines."""
    request = RunRequest(
        warning_parser=warning_parser,
        rule_set=rule_set,
        warnings=_as_input("warnings", warnings),
        source_files=_as_input("source files", source_files),
        grp=None if grp is None else _as_input("grp", grp),
        tag_pattern=tag_pattern,
        workspace_root=workspace_root,
        project_name=project_name,
        software_version=software_version,
    )
    return default_engine().run(request)
