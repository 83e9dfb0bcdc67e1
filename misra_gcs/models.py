"""
Run artifacts

Everything created during a single GCS run: parsed tool warnings, GRP
entries, violations, effective guidelines, per-guideline results, ingestion
errors and the final Report.  All models are pydantic v2 and frozen once
built, so a finished Report can be shared and serialised safely.
"""

from enum import Enum, IntFlag
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from .ruleset import Category


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ───────────────────────────────────────────────────────────────────────
#  Adapter output
# ───────────────────────────────────────────────────────────────────────

class ToolWarning(_Frozen):
    """One warning as understood by an adapter, before catalogue lookup.

    ``guideline`` is the raw MISRA reference (e.g. ``10.4``, ``Dir 4.1``,
    ``5-0-3``) or None when the tool reported a non-MISRA diagnostic.
    """
    guideline: Optional[str] = None
    file_path: str = ""
    line: Optional[int] = None
    message: str = ""


class GrpDirective(_Frozen):
    guideline: str
    category: Category
    justification: Optional[str] = None


class GrpEntry(_Frozen):
    """A GRP directive resolved against the catalogue."""
    guideline: str              # canonical code
    category: Category          # target disposition
    justification: Optional[str] = None
    line: Optional[int] = None


class Violation(_Frozen):
    guideline: str              # canonical code
    file_path: str              # workspace-relative, forward slashes
    line: Optional[int] = None
    message: str = ""
    deviation: bool = False
    record: Optional[int] = None


# ───────────────────────────────────────────────────────────────────────
#  Compliance
# ───────────────────────────────────────────────────────────────────────

class EffectiveGuideline(_Frozen):
    code: str
    description: str
    default_category: Category
    category: Category
    justification: Optional[str] = None

    @property
    def recategorized(self) -> bool:
        return self.category != self.default_category


class ComplianceStatus(str, Enum):
    COMPLIANT = "Compliant"
    NOT_COMPLIANT = "Not compliant"
    DISAPPLIED = "Disapplied"


class GuidelineResult(_Frozen):
    guideline: EffectiveGuideline
    status: ComplianceStatus
    violations: int = 0
    deviations: int = 0

    @property
    def code(self) -> str:
        return self.guideline.code

    @property
    def compliance_label(self) -> str:
        """Display label used in the GCS table."""
        if self.status == ComplianceStatus.DISAPPLIED:
            return "Disapplied"
        if self.violations == 0:
            return "Compliant"
        if self.violations == self.deviations:
            return "Deviations"
        return "Violations"


# ───────────────────────────────────────────────────────────────────────
#  Ingestion errors
# ───────────────────────────────────────────────────────────────────────

class IngestionErrorKind(IntFlag):
    MISSING_INPUT = 1
    EMPTY_INPUT = 2
    UNPARSEABLE_WARNING = 4
    UNKNOWN_GUIDELINE = 8
    INVALID_GRP = 16


class IngestionError(_Frozen):
    kind: IngestionErrorKind
    source: str                 # label of the input, e.g. "warnings"
    line: Optional[int] = None
    message: str
    text: Optional[str] = None  # offending record, when there is one

    def describe(self) -> str:
        where = self.source if self.line is None else f"{self.source}:{self.line}"
        return f"{where}: {self.message}"


# ───────────────────────────────────────────────────────────────────────
#  Run input / output
# ───────────────────────────────────────────────────────────────────────

class TextInput(_Frozen):
    """An already-read textual input.

    ``lines`` is None when the input could not be read; ``error`` then
    carries the reason.  An empty tuple is a successfully read empty input.
    """
    label: str
    lines: Optional[Tuple[str, ...]] = None
    error: Optional[str] = None

    @property
    def missing(self) -> bool:
        return self.lines is None


class RunRequest(_Frozen):
    warning_parser: str
    rule_set: str
    warnings: TextInput
    source_files: TextInput
    grp: Optional[TextInput] = None
    tag_pattern: Optional[str] = None
    workspace_root: str = ""
    project_name: str = ""
    software_version: str = ""


class Report(_Frozen):
    ruleset_version: str
    warning_parser: str
    project_name: str = ""
    software_version: str = ""
    compliant: bool
    guidelines: Tuple[GuidelineResult, ...]
    source_files: Tuple[str, ...] = ()
    violations: Tuple[Violation, ...] = ()
    non_misra_warnings: int = 0
    summary: str = ""
    notes: str = ""

    def result_for(self, code: str) -> Optional[GuidelineResult]:
        for r in self.guidelines:
            if r.code == code:
                return r
        return None


class RunResult(_Frozen):
    report: Report
    errors: Tuple[IngestionError, ...] = ()

    @property
    def error_code(self) -> int:
        """Bitwise OR of the error kinds seen; 0 iff the run was clean."""
        code = 0
        for e in self.errors:
            code |= int(e.kind)
        return code

    @property
    def is_compliant(self) -> bool:
        return self.report.compliant
