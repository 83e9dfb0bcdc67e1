"""
Warning and source-file ingestion

Runs the active warning parser over the warnings input, resolves each MISRA
reference against the catalogue and produces Violations.  Source-file
lists are normalised with the same path function as violation paths, so
both end up as identical workspace-relative strings.

Bad input never aborts ingestion: every problem becomes an IngestionError
attributed to its input and record, and processing continues.
"""

import logging
import posixpath
import re
from dataclasses import dataclass, field
from typing import List, Optional, Pattern, Tuple

from .errors import InvalidTagPatternError, ParseError
from .models import IngestionError, IngestionErrorKind, TextInput, Violation
from .ruleset import Catalogue
from .warning_parsers import WarningParser

logger = logging.getLogger(__name__)

_DRIVE_RE = re.compile(r"^[A-Za-z]:/")


# ────────────────────────────────────────────────────────────────
#  Path normalisation
# ────────────────────────────────────────────────────────────────

def _clean(path: str) -> str:
    p = path.strip().replace("\\", "/")
    if not p:
        return ""
    return posixpath.normpath(p)


def _is_absolute(path: str) -> bool:
    return path.startswith("/") or bool(_DRIVE_RE.match(path))


def normalize_path(path: str, workspace_root: str = "") -> str:
    """Normalise *path* to a workspace-relative path with forward slashes.

    Backslashes become ``/`` and ``.``/``..`` segments are collapsed.  An
    absolute path under *workspace_root* is made relative to it; Windows
    drive paths are compared case-insensitively.  Any other path is only
    normalised.
    """
    p = _clean(path)
    if not p or not workspace_root or not _is_absolute(p):
        return p

    root = _clean(workspace_root).rstrip("/")
    if _DRIVE_RE.match(p):
        p_cmp, root_cmp = p.lower(), root.lower()
    else:
        p_cmp, root_cmp = p, root

    if p_cmp.startswith(root_cmp + "/"):
        return p[len(root) + 1:]
    return p


def compile_tag_pattern(pattern: Optional[str]) -> Optional[Pattern]:
    """Compile the deviation tag pattern; None or empty means no tagging."""
    if not pattern:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidTagPatternError(pattern, str(e))


# ────────────────────────────────────────────────────────────────
#  Ingestion
# ────────────────────────────────────────────────────────────────

@dataclass
class IngestedWarnings:
    violations: List[Violation] = field(default_factory=list)
    non_misra: int = 0
    errors: List[IngestionError] = field(default_factory=list)


class WarningIngestor:
    """Turns raw warnings and source lists into Violations and SourceFiles."""

    def __init__(
        self,
        parser: WarningParser,
        catalogue: Catalogue,
        workspace_root: str = "",
        tag_pattern: Optional[str] = None,
    ):
        self.parser = parser
        self.catalogue = catalogue
        self.workspace_root = workspace_root
        self.tag_re = compile_tag_pattern(tag_pattern)

    def parse_warnings(self, warning_input: Optional[TextInput]) -> IngestedWarnings:
        result = IngestedWarnings()
        if warning_input is None or warning_input.missing:
            result.errors.append(_missing(warning_input, "warnings"))
            return result

        version = self.catalogue.version
        for record_no, payload in self.parser.records(warning_input.lines):
            try:
                warning = self.parser.parse_warning(payload, version)
            except ParseError as e:
                result.errors.append(IngestionError(
                    kind=IngestionErrorKind.UNPARSEABLE_WARNING,
                    source=warning_input.label,
                    line=record_no,
                    message=str(e),
                    text=payload if isinstance(payload, str) else None,
                ))
                continue

            if warning is None:
                continue
            if warning.guideline is None:
                result.non_misra += 1
                continue

            guideline = self.catalogue.lookup(warning.guideline)
            if guideline is None:
                result.errors.append(IngestionError(
                    kind=IngestionErrorKind.UNKNOWN_GUIDELINE,
                    source=warning_input.label,
                    line=record_no,
                    message=f"Unknown guideline '{warning.guideline}' for {version}",
                    text=payload if isinstance(payload, str) else None,
                ))
                continue

            deviation = bool(self.tag_re and self.tag_re.search(warning.message))
            result.violations.append(Violation(
                guideline=guideline.code,
                file_path=normalize_path(warning.file_path, self.workspace_root),
                line=warning.line,
                message=warning.message,
                deviation=deviation,
                record=record_no,
            ))

        logger.info(
            "%s: %d violations (%d deviations), %d non-MISRA warnings, %d errors",
            warning_input.label,
            len(result.violations),
            sum(1 for v in result.violations if v.deviation),
            result.non_misra,
            len(result.errors),
        )
        return result

    def parse_source_files(
        self, source_input: Optional[TextInput]
    ) -> Tuple[List[str], List[IngestionError]]:
        if source_input is None or source_input.missing:
            return [], [_missing(source_input, "source files")]

        files: List[str] = []
        seen = set()
        for line in source_input.lines:
            path = normalize_path(line, self.workspace_root)
            if not path or path in seen:
                continue
            seen.add(path)
            files.append(path)

        if not files:
            return files, [IngestionError(
                kind=IngestionErrorKind.EMPTY_INPUT,
                source=source_input.label,
                message="No source files listed",
            )]
        return files, []


def _missing(text_input: Optional[TextInput], default_label: str) -> IngestionError:
    label = text_input.label if text_input is not None else default_label
    reason = text_input.error if text_input is not None and text_input.error else "no input"
    return IngestionError(
        kind=IngestionErrorKind.MISSING_INPUT,
        source=label,
        message=f"Input could not be read: {reason}",
    )
