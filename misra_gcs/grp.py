"""
Guideline Re-categorization Plan (GRP)

A GRP lists one directive per line:

    Rule 15.5   Disapplied   single exit is not a project requirement
    Dir 4.6;    Required;    fixed-width types are mandatory here
    10.3, Advisory

i.e. ``<guideline> [sep] <category> [sep] [justification]`` where ``sep`` is
``,`` ``;`` ``:`` or whitespace.  Matching is case-insensitive; blank lines
and lines starting with ``#`` or ``//`` are ignored.

Parsing resolves directives against the active catalogue.  Application is
a pure function from (guidelines, entries) to effective guidelines, so the
catalogue itself is never touched.
"""

import logging
import re
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .errors import ParseError
from .models import (
    EffectiveGuideline,
    GrpDirective,
    GrpEntry,
    IngestionError,
    IngestionErrorKind,
    TextInput,
)
from .ruleset import Catalogue, Category, Guideline

logger = logging.getLogger(__name__)

_GRP_RE = re.compile(
    r"^(?P<guideline>(?:(?:rule|directive|dir|r|d)\s*\.?\s*)?\d+(?:\s*[.\-]\s*\d+)*)"
    r"\s*[,;:]?\s*"
    r"(?P<category>mandatory|required|advisory|disapplied)\b"
    r"\s*[,;:]?\s*"
    r"(?P<justification>.*?)\s*$",
    re.IGNORECASE,
)


def parse_grp_line(line: str) -> Optional[GrpDirective]:
    """Parse one GRP line; None for blank and comment lines."""
    text = line.strip()
    if not text or text.startswith("#") or text.startswith("//"):
        return None

    m = _GRP_RE.match(text)
    if not m:
        raise ParseError(f"Malformed GRP directive: '{text}'")

    return GrpDirective(
        guideline=" ".join(m.group("guideline").split()),
        category=Category.parse(m.group("category")),
        justification=m.group("justification") or None,
    )


class GrpProcessor:
    """Turns GRP text into catalogue-resolved entries."""

    def __init__(
        self,
        catalogue: Catalogue,
        parse_line: Callable[[str], Optional[GrpDirective]] = parse_grp_line,
    ):
        self.catalogue = catalogue
        self.parse_line = parse_line

    def parse(
        self, grp_input: Optional[TextInput]
    ) -> Tuple[List[GrpEntry], List[IngestionError]]:
        entries: List[GrpEntry] = []
        errors: List[IngestionError] = []

        # No GRP at all means ruleset defaults
        if grp_input is None:
            return entries, errors

        if grp_input.missing:
            errors.append(IngestionError(
                kind=IngestionErrorKind.MISSING_INPUT,
                source=grp_input.label,
                message=f"GRP could not be read: {grp_input.error or 'no input'}",
            ))
            return entries, errors

        first_seen: Dict[str, int] = {}
        for line_no, line in enumerate(grp_input.lines, 1):
            try:
                directive = self.parse_line(line)
            except ParseError as e:
                errors.append(_grp_error(grp_input.label, line_no, str(e), line))
                continue
            if directive is None:
                continue

            guideline = self.catalogue.lookup(directive.guideline)
            if guideline is None:
                errors.append(_grp_error(
                    grp_input.label, line_no,
                    f"Unknown guideline '{directive.guideline}' for {self.catalogue.version}",
                    line,
                ))
                continue

            if guideline.code in first_seen:
                errors.append(_grp_error(
                    grp_input.label, line_no,
                    f"Duplicate directive for {guideline.code} "
                    f"(first given on line {first_seen[guideline.code]})",
                    line,
                ))
                continue

            first_seen[guideline.code] = line_no
            entries.append(GrpEntry(
                guideline=guideline.code,
                category=directive.category,
                justification=directive.justification,
                line=line_no,
            ))

        logger.debug("GRP %s: %d directives accepted", grp_input.label, len(entries))
        return entries, errors


def apply_grp(
    guidelines: Iterable[Guideline],
    entries: Iterable[GrpEntry],
    source: str = "grp",
) -> Tuple[List[EffectiveGuideline], List[IngestionError]]:
    """Merge GRP entries into the catalogue's guidelines.

    Returns the effective guidelines, in catalogue order, and one
    INVALID_GRP error per rejected entry.  A Mandatory guideline keeps its
    category whatever the GRP says; guidelines without an entry keep their
    default.
    """
    guidelines = list(guidelines)
    by_code = {g.code: g for g in guidelines}
    accepted: Dict[str, GrpEntry] = {}
    errors: List[IngestionError] = []

    for entry in entries:
        g = by_code.get(entry.guideline)
        if g is None:
            errors.append(_grp_error(
                source, entry.line, f"Unknown guideline '{entry.guideline}'"
            ))
        elif entry.guideline in accepted:
            errors.append(_grp_error(
                source, entry.line, f"Duplicate directive for {entry.guideline}"
            ))
        elif not g.category.can_become(entry.category):
            errors.append(_grp_error(
                source, entry.line,
                f"{g.category.value} guideline {g.code} cannot be "
                f"re-categorized as {entry.category.value}",
            ))
        else:
            accepted[entry.guideline] = entry

    effective = []
    for g in guidelines:
        entry = accepted.get(g.code)
        effective.append(EffectiveGuideline(
            code=g.code,
            description=g.description,
            default_category=g.category,
            category=entry.category if entry else g.category,
            justification=entry.justification if entry else None,
        ))
    return effective, errors


def _grp_error(source: str, line: Optional[int], message: str, text: Optional[str] = None) -> IngestionError:
    return IngestionError(
        kind=IngestionErrorKind.INVALID_GRP,
        source=source,
        line=line,
        message=message,
        text=text,
    )
