"""
MISRA Ruleset Model

Read-only guideline catalogues, one per MISRA rule set version, plus the
category state machine that governs re-categorization.

Guideline codes are canonical strings such as ``Rule 10.4``, ``Dir 4.1``
(MISRA C:2012) or ``Rule 5-0-3`` (MISRA C++:2008).  Catalogues preserve the
rule set's own numbering order, which is carried unchanged into every
report.

The catalogue tables themselves live in ruleset_data.py.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .errors import UnsupportedRulesetError

# Rule set version identifiers.  Plain strings, compared by equality.
MISRA_C_2004 = "MISRA C:2004"
MISRA_C_2012 = "MISRA C:2012"
MISRA_CPP_2008 = "MISRA C++:2008"

RULESET_VERSIONS = (MISRA_C_2004, MISRA_C_2012, MISRA_CPP_2008)


class Category(str, Enum):
    MANDATORY = "Mandatory"
    REQUIRED = "Required"
    ADVISORY = "Advisory"
    DISAPPLIED = "Disapplied"

    @classmethod
    def parse(cls, text: str) -> "Category":
        for member in cls:
            if member.value.lower() == text.strip().lower():
                return member
        raise ValueError(f"Unknown guideline category '{text}'")

    def can_become(self, target: "Category") -> bool:
        """Whether a re-categorization plan may move this category to *target*.

        Mandatory guidelines can never be relaxed.  Required and Advisory
        guidelines may be escalated or relaxed, including to Disapplied.
        """
        if self is Category.MANDATORY:
            return target is Category.MANDATORY
        return True


# Categories a guideline may have by default
DEFAULT_CATEGORIES = (Category.MANDATORY, Category.REQUIRED, Category.ADVISORY)


@dataclass(frozen=True)
class Guideline:
    code: str
    category: Category          # default category, never Disapplied
    description: str

    @property
    def is_directive(self) -> bool:
        return self.code.startswith("Dir ")


# ───────────────────────────────────────────────────────────────────────
#  Guideline code matching
# ───────────────────────────────────────────────────────────────────────

_TOKEN_RE = re.compile(
    r"^(?:(?P<dir>directive|dir|d)|(?P<rule>rule|r))?\s*\.?\s*"
    r"(?P<num>\d+(?:\s*[.\-]\s*\d+)*)$",
    re.IGNORECASE,
)

GuidelineKey = Tuple[str, Tuple[int, ...]]


def guideline_key(token: str) -> Optional[GuidelineKey]:
    """Reduce a guideline reference to a (kind, numbers) key.

    ``Rule 10.4``, ``rule 10.4``, ``R10.4`` and ``10.4`` all give
    ``("Rule", (10, 4))``; ``Dir 4.1`` and ``D4.1`` give ``("Dir", (4, 1))``.
    Dots and dashes are interchangeable, so ``0.1.1`` matches ``Rule 0-1-1``.
    """
    m = _TOKEN_RE.match(token.strip())
    if not m:
        return None
    kind = "Dir" if m.group("dir") else "Rule"
    numbers = tuple(int(n) for n in re.split(r"\s*[.\-]\s*", m.group("num")))
    return kind, numbers


class Catalogue:
    """The ordered guidelines of one rule set version."""

    def __init__(self, version: str, guidelines: Iterable[Guideline]):
        self.version = version
        self.guidelines: Tuple[Guideline, ...] = tuple(guidelines)
        self._index: Dict[GuidelineKey, Guideline] = {}
        for g in self.guidelines:
            if g.category not in DEFAULT_CATEGORIES:
                raise ValueError(
                    f"{version} {g.code}: default category must not be {g.category.value}"
                )
            key = guideline_key(g.code)
            if key is None:
                raise ValueError(f"{version}: malformed guideline code '{g.code}'")
            if key in self._index:
                raise ValueError(f"{version}: duplicate guideline '{g.code}'")
            self._index[key] = g

    def __len__(self) -> int:
        return len(self.guidelines)

    def __iter__(self):
        return iter(self.guidelines)

    def lookup(self, token: str) -> Optional[Guideline]:
        key = guideline_key(token)
        if key is None:
            return None
        return self._index.get(key)


def _squash(name: str) -> str:
    s = name.lower().replace("++", "pp")
    s = re.sub(r"[^a-z0-9]", "", s)
    if s.startswith("misra"):
        s = s[len("misra"):]
    return s


class RulesetModel:
    """Process-wide table of catalogues, keyed by rule set version.

    Built once and only read afterward; safe to share between runs.
    """

    def __init__(self, catalogues: Iterable[Catalogue]):
        self._catalogues: Dict[str, Catalogue] = {}
        for c in catalogues:
            self._catalogues[c.version] = c

    @classmethod
    def default(cls) -> "RulesetModel":
        from .ruleset_data import TABLES

        return cls(
            Catalogue(version, (Guideline(code, _LETTER[cat], text) for code, cat, text in rows))
            for version, rows in TABLES.items()
        )

    def versions(self) -> List[str]:
        return list(self._catalogues)

    def resolve(self, rule_set: str) -> str:
        """Map a user-supplied rule set name to its canonical version id.

        Accepts spellings such as ``MISRA-C:2012``, ``misra c 2012`` or
        ``MISRA C++ 2008``.
        """
        if rule_set in self._catalogues:
            return rule_set
        wanted = _squash(rule_set or "")
        for version in self._catalogues:
            if wanted and _squash(version) == wanted:
                return version
        raise UnsupportedRulesetError(rule_set)

    def catalogue(self, version: str) -> Catalogue:
        return self._catalogues[self.resolve(version)]

    def guidelines_for(self, version: str) -> Tuple[Guideline, ...]:
        return self.catalogue(version).guidelines


# Table letters → default category.  MISRA C++:2008 "Document" rules are
# handled like Required ones.
_LETTER = {
    "M": Category.MANDATORY,
    "R": Category.REQUIRED,
    "A": Category.ADVISORY,
    "D": Category.REQUIRED,
}


def format_guideline_explanation(catalogue: Catalogue, token: str) -> str:
    """Return a short Markdown explanation of a guideline."""
    g = catalogue.lookup(token)
    if g is None:
        return f"Unknown guideline: {token} ({catalogue.version})"

    kind = "Directive" if g.is_directive else "Rule"
    return (
        f"## {catalogue.version} {g.code}\n"
        f"**Category**: {g.category.value}\n\n"
        f"{g.description}\n\n"
        f"A {g.category.value.lower()} {kind.lower()}"
        + (
            " can never be re-categorized."
            if g.category is Category.MANDATORY
            else " may be re-categorized or disapplied in the GRP."
        )
    )
