"""
Axivion warning parser

Reads issues exported from Axivion Bauhaus Suite / Dashboard.  The warnings
input may be a whole JSON document using any of these layouts:

  • {"issues": [...]}      (default / simplified)
  • {"findings": [...]}    (Axivion Dashboard export)
  • {"warnings": [...]}    (legacy Axivion format)
  • {"results": [...]}     (custom CI pipeline wrapper)
  • [...]                  (bare array at top level)

or JSON Lines, one issue object per line.  Each issue is normalised into a
ToolWarning; MISRA rule ids look like ``MisraC2012-10.4``,
``MisraC2012Directive-4.1``, ``MisraC2004-12.1`` or ``MisraC++2008-5-0-3``.
"""

import json
import logging
import re
from typing import Any, Iterator, Optional, Sequence, Tuple

from .errors import ParseError
from .models import ToolWarning
from .ruleset import MISRA_C_2004, MISRA_C_2012, MISRA_CPP_2008
from .warning_parsers import WarningParser

logger = logging.getLogger(__name__)

# Keys we scan for when auto-detecting the report structure
_CANDIDATE_KEYS = ("issues", "findings", "warnings", "results", "violations")

# Field names carrying the rule id of a single issue
_RULE_ID_KEYS = ("ruleId", "rule_id", "rule", "checkId", "errorNumber")

_RULE_ID_RE = re.compile(
    r"^Misra(?P<std>C2004|C2012|C\+\+(?:2008)?|Cpp(?:2008)?)"
    r"(?P<dir>Directive|Dir)?-(?P<num>\d+(?:[.\-]\d+)+)$",
    re.IGNORECASE,
)

_STANDARDS = {
    "c2004": MISRA_C_2004,
    "c2012": MISRA_C_2012,
    "c++": MISRA_CPP_2008,
    "c++2008": MISRA_CPP_2008,
    "cpp": MISRA_CPP_2008,
    "cpp2008": MISRA_CPP_2008,
}


# ────────────────────────────────────────────────────────────────
#  Record splitting
# ────────────────────────────────────────────────────────────────

def _extract_issues(data) -> Optional[list]:
    """Auto-detect the array of issues inside the JSON structure."""
    # Top-level array
    if isinstance(data, list):
        return data

    if not isinstance(data, dict):
        return None

    # A single issue object, whatever lists it carries itself
    if any(data.get(k) for k in _RULE_ID_KEYS):
        return None

    # Try each candidate key
    for key in _CANDIDATE_KEYS:
        if key in data and isinstance(data[key], list):
            logger.info("Axivion report: issues under key '%s'", key)
            return data[key]

    # Last resort: look for the first key whose value is a list of objects
    for key, val in data.items():
        if isinstance(val, list) and len(val) > 0 and isinstance(val[0], dict):
            logger.info("Auto-detected issues under key '%s'", key)
            return val

    return None


def records(lines: Sequence[str]) -> Iterator[Tuple[int, Any]]:
    """Split the input into issues.

    A whole JSON document yields one record per issue, numbered from 1.
    Anything else is treated as JSON Lines and numbered by input line.
    """
    text = "\n".join(lines).strip()
    if not text:
        return

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        pass
    else:
        issues = _extract_issues(data)
        if issues is not None:
            for index, item in enumerate(issues, 1):
                yield index, item
            return
        # A single issue object, or a document we cannot interpret
        yield 1, data
        return

    for line_no, line in enumerate(lines, 1):
        yield line_no, line


# ────────────────────────────────────────────────────────────────
#  Issue normalisation
# ────────────────────────────────────────────────────────────────

def guideline_from_rule_id(rule_id: str, version: str) -> Optional[str]:
    m = _RULE_ID_RE.match(rule_id.strip())
    if not m or _STANDARDS[m.group("std").lower()] != version:
        return None
    kind = "Dir" if m.group("dir") else "Rule"
    return f"{kind} {m.group('num')}"


def _normalise(item: dict, version: str) -> ToolWarning:
    """Normalise a single issue dict to a ToolWarning."""
    # ── Rule ID ──
    rule_id = next((item[k] for k in _RULE_ID_KEYS if item.get(k)), None)
    if not rule_id:
        raise ParseError("Axivion issue has no rule id")

    # ── Message ──
    message = (
        item.get("message")
        or item.get("msg")
        or item.get("text")
        or ""
    )

    # ── Location ──
    loc = item.get("location")
    if isinstance(loc, dict) and loc:
        file_path = loc.get("path") or loc.get("file") or ""
        line_number = loc.get("startLine") or loc.get("line") or 0
    else:
        file_path = ""
        line_number = 0

    # Fallback: path/line at top level
    if not file_path:
        file_path = item.get("file") or item.get("path") or ""
    if not line_number:
        line_number = item.get("line") or item.get("startLine") or 0

    try:
        line_number = int(line_number)
    except (TypeError, ValueError):
        raise ParseError(f"Axivion issue has an invalid line number: {line_number!r}")

    return ToolWarning(
        guideline=guideline_from_rule_id(str(rule_id), version),
        file_path=str(file_path),
        line=line_number or None,
        message=str(message),
    )


def parse_warning(payload: Any, version: str) -> Optional[ToolWarning]:
    if isinstance(payload, str):
        if not payload.strip():
            return None
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON: {e}")

    if not isinstance(payload, dict):
        raise ParseError(
            "Unrecognised Axivion issue. Expected a JSON object, "
            f"or a document with one of the keys: {', '.join(_CANDIDATE_KEYS)}"
        )
    return _normalise(payload, version)


AXIVION = WarningParser(
    name="Axivion",
    supported_versions=frozenset({MISRA_C_2004, MISRA_C_2012, MISRA_CPP_2008}),
    parse_warning=parse_warning,
    records=records,
    description="Axivion Bauhaus Suite / Dashboard issues as JSON or JSON Lines",
)
