"""
PC-lint Plus warning parser

Expects messages produced with ``-format=%f(%l): %t %n: %m``, e.g.

    src/main.c(42): note 9029: mismatched essential type categories for binary operator [MISRA 2012 Rule 10.4, required]
    src/init.c(7): info 9003: could define variable 'x' at block scope [MISRA 2012 Rule 8.9, advisory]
    src/a.cpp(12): note 1960: Violates MISRA C++ 2008 Required Rule 5-0-3 [MISRA C++ Rule 5-0-3]

The guideline comes from the trailing ``[MISRA ...]`` tag.  Messages
without a tag, or tagged for another MISRA edition than the run's, are
non-MISRA warnings.
"""

import re
from typing import Optional

from .errors import ParseError
from .models import ToolWarning
from .ruleset import MISRA_C_2004, MISRA_C_2012, MISRA_CPP_2008
from .warning_parsers import WarningParser

_LINE_RE = re.compile(
    r"^(?P<file>.+?)\((?P<line>\d+)\):\s*"
    r"(?P<type>error|warning|info|note|supplemental)\s+(?P<num>\d+):\s*"
    r"(?P<message>.*?)\s*$",
    re.IGNORECASE,
)

# Messages without a location, e.g. "error 322: unable to open include file 'x.h'"
_GLOBAL_RE = re.compile(
    r"^(?P<type>error|warning|info|note|supplemental)\s+(?P<num>\d+):\s*(?P<message>.*?)\s*$",
    re.IGNORECASE,
)

_TAG_RE = re.compile(
    r"\[MISRA\s+(?P<edition>C\+\+(?:\s*2008)?|(?:C\s*:?\s*)?2004|(?:C\s*:?\s*)?2012)\s+"
    r"(?P<kind>Rule|Directive|Dir)\s+(?P<num>\d+(?:[.\-]\d+)+)"
    r"(?:\s*,\s*[A-Za-z]+)?\s*\]",
    re.IGNORECASE,
)

_NOISE_PREFIXES = ("---", "During Specific Walk", "PC-lint Plus", "Copyright")


def _edition(tag: str) -> str:
    if "++" in tag:
        return MISRA_CPP_2008
    if "2004" in tag:
        return MISRA_C_2004
    return MISRA_C_2012


def guideline_from_message(message: str, version: str) -> Optional[str]:
    m = _TAG_RE.search(message)
    if not m or _edition(m.group("edition")) != version:
        return None
    kind = "Rule" if m.group("kind").lower() == "rule" else "Dir"
    return f"{kind} {m.group('num')}"


def parse_warning(line: str, version: str) -> Optional[ToolWarning]:
    if not line.strip() or line[:1].isspace():
        return None
    text = line.strip()
    if text.startswith(_NOISE_PREFIXES):
        return None

    m = _LINE_RE.match(text)
    if m:
        file_path, line_no = m.group("file"), int(m.group("line")) or None
    else:
        m = _GLOBAL_RE.match(text)
        if not m:
            raise ParseError(f"Not a PC-lint Plus message: '{text}'")
        file_path, line_no = "", None

    # Supplemental messages only add context to the preceding message
    if m.group("type").lower() == "supplemental":
        return None

    message = m.group("message")
    return ToolWarning(
        guideline=guideline_from_message(message, version),
        file_path=file_path,
        line=line_no,
        message=message,
    )


PCLINT_PLUS = WarningParser(
    name="PC-lint Plus",
    supported_versions=frozenset({MISRA_C_2004, MISRA_C_2012, MISRA_CPP_2008}),
    parse_warning=parse_warning,
    description="PC-lint Plus messages in -format=%f(%l): %t %n: %m",
)
