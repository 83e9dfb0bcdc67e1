"""
Cppcheck warning parser

Reads the text output of cppcheck run with the MISRA addon (or Cppcheck
Premium) and a template of the form

    --template="{file}:{line}:{column}: {severity}: {message} [{id}]"

Examples:

    src/main.c:42:5: style: misra violation [misra-c2012-10.4]
    src/io.c:7:0: style: Dynamic memory shall not be used [premium-misra-c-2012-dir-4.12]
    src/a.cpp:3:1: style: Unions shall not be used [premium-misra-cpp-2008-9-5-1]
    src/main.c:9:3: error: Null pointer dereference: p [nullPointer]

Ids of other checkers, or of a MISRA edition other than the run's, are
non-MISRA warnings.
"""

import re
from typing import Optional

from .errors import ParseError
from .models import ToolWarning
from .ruleset import MISRA_C_2012, MISRA_CPP_2008
from .warning_parsers import WarningParser

_LINE_RE = re.compile(
    r"^(?P<file>.+?):(?P<line>\d+):(?:(?P<col>\d+):)?\s*"
    r"(?P<severity>\w+):\s*(?P<message>.*?)\s*\[(?P<id>[^\]]+)\]\s*$"
)

_C2012_ID_RE = re.compile(r"^(?:misra-c2012-|premium-misra-c-2012-)(?P<dir>dir-)?(?P<num>\d+\.\d+)$")
_CPP2008_ID_RE = re.compile(r"^(?:misra-cpp-2008-|premium-misra-cpp-2008-)(?P<num>\d+-\d+-\d+)$")

# Progress output printed between diagnostics
_PROGRESS_RE = re.compile(r"^(?:Checking\s.*|\d+/\d+ files checked.*)$")


def guideline_from_id(error_id: str, version: str) -> Optional[str]:
    """Map a cppcheck error id to a guideline token for *version*."""
    m = _C2012_ID_RE.match(error_id)
    if m:
        if version != MISRA_C_2012:
            return None
        kind = "Dir" if m.group("dir") else "Rule"
        return f"{kind} {m.group('num')}"

    m = _CPP2008_ID_RE.match(error_id)
    if m:
        if version != MISRA_CPP_2008:
            return None
        return f"Rule {m.group('num')}"

    return None


def parse_warning(line: str, version: str) -> Optional[ToolWarning]:
    # Source echo and the caret line underneath it are indented
    if not line.strip() or line[:1].isspace():
        return None
    text = line.strip()
    if _PROGRESS_RE.match(text):
        return None

    m = _LINE_RE.match(text)
    if not m:
        raise ParseError(f"Not a cppcheck diagnostic: '{text}'")

    line_no = int(m.group("line"))
    return ToolWarning(
        guideline=guideline_from_id(m.group("id"), version),
        file_path=m.group("file"),
        line=line_no or None,
        message=m.group("message"),
    )


CPPCHECK = WarningParser(
    name="Cppcheck",
    supported_versions=frozenset({MISRA_C_2012, MISRA_CPP_2008}),
    parse_warning=parse_warning,
    description="cppcheck / Cppcheck Premium text output with the {file}:{line}:{column}: {severity}: {message} [{id}] template",
)
