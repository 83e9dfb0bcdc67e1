"""
Warning parser registry

A warning parser (adapter) is a small bundle of functions describing one
analysis tool's output:

  • parse_warning(payload, version) → ToolWarning | None
  • parse_grp(line)                 → GrpDirective | None
  • records(lines)                  → iterable of (record number, payload)

Parse functions raise ParseError on malformed input and return None for
noise (progress output, echoed source, comments).  Adapters are plain
values; there is no base class to inherit from.

The registry is an explicit read-only table.  default_registry() builds
the one used by the host; tests build their own.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

from .errors import UnknownAdapterError
from .grp import parse_grp_line
from .models import GrpDirective, ToolWarning


def line_records(lines: Sequence[str]) -> Iterator[Tuple[int, Any]]:
    """Default record split: one record per input line, numbered from 1."""
    for line_no, line in enumerate(lines, 1):
        yield line_no, line


@dataclass(frozen=True)
class WarningParser:
    name: str
    supported_versions: FrozenSet[str]
    parse_warning: Callable[[Any, str], Optional[ToolWarning]]
    parse_grp: Callable[[str], Optional[GrpDirective]] = parse_grp_line
    records: Callable[[Sequence[str]], Iterable[Tuple[int, Any]]] = line_records
    description: str = field(default="", compare=False)

    def supports(self, version: str) -> bool:
        return version in self.supported_versions


class WarningParserRegistry:
    """Name → WarningParser lookup, in registration order."""

    def __init__(self, parsers: Iterable[WarningParser]):
        self._parsers: Dict[str, WarningParser] = {}
        for p in parsers:
            if p.name in self._parsers:
                raise ValueError(f"Duplicate warning parser name '{p.name}'")
            self._parsers[p.name] = p

    def get(self, name: str) -> WarningParser:
        if name in self._parsers:
            return self._parsers[name]
        # Names are matched case-insensitively as a fallback
        wanted = (name or "").strip().lower()
        for key, parser in self._parsers.items():
            if key.lower() == wanted:
                return parser
        raise UnknownAdapterError(name, self.names())

    def all(self) -> List[WarningParser]:
        return list(self._parsers.values())

    def names(self) -> List[str]:
        return list(self._parsers)

    def is_compatible(self, name: str, version: str) -> bool:
        """Whether adapter *name* supports rule set *version*.

        Raises UnknownAdapterError for unknown adapter names.
        """
        return self.get(name).supports(version)


def default_registry() -> WarningParserRegistry:
    """The adapters shipped with misra_gcs, in display order."""
    from .axivion_parser import AXIVION
    from .cppcheck_parser import CPPCHECK
    from .pclint_parser import PCLINT_PLUS

    return WarningParserRegistry([CPPCHECK, PCLINT_PLUS, AXIVION])
