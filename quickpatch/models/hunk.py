from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class LineFlag(Enum):
    """Which side(s) of a hunk a diff line belongs to."""

    CONTEXT = " "
    REMOVED = "-"
    ADDED = "+"


@dataclass(frozen=True)
class Line:
    """One diff line with its leading marker stripped."""

    text: str
    flag: LineFlag


@dataclass(frozen=True)
class Hunk:
    """
    One before/after edit unit.

    `before` holds the REMOVED and CONTEXT lines, `after` the ADDED and
    CONTEXT lines, each in diff order. Either side may be empty.
    """

    before: Tuple[Line, ...] = field(default_factory=tuple)
    after: Tuple[Line, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ApplicationResult:
    """Outcome of applying every hunk of a diff."""

    hunks_applied: int = 0
    hunks_using_fallback: int = 0
