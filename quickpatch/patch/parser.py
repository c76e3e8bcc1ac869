# quickpatch/patch/parser.py
from __future__ import annotations

from typing import List

from ..models.hunk import Hunk, Line, LineFlag

__all__ = ["parse_hunks"]


_FILE_HEADERS = ("--- ", "+++ ")
_MARKERS = {flag.value: flag for flag in LineFlag}


def _content_lines(diff_text: str) -> list[str]:
    """Split on newlines, dropping the terminal empty piece and blank lines."""
    lines = diff_text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [ln for ln in lines if ln.strip()]


def parse_hunks(diff_text: str) -> List[Hunk]:
    """
    Parse a unified diff or a headerless +/- patch into hunks.

    `@@` lines only separate hunks; their line ranges are never read.
    `---`/`+++` file headers are skipped wherever they appear, and any line
    not starting with ' ', '-' or '+' is ignored. Without `@@` markers the
    whole input is a single hunk. Never raises.
    """
    hunks: list[Hunk] = []
    before: list[Line] = []
    after: list[Line] = []
    in_hunk = False

    for raw in _content_lines(diff_text):
        if raw.startswith(_FILE_HEADERS):
            continue
        if raw.startswith("@@"):
            if in_hunk:
                hunks.append(Hunk(tuple(before), tuple(after)))
                before, after = [], []
            in_hunk = True
            continue

        flag = _MARKERS.get(raw[0])
        if flag is None:
            continue
        in_hunk = True
        line = Line(raw[1:], flag)
        if flag is LineFlag.CONTEXT:
            before.append(line)
            after.append(line)
        elif flag is LineFlag.REMOVED:
            before.append(line)
        else:
            after.append(line)

    if in_hunk:
        hunks.append(Hunk(tuple(before), tuple(after)))
    return hunks
