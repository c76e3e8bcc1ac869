from typing import Iterable

from ..models.hunk import Line, LineFlag


def render_lines(lines: Iterable[Line], *, relaxed: bool = False) -> str:
    """
    Flatten a line group to the text searched for in the document.

    Lines are joined with '\\n', no trailing newline. The relaxed form puts one
    extra space in front of every context line.
    """
    if not relaxed:
        return "\n".join(ln.text for ln in lines)
    return "\n".join(" " + ln.text if ln.flag is LineFlag.CONTEXT else ln.text for ln in lines)
