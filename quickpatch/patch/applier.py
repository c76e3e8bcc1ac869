# quickpatch/patch/applier.py
from __future__ import annotations

import logging
from typing import Sequence

from .._logging import resolve_logger
from ..document import Document, TextDocument
from ..errors.patch import HunkMatchError
from ..models.hunk import ApplicationResult, Hunk
from .parser import parse_hunks
from .render import render_lines

__all__ = ["apply_hunks", "patch_text"]


def _replace_first(document: Document, old: str, new: str) -> int | None:
    """Replace the first occurrence of `old`; return its offset or None."""
    pos = document.find_first(old)
    if pos is None:
        return None
    document.replace_at(pos, len(old), new)
    return pos


def apply_hunks(
    document: Document,
    hunks: Sequence[Hunk],
    *,
    logger=None,
    log: bool = False,
) -> ApplicationResult:
    """
    Apply hunks to `document` in order, mutating it in place.

    Each hunk's before text is searched from the start of the document as it
    stands after the previous hunks, first as stored (strict) and then with one
    extra leading space on every context line (fallback). The first occurrence
    is replaced.

    Raises:
        HunkMatchError: for the first hunk found by neither search. Later hunks
            are not attempted and earlier replacements are kept.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)
    log.debug(f"Applying {len(hunks)} hunk(s)")

    fallbacks = 0
    for index, hunk in enumerate(hunks, 1):
        pos = _replace_first(document, render_lines(hunk.before), render_lines(hunk.after))
        if pos is not None:
            log.debug(f"hunk #{index}: strict match at offset {pos}")
            continue

        pos = _replace_first(
            document,
            render_lines(hunk.before, relaxed=True),
            render_lines(hunk.after, relaxed=True),
        )
        if pos is not None:
            fallbacks += 1
            log.debug(f"hunk #{index}: relaxed context match at offset {pos}")
            continue

        log.debug(f"hunk #{index}: no match, stopping")
        raise HunkMatchError(index)

    return ApplicationResult(hunks_applied=len(hunks), hunks_using_fallback=fallbacks)


def patch_text(
    content: str,
    diff_text: str,
    *,
    logger=None,
    log: bool = False,
) -> tuple[str, ApplicationResult]:
    """
    Apply `diff_text` to a string and return `(new_text, result)`.

    Raises:
        HunkMatchError: if a hunk cannot be located.
    """
    document = TextDocument(content)
    result = apply_hunks(document, parse_hunks(diff_text), logger=logger, log=log)
    return document.text, result
