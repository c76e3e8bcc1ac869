# quickpatch/commit/core.py
import contextlib
import logging
import os
import shutil
import tempfile
from typing import Optional

from .._logging import resolve_logger
from ..document import TextDocument
from ..models.hunk import ApplicationResult
from ..patch.applier import apply_hunks
from ..patch.parser import parse_hunks


def _backup_path(dest: str, backup_ext: str) -> str:
    ext = backup_ext if backup_ext.startswith(".") else "." + backup_ext
    return dest + ext


def _atomic_write(dest: str, text: str, encoding: str) -> None:
    """Write to a temp file beside `dest`, then promote it with os.replace()."""
    fd, tmp = tempfile.mkstemp(prefix=".quickpatch-", dir=os.path.dirname(dest) or ".")
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as f:
            f.write(text)
        with contextlib.suppress(OSError):
            shutil.copymode(dest, tmp)
        os.replace(tmp, dest)
    except Exception:
        with contextlib.suppress(OSError):
            os.remove(tmp)
        raise


def patch_file(
    path: str,
    diff_text: str,
    *,
    dry_run: bool = False,
    backup_ext: Optional[str] = None,
    encoding: str = "utf-8",
    logger=None,
    log: bool = False,
) -> ApplicationResult:
    """
    Apply a diff to the file at `path`.

    The diff is applied to the file content in memory first; the file is only
    rewritten once every hunk has been placed, so a HunkMatchError leaves it
    untouched.

    Args:
        path: File to patch.
        diff_text: Unified or headerless diff.
        dry_run: Apply in memory and report, but never write.
        backup_ext: Copy the original to `path + backup_ext` before writing
                    (e.g. ".orig" or "orig").
        encoding: Text encoding of the file.

    Returns:
        ApplicationResult for the applied diff.
    """
    flog = resolve_logger(logger=logger, enabled=log, name=__name__, level=logging.DEBUG)

    with open(path, encoding=encoding, newline="") as f:
        original = f.read()

    document = TextDocument(original)
    result = apply_hunks(document, parse_hunks(diff_text), logger=logger, log=log)

    if dry_run:
        flog.info(f"dry run: {result.hunks_applied} hunk(s) matched in '{path}', nothing written")
        return result
    if document.text == original:
        flog.info(f"'{path}' unchanged, nothing written")
        return result

    if backup_ext:
        shutil.copy2(path, _backup_path(path, backup_ext))
    _atomic_write(path, document.text, encoding)
    flog.info(
        f"patched '{path}': {result.hunks_applied} hunk(s), "
        f"{result.hunks_using_fallback} via relaxed context"
    )
    return result
