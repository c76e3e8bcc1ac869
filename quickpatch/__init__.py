from .commit import patch_file
from .document import Document, TextDocument
from .errors import DiffSourceError, HunkMatchError, PatchFailedError
from .models import ApplicationResult, Hunk, Line, LineFlag
from .patch import apply_hunks, parse_hunks, patch_text, render_lines
from .source import cleanup_diff_text, paste_from_clipboard, read_diff

__all__ = [
    "parse_hunks",
    "render_lines",
    "apply_hunks",
    "patch_text",
    "patch_file",
    "Document",
    "TextDocument",
    "LineFlag",
    "Line",
    "Hunk",
    "ApplicationResult",
    "read_diff",
    "paste_from_clipboard",
    "cleanup_diff_text",
    "PatchFailedError",
    "HunkMatchError",
    "DiffSourceError",
]
