"""
Helpers for getting diff text into the patcher.

Public API:
  - read_diff(path: str, *, encoding: str = "utf-8") -> str
  - paste_from_clipboard() -> str | None
  - cleanup_diff_text(text: str) -> str
"""
from __future__ import annotations

import os
import re
import subprocess

from ..errors.source import DiffSourceError

__all__ = ["read_diff", "paste_from_clipboard", "cleanup_diff_text"]


_THINK_RE = re.compile(r"<think>.*?</think>", re.DOTALL)
_FENCE_RE = re.compile(r"^\s*```[a-zA-Z0-9-]*[ \t]*\n(.*?)\n\s*```\s*$", re.DOTALL)

# Tried in order; the first one found on PATH is used.
_PASTE_COMMANDS = (
    ("pbpaste", ["pbpaste"]),
    ("powershell", ["powershell", "-NoProfile", "-Command", "Get-Clipboard"]),
    ("wl-paste", ["wl-paste", "--no-newline"]),
    ("xclip", ["xclip", "-selection", "clipboard", "-o"]),
    ("xsel", ["xsel", "--clipboard", "--output"]),
)


def read_diff(path: str, *, encoding: str = "utf-8") -> str:
    """Read a diff from a file. Raises DiffSourceError if it can't be read."""
    try:
        with open(path, encoding=encoding, newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise DiffSourceError(f"diff file not found: '{path}'") from e
    except UnicodeDecodeError as e:
        raise DiffSourceError(f"diff file '{path}' is not valid {encoding}") from e


def paste_from_clipboard() -> str | None:
    """
    Read the system clipboard with the first available platform tool.
    Returns None when no tool is available or it fails.
    """
    for tool, argv in _PASTE_COMMANDS:
        if not _which(tool):
            continue
        try:
            proc = subprocess.run(argv, capture_output=True, check=False)
        except OSError:
            return None
        if proc.returncode != 0:
            return None
        return proc.stdout.decode("utf-8", errors="replace")
    return None


def cleanup_diff_text(text: str) -> str:
    """
    Strip chat artifacts from a pasted diff: <think> blocks and a markdown
    fence (```diff ... ```) wrapping the whole text.
    """
    if not text:
        return ""
    text = _THINK_RE.sub("", text)
    m = _FENCE_RE.match(text)
    if m:
        # Keep leading spaces; they are context markers.
        text = m.group(1) + "\n"
    return text


def _which(cmd: str) -> bool:
    paths = os.environ.get("PATH", "").split(os.pathsep)
    exts = [""]
    if os.name == "nt":
        pathext = os.environ.get("PATHEXT", ".EXE;.BAT;.CMD").split(";")
        exts += [e.lower() for e in pathext if e]
    for folder in paths:
        full = os.path.join(folder, cmd)
        for e in exts:
            if os.path.isfile(full + e) and os.access(full + e, os.X_OK):
                return True
    return False
