from .applier import apply_hunks, patch_text
from .parser import parse_hunks
from .render import render_lines

__all__ = ["parse_hunks", "render_lines", "apply_hunks", "patch_text"]
