from .patch import HunkMatchError, PatchFailedError
from .source import DiffSourceError

__all__ = ["PatchFailedError", "HunkMatchError", "DiffSourceError"]
