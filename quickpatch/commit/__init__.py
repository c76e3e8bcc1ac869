from .core import patch_file

__all__ = ["patch_file"]
