from .hunk import ApplicationResult, Hunk, Line, LineFlag

__all__ = ["LineFlag", "Line", "Hunk", "ApplicationResult"]
