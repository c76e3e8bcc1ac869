"""
Opt-in logging for quickpatch.

Usage in library code:
    from quickpatch._logging import resolve_logger

    def apply_something(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("applying")  # silent unless enabled or a logger is passed

Nothing here configures handlers or prints. Callers opt in per call.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def _ensure_propagation(lg: logging.Logger) -> None:
    # Records go to the root logger; no handler of our own.
    lg.propagate = True


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int = logging.INFO,
) -> logging.Logger | NoopLogger:
    """
    Return the logger a call should write to.

    - A passed `logger` wins (anything with a `.debug` method).
    - Otherwise `enabled=True` gives the named stdlib logger at `level`.
    - Otherwise a NoopLogger.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "quickpatch")
        lg.setLevel(level)
        _ensure_propagation(lg)
        return lg
    return NoopLogger()
