"""
Lightweight, opt-in logging utilities for the library.

Usage in library code:
    from blockforge._logging import resolve_logger

    def do_thing(..., logger=None, log: bool = False):
        log = resolve_logger(logger=logger, enabled=log, name=__name__)
        log.debug("starting do_thing")  # no-op unless enabled or logger passed
        ...

Design goals:
- No stdout/stderr prints in library code.
- Zero-noise by default; consumers opt in by passing a logger or enabled flag.
- Safe to import without configuring global logging.
"""
from __future__ import annotations

import logging


class NoopLogger:
    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    info = warning = error = exception = critical = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str | None = None,
    level: int | None = None,
) -> logging.Logger | NoopLogger:
    """
    Return a usable logger according to opt-in policy.

    - If `logger` is provided, use it.
    - Else if `enabled` is True, create/get a named logger. Its level is
      only set when `level` is given; otherwise it inherits from its parents.
    - Else return a NoopLogger that ignores calls.
    """
    if logger is not None:
        return logger
    if enabled:
        lg = logging.getLogger(name or "blockforge")
        if level is not None:
            lg.setLevel(level)
        # Bubble to the root so the CLI handler and pytest's caplog both see records.
        lg.propagate = True
        return lg
    return NoopLogger()
