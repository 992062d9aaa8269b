#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
levellog ▸ Diagnostics & Shared Sink (stdlib logging)
===============================================================================

Purpose
-------
Two stdlib `logging` trees, each configured **once**:

* ``get_logger(name)`` – the package's own diagnostics ("levellog.*").
  Config loading and the CLI report problems here. Quiet by default.
* ``shared_sink()`` – the process‑wide sink "levellog.process" that
  `ProcessLogger` writes through. It has its own handler and does not
  propagate, so admitted lines are never filtered a second time.

Both use the same line layout as `LineWriter`:

    <file>:<line> YYYY/MM/DD HH:MM:SS <message>

Environment overrides
---------------------
    LEVELLOG_LOG_LVL      – diagnostics console level (DEBUG / INFO / … or numeric)
    LEVELLOG_SINK_STREAM  – "stdout" routes the shared sink to stdout (default stderr)
"""
from __future__ import annotations

import logging
import os
import sys
import time
from typing import Optional

# Only these two loggers own handlers; children propagate to the first.
_ROOT_LOGGER_NAME = "levellog"
_SINK_LOGGER_NAME = "levellog.process"

# Extra stdlib level for DEBUG2 (below logging.DEBUG).
DEBUG2_LEVEL = 5
logging.addLevelName(DEBUG2_LEVEL, "DEBUG2")


# ════════════════════════════════════════════════════════════════════════════
# Helpers
# ════════════════════════════════════════════════════════════════════════════
def _parse_level(val: str | None, default: int = logging.WARNING) -> int:
    """
    Parse an environment level value which may be a name ("INFO") or an integer ("20").
    Falls back to *default* on invalid input.
    """
    if val is None:
        return default
    s = val.strip()
    if not s:
        return default
    if s.isdigit():
        return int(s)
    name_to_level = {
        "CRITICAL": logging.CRITICAL,
        "FATAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "DEBUG2": DEBUG2_LEVEL,
        "NOTSET": logging.NOTSET,
    }
    return name_to_level.get(s.upper(), default)


# ════════════════════════════════════════════════════════════════════════════
# Formatters
# ════════════════════════════════════════════════════════════════════════════
FORMAT = "%(filename)s:%(lineno)d %(asctime)s %(message)s"
DTFMT = "%Y/%m/%d %H:%M:%S"


def line_formatter() -> logging.Formatter:
    """UTC formatter matching the `LineWriter` prefix."""
    fmt = logging.Formatter(fmt=FORMAT, datefmt=DTFMT)
    fmt.converter = time.gmtime  # type: ignore[assignment]
    return fmt


def _diagnostics_formatter() -> logging.Formatter:
    fmt = logging.Formatter(
        fmt="%(asctime)s | %(name)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    fmt.converter = time.gmtime  # type: ignore[assignment]
    return fmt


# ════════════════════════════════════════════════════════════════════════════
# Public helpers
# ════════════════════════════════════════════════════════════════════════════
def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a diagnostics logger for the package.

    Parameters
    ----------
    name : str | None
        • Explicit logger name, e.g. __name__ from caller.
        • *None* → root diagnostics logger "levellog".

    Notes
    -----
    Handlers are attached **only to the root** "levellog" logger. Child loggers
    propagate to it, so repeated calls never duplicate console output.
    """
    root = logging.getLogger(_ROOT_LOGGER_NAME)

    if not root.handlers:
        root.setLevel(logging.DEBUG)
        ch = logging.StreamHandler(sys.stderr)
        ch.setLevel(_parse_level(os.getenv("LEVELLOG_LOG_LVL")))
        ch.setFormatter(_diagnostics_formatter())
        root.addHandler(ch)
        root.propagate = False
        root.debug("Diagnostics logger initialised")

    if name is None or name == _ROOT_LOGGER_NAME:
        return root

    # The shared sink is not part of the diagnostics tree; leave it detached.
    if name == _SINK_LOGGER_NAME:
        return shared_sink()

    logger = logging.getLogger(name)
    logger.propagate = True
    return logger


def shared_sink(stream: Optional[object] = None) -> logging.Logger:
    """
    Return the process‑wide sink used by `ProcessLogger`.

    The sink is configured on first use only; *stream* is honoured on that
    first call (default: stderr, or stdout when LEVELLOG_SINK_STREAM=stdout).
    """
    sink = logging.getLogger(_SINK_LOGGER_NAME)
    if not sink.handlers:
        if stream is None:
            want_stdout = (os.getenv("LEVELLOG_SINK_STREAM") or "").strip().lower() == "stdout"
            stream = sys.stdout if want_stdout else sys.stderr
        handler = logging.StreamHandler(stream)  # type: ignore[arg-type]
        handler.setFormatter(line_formatter())
        sink.addHandler(handler)
        sink.setLevel(DEBUG2_LEVEL)
        sink.propagate = False
        get_logger(__name__).debug("Shared sink configured on %s", getattr(stream, "name", stream))
    return sink


__all__ = ["DEBUG2_LEVEL", "get_logger", "shared_sink", "line_formatter"]
