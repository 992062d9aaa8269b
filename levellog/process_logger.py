#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
levellog ▸ ProcessLogger (shared sink, nothing owned)
===============================================================================

Same filtering contract as `FileLogger`, but every admitted line goes to a
process‑wide stdlib `logging.Logger` (the *sink*). Useful when the hosting
process already manages where its logs end up.

* The sink is injected; the default is `levellog.logger.shared_sink()`.
* There is no owned stream, so `get_log_writer()` is None and `rotate()`
  only reports "Rotate called" at INFO.
* Call‑site attribution uses the stdlib ``stacklevel`` argument, which counts
  frames the same way as `LineWriter.output` does when called from `log`.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, TextIO

from levellog.errors import FatalLogged
from levellog.logger import shared_sink
from levellog.severity import (
    CALL_DEPTH,
    Severity,
    admits,
    clamp_severity,
    format_body,
    name_from_severity,
    to_stdlib_level,
)


class ProcessLogger:
    """Leveled logger delegating to a shared `logging.Logger`."""

    def __init__(self, threshold: int, sink: Optional[logging.Logger] = None):
        self._threshold = clamp_severity(threshold)
        self._sink = sink if sink is not None else shared_sink()

    @property
    def sink(self) -> logging.Logger:
        return self._sink

    def log_level(self) -> Severity:
        return self._threshold

    def log_level_string(self) -> str:
        return name_from_severity(self._threshold)

    def get_log_writer(self) -> Optional[TextIO]:
        return None

    def rotate(self) -> None:
        self.info("Rotate called")

    def output(self, calldepth: int, s: str) -> None:
        self._sink.log(logging.INFO, "%s", s.rstrip("\n"), stacklevel=calldepth + 1)

    def log(self, level: int, depth: int, *args: Any) -> None:
        if admits(level, self._threshold):
            body = format_body(level, args).rstrip("\n")
            self._sink.log(to_stdlib_level(level), "%s", body, stacklevel=depth)

    def fatal(self, *args: Any) -> None:
        self.log(Severity.FATAL, CALL_DEPTH, *args)
        for handler in self._sink.handlers:
            handler.flush()
        raise FatalLogged(" ".join(str(a) for a in args) or "Fatal error occurred")

    def error(self, *args: Any) -> None:
        self.log(Severity.ERROR, CALL_DEPTH, *args)

    def warning(self, *args: Any) -> None:
        self.log(Severity.WARNING, CALL_DEPTH, *args)

    def info(self, *args: Any) -> None:
        self.log(Severity.INFO, CALL_DEPTH, *args)

    def debug(self, *args: Any) -> None:
        self.log(Severity.DEBUG, CALL_DEPTH, *args)

    def debug2(self, *args: Any) -> None:
        self.log(Severity.DEBUG2, CALL_DEPTH, *args)

    def __repr__(self) -> str:
        return f"ProcessLogger(threshold={self._threshold.name}, sink={self._sink.name!r})"


__all__ = ["ProcessLogger"]
