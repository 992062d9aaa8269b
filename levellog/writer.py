#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
levellog ▸ Line Writer
===============================================================================

Purpose
-------
Write one complete, prefixed line per call to a text stream:

    <short file>:<line> YYYY/MM/DD HH:MM:SS <text>\\n

Timestamps are UTC. The file/line pair is taken from the frame *calldepth*
levels above `LineWriter.output` (0 = `output` itself, 1 = its caller), so
wrappers can attribute the line to the code that actually asked to log.

Concurrency
-----------
Every write and its flush happen under one lock, so lines from concurrent
threads never interleave. Signal handlers must not call `output`; see
`levellog.signals`.
"""
from __future__ import annotations

import os
import sys
import threading
import time
from typing import TextIO, Tuple

_DATE_TIME_FMT = "%Y/%m/%d %H:%M:%S"
_UNKNOWN_SITE: Tuple[str, int] = ("???", 0)


class LineWriter:
    """Formatting writer bound to a single text stream."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        return self._stream

    def output(self, calldepth: int, s: str) -> None:
        # Resolve the frame here, not in a helper, so depth counts from `output`.
        try:
            frame = sys._getframe(calldepth)
            site = (os.path.basename(frame.f_code.co_filename), frame.f_lineno)
        except ValueError:
            site = _UNKNOWN_SITE

        stamp = time.strftime(_DATE_TIME_FMT, time.gmtime())
        line = f"{site[0]}:{site[1]} {stamp} {s}"
        if not line.endswith("\n"):
            line += "\n"

        with self._lock:
            self._stream.write(line)
            self._stream.flush()

    def flush(self) -> None:
        with self._lock:
            self._stream.flush()


__all__ = ["LineWriter"]
