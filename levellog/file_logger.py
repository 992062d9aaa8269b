#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
levellog ▸ FileLogger (owned destination, reopenable)
===============================================================================

Purpose
-------
A leveled logger that owns its destination: standard output, or a file opened
for append (created ``0o666`` minus the umask).

Rotation
--------
`FileLogger.rotate` reopens the original path and swaps the (stream, writer)
pair in one assignment. The previous stream is abandoned, not closed: writes
already holding it finish there, new writes go to the fresh file. This is the
"copy/move then signal" contract external tools such as logrotate expect.

* Success → "Rotated log file" is written through the **new** writer.
* Failure → the old pair stays active and the error is written through it.
* Rotation never raises.

Failure modes
-------------
* Construction fails fast with `DestinationOpenError` when the file cannot be
  opened.
* ``fatal()`` writes, flushes (and fsyncs owned files), then raises
  `FatalLogged`.
"""
from __future__ import annotations

import os
import sys
import threading
from typing import Any, NamedTuple, Optional, TextIO

from levellog.errors import DestinationOpenError, FatalLogged
from levellog.logger import get_logger
from levellog.severity import (
    CALL_DEPTH,
    Severity,
    admits,
    clamp_severity,
    format_body,
    name_from_severity,
)
from levellog.writer import LineWriter

log = get_logger(__name__)

STDOUT = "stdout"


class _Destination(NamedTuple):
    stream: TextIO
    writer: LineWriter


def _is_stdout(path: str) -> bool:
    return path == "" or path == STDOUT


def _open_destination(path: str) -> TextIO:
    """
    Open *path* for appending (create if missing) or return stdout for the
    sentinel. Raises OSError on failure.
    """
    if _is_stdout(path):
        return sys.stdout
    fd = os.open(path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, 0o666)
    return os.fdopen(fd, "a", encoding="utf-8")


class FileLogger:
    """
    Leveled logger writing to a file or standard output.

    Parameters
    ----------
    threshold : int
        Most verbose severity admitted; clamped into [FATAL, DEBUG2].
    path : str
        File path, or "" / "stdout" for standard output.
    """

    def __init__(self, threshold: int, path: str = STDOUT):
        self._threshold = clamp_severity(threshold)
        self._path = path
        try:
            stream = _open_destination(path)
        except OSError as exc:
            log.error("Cannot open log destination %s: %s", path, exc)
            raise DestinationOpenError(path, exc) from exc
        self._dest = _Destination(stream, LineWriter(stream))
        self._rotate_lock = threading.Lock()
        log.debug("FileLogger ready (threshold=%s, destination=%s)", self._threshold.name, path or STDOUT)

    # ─────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────
    def log_level(self) -> Severity:
        return self._threshold

    def log_level_string(self) -> str:
        return name_from_severity(self._threshold)

    def get_log_writer(self) -> Optional[TextIO]:
        return self._dest.stream

    @property
    def destination(self) -> str:
        return self._path

    # ─────────────────────────────────────────────────────────────────────
    # Rotation
    # ─────────────────────────────────────────────────────────────────────
    def rotate(self) -> None:
        """Reopen the destination file; no-op on standard output."""
        if _is_stdout(self._path):
            return
        with self._rotate_lock:
            current = self._dest
            try:
                stream = _open_destination(self._path)
            except OSError as exc:
                log.warning("Rotation of %s failed: %s", self._path, exc)
                current.writer.output(2, f"Could not rotate log file, error was: {exc}")
                return
            self._dest = _Destination(stream, LineWriter(stream))
            self._dest.writer.output(2, "Rotated log file")

    # ─────────────────────────────────────────────────────────────────────
    # Writing
    # ─────────────────────────────────────────────────────────────────────
    def output(self, calldepth: int, s: str) -> None:
        self._dest.writer.output(calldepth + 1, s)

    def log(self, level: int, depth: int, *args: Any) -> None:
        if admits(level, self._threshold):
            self._dest.writer.output(depth, format_body(level, args))

    def fatal(self, *args: Any) -> None:
        self.log(Severity.FATAL, CALL_DEPTH, *args)
        self._sync()
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
        """Even more debug."""
        self.log(Severity.DEBUG2, CALL_DEPTH, *args)

    def _sync(self) -> None:
        dest = self._dest
        dest.writer.flush()
        if not _is_stdout(self._path):
            os.fsync(dest.stream.fileno())

    def __repr__(self) -> str:
        return f"FileLogger(threshold={self._threshold.name}, destination={self._path or STDOUT!r})"


__all__ = ["FileLogger", "STDOUT"]
