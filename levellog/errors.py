#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
levellog ▸ Exceptions

* `LevelLogError`         – base for ordinary, catchable errors.
* `DestinationOpenError`  – a FileLogger could not open its destination.
* `FatalLogged`           – raised by ``fatal()`` after the line is written.
"""
from __future__ import annotations


class LevelLogError(Exception):
    """Base class for levellog errors."""


class DestinationOpenError(LevelLogError):
    """The log destination could not be opened; no logger is returned."""

    def __init__(self, path: str, reason: BaseException):
        super().__init__(f"Cannot instantiate logger with file {path}: {reason}")
        self.path = path
        self.reason = reason


class FatalLogged(SystemExit):
    """
    Log‑then‑abort signal.

    Derives from SystemExit (exit status 1) so an uncaught instance ends the
    interpreter and ``except Exception`` handlers do not swallow it.
    """

    def __init__(self, message: str = "Fatal error occurred"):
        super().__init__(1)
        self.message = message

    def __str__(self) -> str:
        return self.message


__all__ = ["LevelLogError", "DestinationOpenError", "FatalLogged"]
