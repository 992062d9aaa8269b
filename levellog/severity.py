#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
levellog ▸ Severity Levels & Level Filter
===============================================================================

Six fixed levels, lower value = more severe:

    FATAL=0 < ERROR=1 < WARNING=2 < INFO=3 < DEBUG=4 < DEBUG2=5

A message at *level* is admitted by a logger whose threshold is *threshold*
iff ``level <= threshold``. FATAL is therefore never filtered.

Known quirk
-----------
`severity_from_name` maps unknown tokens **and** the literal "FATAL" to
FATAL, so a textual "FATAL" cannot be told apart from a typo. Callers rely on
the silent default; keep it.
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any

from levellog.logger import DEBUG2_LEVEL

# Call-site depth used by the per-level methods: the frame three above the
# writer's `output` is the caller of `info()`/`error()`/...
CALL_DEPTH = 3


class Severity(IntEnum):
    """Log levels ordered by severity (lower = more severe)."""

    FATAL = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    DEBUG2 = 5


SEVERITY_NAMES: tuple[str, ...] = ("FATAL", "ERROR", "WARNING", "INFO", "DEBUG", "DEBUG2")

_FROM_NAME = {
    "DEBUG2": Severity.DEBUG2,
    "DEBUG": Severity.DEBUG,
    "INFO": Severity.INFO,
    "WARNING": Severity.WARNING,
    "WARN": Severity.WARNING,
    "ERROR": Severity.ERROR,
}

_TO_STDLIB = {
    Severity.FATAL: logging.CRITICAL,
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
    Severity.DEBUG2: DEBUG2_LEVEL,
}


def severity_from_name(name: str) -> Severity:
    """
    Resolve a case‑sensitive level token. Anything unrecognised is FATAL.
    """
    return _FROM_NAME.get(name, Severity.FATAL)


def name_from_severity(level: int) -> str:
    """
    Return the display name of *level*.

    Raises
    ------
    ValueError
        If *level* is not one of the six severities.
    """
    if isinstance(level, bool) or not isinstance(level, int) or not 0 <= level < len(SEVERITY_NAMES):
        raise ValueError(f"invalid severity: {level!r}")
    return SEVERITY_NAMES[level]


def clamp_severity(value: int) -> Severity:
    """Clamp an integer threshold into [FATAL, DEBUG2]."""
    if value > Severity.DEBUG2:
        return Severity.DEBUG2
    if value < Severity.FATAL:
        return Severity.FATAL
    return Severity(value)


def admits(level: int, threshold: int) -> bool:
    return level <= threshold


def format_body(level: int, args: tuple[Any, ...]) -> str:
    """``"<LEVELNAME> <args joined by spaces>\\n"``"""
    return " ".join([name_from_severity(level), *(str(a) for a in args)]) + "\n"


def to_stdlib_level(level: int) -> int:
    """Map a severity onto the stdlib `logging` level used by the shared sink."""
    return _TO_STDLIB[Severity(level)]


__all__ = [
    "CALL_DEPTH",
    "SEVERITY_NAMES",
    "Severity",
    "admits",
    "clamp_severity",
    "format_body",
    "name_from_severity",
    "severity_from_name",
    "to_stdlib_level",
]
