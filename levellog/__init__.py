#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
levellog – Package Initialisation
===============================================================================

Exports
-------
* Severity, severity_from_name(), name_from_severity()
* FileLogger      – owns a file / stdout destination, supports rotate()
* ProcessLogger   – writes through the shared stdlib sink
* Logger          – the Protocol both satisfy
* FatalLogged, DestinationOpenError, LevelLogError
* __version__ / get_version()
* get_logger()    – the package's own diagnostics logger

Quick start
-----------
    from levellog import FileLogger, Severity

    lg = FileLogger(Severity.WARNING, "/var/log/app.log")
    lg.info("not written")
    lg.error("disk full on", "/dev/sda1")
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

from levellog.base import Logger
from levellog.errors import DestinationOpenError, FatalLogged, LevelLogError
from levellog.file_logger import FileLogger
from levellog.logger import get_logger
from levellog.process_logger import ProcessLogger
from levellog.severity import (
    SEVERITY_NAMES,
    Severity,
    name_from_severity,
    severity_from_name,
)

_ROOT_LOGGER = get_logger(None)

# -----------------------------------------------------------------------------
# Version helpers
# -----------------------------------------------------------------------------
try:
    __version__: str = _pkg_version("levellog")
except PackageNotFoundError:
    # Keep this fallback in sync with pyproject.toml
    __version__ = "0.1.0"
    _ROOT_LOGGER.debug("Package metadata not found – using fallback version %s", __version__)


def get_version() -> str:
    """Return the package version string."""
    return __version__


__all__ = [
    "__version__",
    "get_version",
    "get_logger",
    "Logger",
    "FileLogger",
    "ProcessLogger",
    "Severity",
    "SEVERITY_NAMES",
    "severity_from_name",
    "name_from_severity",
    "LevelLogError",
    "DestinationOpenError",
    "FatalLogged",
]
