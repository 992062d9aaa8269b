#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
levellog ▸ Configuration (environment + JSON‑Schema validated file)
===============================================================================

Purpose
-------
Turn environment variables and/or a small JSON file into a ready logger.

Environment
-----------
    LEVELLOG_LEVEL     – threshold name (default INFO; unknown → FATAL)
    LEVELLOG_FILE      – destination path or "stdout" (default stdout)
    LEVELLOG_VARIANT   – "file" (default) or "process"
    LEVELLOG_CONFIG    – optional JSON config file path

JSON file
---------
    {"level": "WARN", "destination": "/var/log/app.log",
     "variant": "file", "rotate_signal": "SIGHUP"}

Values from the file override the environment. The merged result is checked
against the schema bundled at `levellog/schema.json`.

Public API
----------
* `validate_config(payload)`  – parse + validate, returns the dict
* `load_config(path=None, env=None)` – returns `LoggerConfig`
* `build_logger(config)` – returns `FileLogger` or `ProcessLogger`

Raises `jsonschema.ValidationError` on schema violations and
`json.JSONDecodeError` on malformed JSON.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from jsonschema import Draft7Validator, ValidationError

from levellog.base import Logger
from levellog.file_logger import STDOUT, FileLogger
from levellog.logger import get_logger
from levellog.process_logger import ProcessLogger
from levellog.severity import Severity, severity_from_name
from levellog.signals import install_rotation_handler, resolve_signal

log = get_logger(__name__)

# Environment keys → config keys
_ENV_KEYS = {
    "LEVELLOG_LEVEL": "level",
    "LEVELLOG_FILE": "destination",
    "LEVELLOG_VARIANT": "variant",
}


# -----------------------------------------------------------------------------
# Schema (loaded once at import time)
# -----------------------------------------------------------------------------
def _load_schema() -> Dict[str, Any]:
    """
    Load the bundled schema from the installed package.

    Raises
    ------
    SystemExit
        If the schema cannot be located or decoded (broken install).
    """
    try:
        with resources.files("levellog").joinpath("schema.json").open(encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError as exc:  # pragma: no cover
        log.critical("schema.json not found inside package: %s", exc)
        raise SystemExit(1) from exc
    except json.JSONDecodeError as exc:  # pragma: no cover
        log.critical("schema.json is invalid JSON: %s", exc)
        raise SystemExit(1) from exc


SCHEMA: Dict[str, Any] = _load_schema()
Draft7Validator.check_schema(SCHEMA)
_VALIDATOR = Draft7Validator(SCHEMA)


def pretty_pointer(exc: ValidationError) -> str:
    """Human‑friendly location of the failing field ("$.level")."""
    return ".".join(["$", *(str(p) for p in exc.path)])


# -----------------------------------------------------------------------------
# Model
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class LoggerConfig:
    level: Severity = Severity.INFO
    destination: str = STDOUT
    variant: str = "file"
    rotate_signal: Optional[str] = None


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------
def validate_config(payload: str | bytes | Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate **payload** (dict/str/bytes) against the bundled schema.

    Returns
    -------
    dict
        Parsed JSON object.
    """
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8")
    if isinstance(payload, str):
        data = json.loads(payload)
    elif isinstance(payload, Mapping):
        data = dict(payload)
    else:
        raise TypeError(f"Unsupported payload type: {type(payload).__name__}")

    _VALIDATOR.validate(data)
    return data


def load_config(path: str | os.PathLike[str] | None = None, env: Optional[Mapping[str, str]] = None) -> LoggerConfig:
    """
    Merge environment values and an optional JSON file into a `LoggerConfig`.

    *path* defaults to $LEVELLOG_CONFIG. *env* defaults to os.environ.
    """
    env = os.environ if env is None else env

    merged: Dict[str, Any] = {}
    for env_key, key in _ENV_KEYS.items():
        value = env.get(env_key)
        if value is not None and value.strip():
            merged[key] = value.strip()

    config_path = path if path is not None else env.get("LEVELLOG_CONFIG")
    if config_path:
        text = Path(config_path).expanduser().read_text(encoding="utf-8")
        merged.update(validate_config(text))
        log.debug("Loaded logger config from %s", config_path)

    validate_config(merged)

    return LoggerConfig(
        level=severity_from_name(merged["level"]) if "level" in merged else Severity.INFO,
        destination=merged.get("destination", STDOUT),
        variant=merged.get("variant", "file"),
        rotate_signal=merged.get("rotate_signal"),
    )


def build_logger(config: LoggerConfig) -> Logger:
    """
    Construct the configured logger variant.

    A `DestinationOpenError` from the file variant propagates unchanged. An
    unknown `rotate_signal` raises ValueError before any file is opened.
    """
    if config.rotate_signal:
        resolve_signal(config.rotate_signal)

    logger: Logger
    if config.variant == "process":
        logger = ProcessLogger(config.level)
    else:
        logger = FileLogger(config.level, config.destination)

    if config.rotate_signal:
        install_rotation_handler(logger, config.rotate_signal)
    return logger


__all__ = ["LoggerConfig", "SCHEMA", "build_logger", "load_config", "pretty_pointer", "validate_config"]
