#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
levellog ▸ Command Line Interface
===============================================================================

Subcommands
-----------
• emit       – write one leveled line through a configured logger
• levels     – list the severity names, most severe first
• validate   – check a JSON config file against the bundled schema
• schema     – print the bundled JSON schema
• version    – print package version

Examples
--------
  # Write an ERROR line to a file, threshold WARNING
  levellog emit --threshold WARNING --file /tmp/app.log --level ERROR disk full

  # Threshold and destination from the environment / a config file
  LEVELLOG_LEVEL=DEBUG levellog emit --level DEBUG "cache warmed"
  levellog emit --config ./levellog.json --level INFO started

  # FATAL writes the line and exits with status 1
  levellog emit --level FATAL "cannot continue"
"""
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from typing import Optional

from jsonschema import ValidationError

from levellog import get_version
from levellog.config import SCHEMA, build_logger, load_config, pretty_pointer, validate_config
from levellog.errors import LevelLogError
from levellog.logger import get_logger
from levellog.severity import SEVERITY_NAMES, Severity, severity_from_name

log = get_logger(__name__)

# writer.output → logger.log → cmd_emit
_EMIT_DEPTH = 2


# ─────────────────────────────────────────────────────────────────────────────
# Subcommand handlers
# ─────────────────────────────────────────────────────────────────────────────

def cmd_emit(args: argparse.Namespace) -> int:
    """
    Build a logger from config + flags and write one line.
    """
    cfg = load_config(args.config)
    # Signal wiring makes no sense for a one-shot command.
    cfg = replace(cfg, rotate_signal=None)
    if args.threshold:
        cfg = replace(cfg, level=severity_from_name(args.threshold))
    if args.file is not None:
        cfg = replace(cfg, destination=args.file)
    if args.process:
        cfg = replace(cfg, variant="process")

    logger = build_logger(cfg)
    level = severity_from_name(args.level)
    if level == Severity.FATAL:
        logger.fatal(*args.message)
    logger.log(level, _EMIT_DEPTH, *args.message)
    return 0


def cmd_levels(_args: argparse.Namespace) -> int:
    for name in SEVERITY_NAMES:
        print(name)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    """
    Validate a JSON config file.
    """
    try:
        with open(args.file, "r", encoding="utf-8") as fh:
            payload = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Failed to read %s: %s", args.file, exc)
        return 1

    try:
        validate_config(payload)
    except ValidationError as exc:
        log.error("Config invalid at %s: %s", pretty_pointer(exc), exc.message)
        return 1
    except json.JSONDecodeError as exc:
        log.error("Config is not valid JSON: %s", exc)
        return 1

    print("✓ Config is valid.")
    return 0


def cmd_schema(_args: argparse.Namespace) -> int:
    print(json.dumps(SCHEMA, indent=2, ensure_ascii=False))
    return 0


def cmd_version(_args: argparse.Namespace) -> int:
    print(get_version())
    return 0


# ─────────────────────────────────────────────────────────────────────────────
# Argument parser
# ─────────────────────────────────────────────────────────────────────────────

def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="levellog",
        description="levellog – leveled logging to a file or stdout",
    )
    p.add_argument("--version", action="store_true", help="Print package version and exit.")

    sub = p.add_subparsers(dest="cmd", metavar="command")

    pe = sub.add_parser("emit", help="Write one leveled line")
    pe.add_argument("message", nargs="+", help="Words of the message (joined by spaces).")
    pe.add_argument(
        "--level",
        default="INFO",
        choices=[*SEVERITY_NAMES, "WARN"],
        help="Severity of the line (default: INFO).",
    )
    pe.add_argument("--threshold", help="Logger threshold (default: $LEVELLOG_LEVEL or INFO).")
    pe.add_argument("--file", help="Destination path or 'stdout' (default: $LEVELLOG_FILE or stdout).")
    pe.add_argument("--config", help="JSON config file (default: $LEVELLOG_CONFIG).")
    pe.add_argument("--process", action="store_true", help="Write through the shared process sink.")
    pe.set_defaults(func=cmd_emit)

    pl = sub.add_parser("levels", help="List severity names, most severe first")
    pl.set_defaults(func=cmd_levels)

    pv = sub.add_parser("validate", help="Validate a JSON config file")
    pv.add_argument("file", help="Path to the config file.")
    pv.set_defaults(func=cmd_validate)

    ps = sub.add_parser("schema", help="Print the bundled JSON schema")
    ps.set_defaults(func=cmd_schema)

    pvrs = sub.add_parser("version", help="Print package version")
    pvrs.set_defaults(func=cmd_version)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    try:
        parser = _parser()
        args = parser.parse_args(argv)

        if getattr(args, "version", False):
            print(get_version())
            return 0

        if not hasattr(args, "func"):
            parser.print_help()
            return 2

        return int(args.func(args))
    except KeyboardInterrupt:
        log.info("Interrupted by user (Ctrl‑C).")
        return 130
    except SystemExit as exc:
        # FatalLogged and argparse errors carry their own exit codes.
        return int(exc.code) if isinstance(exc.code, int) else 1
    except (LevelLogError, ValidationError, OSError, ValueError) as exc:
        # ValueError covers JSONDecodeError, UnicodeDecodeError and unknown signals.
        log.error("%s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
