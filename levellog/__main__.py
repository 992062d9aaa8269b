#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
levellog ▸ Module Entry Point  (python -m levellog)
===============================================================================

* Fast `--version` path that avoids importing the CLI.
* Everything else is delegated to `levellog.cli:main`.
"""
from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version as _pkg_version


def _parse_cli(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    """
    Extract global flags (currently just --version) and leave the rest
    for the real CLI driver to parse.
    """
    parser = argparse.ArgumentParser(prog="python -m levellog", add_help=False)
    parser.add_argument("--version", action="store_true", help="Print package version and exit.")
    return parser.parse_known_args(argv)


def _resolve_version() -> str:
    """
    Resolve the installed package version from distribution metadata, falling
    back to `levellog.__version__` for source checkouts.
    """
    try:
        return _pkg_version("levellog")
    except PackageNotFoundError:
        from levellog import __version__

        return __version__


def main() -> None:
    args, remaining = _parse_cli(sys.argv[1:])

    if args.version:
        print(_resolve_version())
        sys.exit(0)

    from levellog.cli import main as cli_main

    sys.exit(cli_main(remaining))


if __name__ == "__main__":
    main()
