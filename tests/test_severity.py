"""
===============================================================================
Unit‑tests ▸ severity ordering, name lookup and clamping
===============================================================================
"""
from __future__ import annotations

import logging

import pytest

from levellog.logger import DEBUG2_LEVEL
from levellog.severity import (
    SEVERITY_NAMES,
    Severity,
    admits,
    clamp_severity,
    format_body,
    name_from_severity,
    severity_from_name,
    to_stdlib_level,
)

_ORDER = [Severity.FATAL, Severity.ERROR, Severity.WARNING, Severity.INFO, Severity.DEBUG, Severity.DEBUG2]


@pytest.mark.parametrize("lower, higher", list(zip(_ORDER, _ORDER[1:])))
def test_levels_are_strictly_ordered(lower: Severity, higher: Severity) -> None:
    assert lower < higher


def test_numeric_values_are_fixed() -> None:
    assert [int(s) for s in _ORDER] == [0, 1, 2, 3, 4, 5]
    assert list(SEVERITY_NAMES) == ["FATAL", "ERROR", "WARNING", "INFO", "DEBUG", "DEBUG2"]


@pytest.mark.parametrize("name", SEVERITY_NAMES)
def test_name_round_trip(name: str) -> None:
    assert name_from_severity(severity_from_name(name)) == name


def test_warn_alias() -> None:
    assert severity_from_name("WARN") is Severity.WARNING


@pytest.mark.parametrize("token", ["bogus", "FATAL", "", "info", "Debug", " ERROR"])
def test_unknown_and_fatal_names_default_to_fatal(token: str) -> None:
    # Lookup is case-sensitive and exact; FATAL is indistinguishable from unknown.
    assert severity_from_name(token) is Severity.FATAL


@pytest.mark.parametrize("bad", [-1, 6, 99, "INFO", 2.0, None, True])
def test_name_from_out_of_range_fails_fast(bad) -> None:
    with pytest.raises(ValueError):
        name_from_severity(bad)


@pytest.mark.parametrize(
    "value, expected",
    [(-5, Severity.FATAL), (0, Severity.FATAL), (3, Severity.INFO), (5, Severity.DEBUG2), (42, Severity.DEBUG2)],
)
def test_clamp(value: int, expected: Severity) -> None:
    assert clamp_severity(value) is expected


def test_admits_uses_less_or_equal() -> None:
    assert admits(Severity.ERROR, Severity.ERROR)
    assert admits(Severity.FATAL, Severity.FATAL)
    assert not admits(Severity.WARNING, Severity.ERROR)
    # FATAL passes every threshold
    assert all(admits(Severity.FATAL, t) for t in _ORDER)


def test_format_body_joins_with_spaces() -> None:
    assert format_body(Severity.WARNING, ("disk", 91, "%")) == "WARNING disk 91 %\n"
    assert format_body(Severity.INFO, ()) == "INFO\n"


def test_stdlib_mapping() -> None:
    assert to_stdlib_level(Severity.FATAL) == logging.CRITICAL
    assert to_stdlib_level(Severity.WARNING) == logging.WARNING
    assert to_stdlib_level(Severity.DEBUG2) == DEBUG2_LEVEL
    assert logging.getLevelName(DEBUG2_LEVEL) == "DEBUG2"
