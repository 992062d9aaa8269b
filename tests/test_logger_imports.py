#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
===============================================================================
Diagnostics logger tests
===============================================================================

Goals
-----
* `levellog.get_logger` and `levellog.logger.get_logger` return the *same*
  logger object for a given name.
* Repeated calls must **not** duplicate handlers (idempotent configuration).
* The diagnostics tree and the shared sink stay separate.
"""
from __future__ import annotations

import logging

from levellog import get_logger as pkg_get_logger
from levellog.logger import get_logger, shared_sink


def test_same_logger_instance_for_same_name() -> None:
    name = "levellog.test.logger"
    a = get_logger(name)
    b = pkg_get_logger(name)

    assert isinstance(a, logging.Logger)
    assert a is b


def test_idempotent_handlers() -> None:
    root = get_logger()
    before = len(root.handlers)

    for _ in range(3):
        get_logger()
        pkg_get_logger("levellog.test.idempotent")

    assert len(root.handlers) == before == 1
    assert get_logger("levellog.test.idempotent").handlers == []


def test_diagnostics_do_not_reach_shared_sink() -> None:
    root = get_logger()
    sink = shared_sink()
    assert root.propagate is False
    assert sink.propagate is False
    assert not set(root.handlers) & set(sink.handlers)


def test_sink_name_keeps_sink_detached() -> None:
    sink = shared_sink()
    assert get_logger("levellog.process") is sink
    assert pkg_get_logger("levellog.process") is sink
    assert sink.propagate is False
