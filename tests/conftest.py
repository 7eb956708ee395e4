"""Pytest configuration for test isolation.

The CLI configures the package logger once per process (a handler bound to
the stream that was current at the time, plus ``propagate = False``). When
tests run in the same interpreter that state would leak into later tests and
hide records from ``caplog``. Environment overrides (``CSV2BEANCOUNT_*``)
would leak the same way.

To keep tests hermetic, an autouse fixture restores the package logger and
strips those variables for every test.
"""

from __future__ import annotations

import logging
import os

import pytest

import csv2beancount.logging_setup as logging_setup


@pytest.fixture(autouse=True)
def _isolate_logging_and_env(monkeypatch: pytest.MonkeyPatch):
    for key in list(os.environ):
        if key.startswith("CSV2BEANCOUNT_"):
            monkeypatch.delenv(key)

    logger = logging.getLogger("csv2beancount")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    logger.handlers[:] = saved[0]
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
    logging_setup._CONFIGURED = False
