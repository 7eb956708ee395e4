import io
import logging

import pytest

from csv2beancount.logging_setup import TRACE, configure_logging, get_logger


def test_trace_level_reaches_the_stream():
    stream = io.StringIO()
    configure_logging("trace", fmt="%(levelname)s %(message)s", stream=stream)

    get_logger("csv2beancount.rules").log(TRACE, "rules:check matched=%s", True)

    assert stream.getvalue() == "TRACE rules:check matched=True\n"


def test_level_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CSV2BEANCOUNT_LOG_LEVEL", "DEBUG")
    stream = io.StringIO()
    configure_logging(stream=stream)

    assert logging.getLogger("csv2beancount").level == logging.DEBUG


def test_default_level_is_warning_and_second_call_is_ignored():
    stream = io.StringIO()
    configure_logging(stream=stream, fmt="%(message)s")
    configure_logging("DEBUG", stream=io.StringIO())

    log = get_logger("csv2beancount.api")
    log.info("convert:done entries=%d", 3)
    log.warning("classify:amount_missing")

    assert stream.getvalue() == "classify:amount_missing\n"
