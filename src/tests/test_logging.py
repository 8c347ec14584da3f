import logging
import pytest
from unittest.mock import MagicMock

from reporting.core.logging_config import NamespaceFilter, parse_namespaces

SERVICE = "reporting.features.transactions.service"
SERIES = "reporting.features.transactions.series"


@pytest.fixture
def logging_env():
    """
    A pytest fixture to set up and tear down a controlled logging environment for tests.

    Yields:
        MagicMock: A mock logging handler to inspect calls and logged messages.
    """
    test_handler = MagicMock()
    test_handler.level = logging.NOTSET
    test_handler.filters = []
    test_handler.handleError = MagicMock()

    def add_filter(filter_obj):
        test_handler.filters.append(filter_obj)
        return filter_obj

    # Define handle method that applies filters and tracks accepted records
    accepted_records = []
    def handle(record):
        for f in test_handler.filters:
            if not f.filter(record):
                return False
        accepted_records.append(record)
        return True

    test_handler.addFilter = MagicMock(side_effect=add_filter)
    test_handler.handle = MagicMock(side_effect=handle)
    test_handler.accepted_records = accepted_records

    loggers_to_manage = ["reporting", "reporting.features.transactions", SERVICE, SERIES, "reporting.main"]
    saved = {
        name: (logging.getLogger(name).handlers[:], logging.getLogger(name).level)
        for name in loggers_to_manage
    }
    for name in loggers_to_manage:
        logger = logging.getLogger(name)
        logger.handlers = []
        logger.setLevel(logging.NOTSET)

    yield test_handler

    # Put back whatever logging_config installed
    for name, (handlers, level) in saved.items():
        logger = logging.getLogger(name)
        logger.handlers = handlers
        logger.setLevel(level)


def _setup_logger(name, level, handler_to_add):
    """Helper function to configure a logger for testing."""
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = [handler_to_add]
    logger.propagate = True
    return logger

def get_handled_messages(test_handler: MagicMock) -> list[str]:
    return [
        f"{record.name}:{record.levelname}:{record.getMessage()}"
        for record in test_handler.accepted_records
    ]

def test_default_level_propagation(logging_env):
    _setup_logger("reporting", logging.INFO, logging_env)

    logging.getLogger(SERVICE).debug("Resolved range")
    logging.getLogger(SERIES).warning("Unsorted aggregates")

    handled_messages = get_handled_messages(logging_env)
    assert f"{SERVICE}:DEBUG:Resolved range" not in handled_messages
    assert f"{SERIES}:WARNING:Unsorted aggregates" in handled_messages

def test_namespace_specific_level(logging_env):
    _setup_logger("reporting", logging.INFO, logging_env)
    logging.getLogger("reporting.features.transactions").setLevel(logging.DEBUG)

    logging.getLogger(SERVICE).debug("Resolved range")
    logging.getLogger("reporting.main").debug("Startup detail")

    handled_messages = get_handled_messages(logging_env)
    assert f"{SERVICE}:DEBUG:Resolved range" in handled_messages
    assert "reporting.main:DEBUG:Startup detail" not in handled_messages

def test_namespace_filter_allow(logging_env):
    _setup_logger("reporting", logging.DEBUG, logging_env)
    logging_env.addFilter(NamespaceFilter(allowed_namespaces=["reporting.features"]))

    logging.getLogger(SERVICE).info("Report built")
    logging.getLogger("reporting.main").info("Root endpoint accessed")

    handled_messages = get_handled_messages(logging_env)
    assert f"{SERVICE}:INFO:Report built" in handled_messages
    assert "reporting.main:INFO:Root endpoint accessed" not in handled_messages

def test_namespace_filter_allow_all_if_empty(logging_env):
    _setup_logger("reporting", logging.DEBUG, logging_env)
    logging_env.addFilter(NamespaceFilter(allowed_namespaces=[]))

    logging.getLogger(SERVICE).info("Report built")
    logging.getLogger("reporting.main").info("Root endpoint accessed")

    handled_messages = get_handled_messages(logging_env)
    assert f"{SERVICE}:INFO:Report built" in handled_messages
    assert "reporting.main:INFO:Root endpoint accessed" in handled_messages

@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, []),
        ("", []),
        ("reporting.features", ["reporting.features"]),
        (" reporting.features , reporting.main,,", ["reporting.features", "reporting.main"]),
    ],
)
def test_parse_namespaces(raw, expected):
    assert parse_namespaces(raw) == expected
