from __future__ import annotations

import logging
from io import StringIO
from unittest.mock import patch

import excel_json.logging.init
from excel_json.logging.init import (
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    reset_logging,
    set_debug,
    setup_logging,
)


def _capturing_logger(name: str) -> tuple[logging.Logger, StringIO]:
    captured_output = StringIO()
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    handler = logging.StreamHandler(captured_output)
    handler.setLevel(logging.INFO)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False
    return logger, captured_output


def test_setup_logging_creates_logger_with_labeled_formatter():
    reset_logging()
    logger = setup_logging()

    assert logger.name == "excel_json"
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    handler = logger.handlers[0]
    assert isinstance(handler, logging.StreamHandler)
    assert isinstance(handler.formatter, LabeledFormatter)
    assert logger.propagate is False


def test_logging_labeled_prefixes():
    reset_logging()
    logger, captured_output = _capturing_logger("test_excel_json")

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "Test summary message")

    lines = captured_output.getvalue().strip().split("\n")
    assert lines == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY Test summary message",
    ]


def test_get_logger_returns_configured_logger():
    reset_logging()
    setup_logger = setup_logging()
    assert get_logger() is setup_logger


def test_setup_logging_idempotent():
    reset_logging()
    logger1 = setup_logging()
    logger2 = setup_logging()
    assert logger1 is logger2
    assert len(logger1.handlers) == 1


def test_module_loggers_share_application_handler():
    reset_logging()
    logger, captured_output = _capturing_logger("excel_json")
    excel_json.logging.init._logger = logger

    logging.getLogger("excel_json.services.rows").info("child message")
    assert captured_output.getvalue().strip() == "INFO child message"


def test_set_debug_lowers_levels():
    reset_logging()
    logger, captured_output = _capturing_logger("excel_json_debug_test")
    logger.debug("hidden")
    set_debug(logger)
    logger.debug("shown")
    assert logger.level == logging.DEBUG
    assert captured_output.getvalue().strip() == "DEBUG shown"


def test_summary_level_logging():
    reset_logging()
    logger = setup_logging()
    assert logging.getLevelName(SUMMARY_LEVEL) == "SUMMARY"
    with patch.object(logger, "_log") as mock_log:
        logger.log(SUMMARY_LEVEL, "sheets=1 rows=2 elapsed_sec=0.1")
        mock_log.assert_called_once()


def test_log_summary_convenience_function():
    reset_logging()
    logger, captured_output = _capturing_logger("excel_json")
    excel_json.logging.init._logger = logger

    log_summary("sheets=2 rows=150 elapsed_sec=2.5")

    assert captured_output.getvalue().strip() == "SUMMARY sheets=2 rows=150 elapsed_sec=2.5"
    reset_logging()
