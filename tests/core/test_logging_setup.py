"""Tests for loguru sink setup."""

from loguru import logger

from runplan.core.logger import setup_logger


def test_file_sink_writes_messages(tmp_path):
    """Test that a log file is created under missing directories and receives records."""
    log_file = tmp_path / "logs" / "runplan.log"
    setup_logger(level="INFO", log_file=str(log_file))
    try:
        logger.info("plan generated")
        logger.debug("not at this level")
    finally:
        # Drop the file sink so the handle is closed
        setup_logger(level="WARNING")

    content = log_file.read_text(encoding="utf-8")
    assert "INFO" in content
    assert "plan generated" in content
    assert "not at this level" not in content


def test_setup_replaces_previous_sinks(tmp_path):
    """Test that calling setup twice does not duplicate file output."""
    log_file = tmp_path / "runplan.log"
    setup_logger(level="INFO", log_file=str(log_file))
    setup_logger(level="INFO", log_file=str(log_file))
    try:
        logger.info("once")
    finally:
        setup_logger(level="WARNING")

    assert log_file.read_text(encoding="utf-8").count("once") == 1
