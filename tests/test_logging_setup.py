import logging
from pathlib import Path

from insureassist.utils.logging_setup import configure_logging


def test_configure_logging_writes_to_file(tmp_path: Path) -> None:
    package_logger = logging.getLogger("insureassist")
    saved_handlers = package_logger.handlers[:]
    saved_level = package_logger.level
    package_logger.handlers.clear()
    try:
        log_file = tmp_path / "insureassist.log"
        logger = configure_logging("warning", log_file=str(log_file))
        logging.getLogger("insureassist.gemini_client").error("request failed")
        logging.getLogger("insureassist.gemini_client").info("not written")
        logger.handlers[0].flush()
        data = log_file.read_text()
        assert "request failed" in data
        assert "not written" not in data
    finally:
        for handler in package_logger.handlers:
            handler.close()
        package_logger.handlers[:] = saved_handlers
        package_logger.setLevel(saved_level)
