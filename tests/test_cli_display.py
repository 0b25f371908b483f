"""Tests for logger setup."""

import logging

from code_evolve.cli_display import setup_logger


def _file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def test_setup_logger_adds_one_handler_per_directory(tmp_path):
    logger = logging.getLogger("code_evolve")
    before = len(_file_handlers(logger))
    try:
        setup_logger(str(tmp_path / "logs"))
        setup_logger(str(tmp_path / "logs"))
        setup_logger(str(tmp_path / "logs"))

        assert len(_file_handlers(logger)) == before + 1
    finally:
        for handler in _file_handlers(logger)[before:]:
            logger.removeHandler(handler)
            handler.close()


def test_setup_logger_writes_to_log_dir(tmp_path):
    logger = setup_logger(str(tmp_path / "logs"))
    try:
        logger.info("hello")
        logs = list((tmp_path / "logs").glob("code_evolve_*.log"))

        assert len(logs) == 1
    finally:
        for handler in _file_handlers(logger):
            if str(tmp_path) in handler.baseFilename:
                logger.removeHandler(handler)
                handler.close()
