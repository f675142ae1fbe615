import logging
import sys
import time

LOGGER_NAME = "rolling_hash"


def setup_logger(level=logging.INFO):
    """Setup application logger"""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # main() may run more than once in a process
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    logger_formatter = logging.Formatter("%(name)s - %(levelname)s - %(asctime)s - %(message)s")
    logger_formatter.converter = time.gmtime

    logger_handler = logging.StreamHandler(sys.stderr)
    logger_handler.setLevel(level)
    logger_handler.setFormatter(logger_formatter)
    logger.addHandler(logger_handler)
    return logger


def get_logger():
    """Get an application logger"""
    return logging.getLogger(LOGGER_NAME)
