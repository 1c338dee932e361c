import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter(LOG_FORMAT))


def setup_logging():
    """Configure the root logger from LOG_LEVEL (default INFO).

    Safe to call more than once; the console handler is only added the first time.
    """
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    numeric_level = getattr(logging, log_level, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    if console_handler not in root_logger.handlers:
        root_logger.addHandler(console_handler)

    # the driver is chatty at DEBUG
    logging.getLogger("pymongo").setLevel(max(numeric_level, logging.INFO))
