import logging
import os
from logging.handlers import TimedRotatingFileHandler

LOG_DIR = os.getenv("SMA_TRADER_LOG_DIR", os.path.join("data", "logs"))
LOG_FILE = os.path.join(LOG_DIR, "sma_trader.log")


def get_logger(name: str = __name__) -> logging.Logger:
    """Per-module logger for the simulator: INFO run summaries on the console,
    DEBUG trade-by-trade detail in ``sma_trader.log`` under ``LOG_DIR``."""

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:  # avoid duplicate handlers
        os.makedirs(LOG_DIR, exist_ok=True)

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)

        # Daily file handler: rotate at midnight, keep a week
        file_handler = TimedRotatingFileHandler(LOG_FILE, when="midnight", interval=1, backupCount=7)
        file_handler.setLevel(logging.DEBUG)

        # Formatter
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        console_handler.setFormatter(formatter)
        file_handler.setFormatter(formatter)

        # Attach handlers
        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

    return logger
