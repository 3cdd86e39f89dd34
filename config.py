# config.py
import logging


class Config:
    SECRET_KEY = "dev-secret"  # signs the session cookie that carries flashed booking errors
    RECEIPT_DIR = None         # None = process working directory
    MAX_ROOMS = 5
    MAX_NIGHTS = 5
    CHECK_IN_MINUTES = (0, 15, 30, 45)
    LOG_LEVEL = "INFO"


def configure_logging(level="INFO"):
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        ))
        root.addHandler(handler)
    root.setLevel(level)
