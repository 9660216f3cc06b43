import logging
import re

from aicodeview.config import settings

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s %(message)s"

_KEY_PARAM = re.compile(r"([?&]key=)[^&\s]+")


def get_logger(name: str) -> logging.Logger:
    """Module logger with a single stream handler at the configured level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(ch)
    logger.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))
    return logger


def mask_api_key(url: str) -> str:
    # ...?key=abc&x=1 -> ...?key=<REDACTED>&x=1
    return _KEY_PARAM.sub(r"\1<REDACTED>", url)
