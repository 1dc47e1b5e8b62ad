import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)
DEFAULT_LEVEL = "INFO"


def get_log_level() -> int:
    load_dotenv()
    name = os.getenv("CHANPERMS_LOG_LEVEL", DEFAULT_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning(f"unknown log level {name!r}, using {DEFAULT_LEVEL}")
        return logging.INFO
    return level


def setup_logs() -> None:
    levels = {"chanperms": get_log_level()}
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
