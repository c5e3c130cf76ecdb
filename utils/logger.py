import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = "musicat.log"
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 5

def log_dir() -> str:
    """
    MUSICAT_LOG_DIR is exported by config.setup_environment before the
    server starts; local runs without it log next to the project.
    """
    configured = os.environ.get("MUSICAT_LOG_DIR")
    if configured:
        return configured
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_dir, "logs")

def log_level() -> int:
    # MUSICAT_LOG_LEVEL=DEBUG shows the crawler's per-directory lines
    name = os.environ.get("MUSICAT_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO

def _file_handler(directory: str, formatter: logging.Formatter, level: int) -> Optional[logging.Handler]:
    try:
        os.makedirs(directory, exist_ok=True)
        handler = RotatingFileHandler(
            os.path.join(directory, LOG_FILE_NAME),
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8'
        )
    except OSError as e:
        # read-only install: console only
        print(f"Failed to set up file logging in {directory}: {e}", file=sys.stderr)
        return None
    handler.setFormatter(formatter)
    handler.setLevel(level)
    return handler

def get_logger(name: str) -> logging.Logger:
    """
    Logger for a musicat module: rotating file under log_dir() plus the
    console. Handlers are attached the first time a name is requested.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = log_level()
    formatter = logging.Formatter(LOG_FORMAT)
    logger.setLevel(level)

    file_handler = _file_handler(log_dir(), formatter, level)
    if file_handler is not None:
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    logger.addHandler(console_handler)
    return logger
