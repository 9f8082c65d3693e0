from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler

from retail_lite.config import Settings

LOGGER_NAME = "retail_lite"
LOG_FILE_NAME = "retail.log"


def setup_logger(settings: Settings) -> logging.Logger:
    """
    Attach console and file output to the ``retail_lite`` logger, so the
    store's ``[order=N]`` audit lines from every submodule land in
    ``settings.log_dir/retail.log`` (rotated at midnight,
    ``settings.log_backup_count`` old files kept).

    Handlers are added once per process; later calls only update the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)

    if logger.handlers:
        return logger

    settings.log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = TimedRotatingFileHandler(
        filename=settings.log_dir / LOG_FILE_NAME,
        when="midnight",
        backupCount=settings.log_backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

    # в консоли только сообщение, как у basicConfig в run_order.py
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    logger.propagate = False

    logger.debug("logging to %s (keep %d days)", settings.log_dir / LOG_FILE_NAME, settings.log_backup_count)
    return logger
