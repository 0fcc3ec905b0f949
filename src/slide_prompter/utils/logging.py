import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(name="SlidePrompter", level=logging.INFO, log_file: Optional[Path] = None):
    """Configures the application-wide logger, optionally mirroring to a file."""
    formatter = logging.Formatter(LOG_FORMAT)

    # Root carries the handlers; module loggers propagate into it.
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(formatter)
        root_logger.addHandler(console)

    for handler in root_logger.handlers:
        handler.setLevel(level)
        if handler.formatter is None:
            handler.setFormatter(formatter)

    if log_file is not None:
        log_file = Path(log_file)
        already_attached = any(
            isinstance(h, logging.FileHandler) and Path(h.baseFilename) == log_file.resolve()
            for h in root_logger.handlers
        )
        if not already_attached:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = True
    return logger


def get_logger(name="SlidePrompter"):
    return logging.getLogger(name)
