import logging
from pathlib import Path

LOGGER_NAME = "figma_genui"
LOG_FORMAT = "%(asctime)s - %(message)s"


def configure_logging(log_file: str | Path, level: int = logging.DEBUG) -> logging.Logger:
    """Append timestamped lines for the ``figma_genui`` package to ``log_file``.

    Stdout is left alone because the stdio transport owns it.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    path = str(Path(log_file).resolve())
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == path:
            return logger

    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
