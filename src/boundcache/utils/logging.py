"""Logging setup for the boundcache command line tool."""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.WARNING, log_file: str | Path | None = None) -> None:
    """Set up logging for the command line tool.

    Existing root handlers are removed. Records go to ``log_file`` when given
    and to stderr for warnings and above.

    Args:
        level: Level for the boundcache loggers
        log_file: Path to the log file
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file is not None:
        file_handler = logging.FileHandler(filename=log_file, mode="a")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(logging.WARNING)
    root_logger.addHandler(stream_handler)

    root_logger.setLevel(logging.WARNING)
    logging.getLogger(name="boundcache").setLevel(level)

    logging.getLogger(name=__name__).info(
        f"Logging initialized at level: {logging.getLevelName(level)}"
    )
