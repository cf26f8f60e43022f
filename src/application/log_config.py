"""Loguru setup for command line runs."""

import sys

from loguru import logger
from tqdm import tqdm

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> [<level>{level}</level>]: {message}"


def configure_logging(level: str = "INFO", *, progress_aware: bool = False) -> int:
    """
    Replace loguru's default handler with the report format.

    With progress_aware, records go through tqdm.write so they do not
    break an active progress bar.
    """
    logger.remove()

    if progress_aware:
        return logger.add(
            lambda message: tqdm.write(message, end="", file=sys.stderr),
            level=level.upper(),
            format=LOG_FORMAT,
            colorize=sys.stderr.isatty(),
        )

    return logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
