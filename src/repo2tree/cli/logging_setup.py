"""Logging configuration for the repo2tree CLI."""

import logging
import sys

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send log records of the repo2tree package to stderr.

    Library modules only create loggers; handlers are attached here so that using
    repo2tree as a library never prints anything by itself.

    Args:
        verbose: Log at DEBUG level if True, WARNING otherwise.

    Returns:
        logging.Logger: The configured package logger.
    """
    logger = logging.getLogger("repo2tree")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        if getattr(handler, "_repo2tree_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._repo2tree_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
