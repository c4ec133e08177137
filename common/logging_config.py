"""
Logging Configuration for the Coordinate Engine.

Every module obtains its logger through `get_logger(__name__)` so that all
output shares one format and one stream. The engine itself only logs at
DEBUG level (pole crossings, degenerate conversions); callers raise the
verbosity with `set_level` when tracing a normalization problem.
"""

import logging
import sys
from typing import Iterable, Optional


LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Loggers handed out by get_logger, tracked so set_level can reach them all
_registered: set = set()


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the coordinate engine.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int
        Logging level, applied only when the logger is first configured.
        Later changes go through `set_level`.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
        logger.setLevel(level)

    _registered.add(name)
    return logger


def set_level(level: int, names: Optional[Iterable[str]] = None) -> None:
    """Change the level of loggers created through `get_logger`.

    Parameters
    ----------
    level : int
        New logging level (e.g. ``logging.DEBUG``).
    names : iterable of str, optional
        Restrict the change to these logger names. Defaults to every
        logger handed out so far.
    """
    targets = _registered if names is None else set(names) & _registered
    for name in targets:
        logging.getLogger(name).setLevel(level)
