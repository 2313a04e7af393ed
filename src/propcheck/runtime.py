from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_VERBOSITY_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def verbosity_level(verbose: int) -> int:
    return _VERBOSITY_LEVELS[max(0, min(verbose, len(_VERBOSITY_LEVELS) - 1))]


def configure_logging(verbose: int = 0) -> int:
    """Set the root level from a `-v` count; quiet runs only show warnings."""
    level = verbosity_level(verbose)
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return level
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return level
