"""Logging configuration for hosts embedding the engine.

Library modules only create module-level loggers; nothing is attached until
a host calls :func:`configure_logging`.
"""

import logging

from arbiter.config import get_settings

LOGGER_NAME = "arbiter"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach a stream handler to the ``arbiter`` logger.

    Args:
        level: Explicit log level. Defaults to DEBUG when settings.debug is
            set, WARNING otherwise.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = logging.DEBUG if get_settings().debug else logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Idempotent: only one handler of ours
    if not any(getattr(h, "_arbiter_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._arbiter_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
