"""Logging configuration helpers."""

import logging

LOGGER_NAME = "booking_marketplace"


def log_level_for(environment: str) -> int:
    """Return the log level used for a deployment environment."""
    return logging.DEBUG if environment == "local" else logging.INFO


def configure_logging(level: int = logging.INFO) -> None:
    """Attach one stream handler to the package logger and set its level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
