"""Logging setup shared by the HTTP app and the Lambda handlers."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging.

    On Lambda the runtime has already attached a handler to the root
    logger, so ``basicConfig`` does nothing there and only the level
    is applied.
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
