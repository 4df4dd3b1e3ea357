"""Opt-in logging setup for applications using tilecoding."""

import logging

_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level=logging.INFO, stream=None):
    """
    Attach one stream handler to the "tilecoding" logger and set its level.
    Calling it again only updates the level and stream.
    """
    logger = logging.getLogger("tilecoding")
    logger.setLevel(level)
    for handler in logger.handlers:
        if getattr(handler, "_tilecoding", False):
            if stream is not None:
                handler.setStream(stream)
            return logger

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._tilecoding = True
    logger.addHandler(handler)
    return logger
