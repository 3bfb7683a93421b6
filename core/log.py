"""Logger setup for applications and test sessions.

The library modules only call logging.getLogger(__name__); attaching
handlers is left to whoever embeds them.
"""

import logging


def setup_basic_logger(name: str = "arith", level: int = logging.INFO) -> logging.Logger:
    """
    Return a logger configured with a StreamHandler and a compact formatter.
    Calling it again for the same name does not stack handlers.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        logger.setLevel(level)
        return logger
    logger.setLevel(level)
    ch = logging.StreamHandler()
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    return logger
