import logging
import os

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] - %(message)s"


def configure_root_logger() -> logging.Logger:
    """Configure the `alist` package logger from the environment and return it.

    The level is taken from `ALIST_LOGGING_LEVEL` (default `WARNING`). Contract
    violations are logged at DEBUG on `alist.contract`, so they only reach a
    console when `ALIST_USE_DEV_LOGGER` is `true`; otherwise a `NullHandler` keeps
    the library quiet. A handler is only attached the first time this is called."""
    logger = logging.getLogger("alist")
    logger.setLevel(os.getenv("ALIST_LOGGING_LEVEL", "WARNING"))
    if not logger.handlers:
        handler: logging.Handler
        if os.getenv("ALIST_USE_DEV_LOGGER", "").lower() == "true":
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        else:
            handler = logging.NullHandler()
        logger.addHandler(handler)
    return logger
