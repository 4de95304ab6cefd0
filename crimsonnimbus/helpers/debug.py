import functools
import logging

from crimsonnimbus.config import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(level=level.upper(), format=DEFAULT_LOG_FORMAT)


def log_call(fn):
    logger = logging.getLogger(fn.__module__.split(".")[-1])

    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        # first positional argument of a method is the service itself
        logger.debug(f"Calling {fn.__qualname__} {args[1:]} {kwargs}")
        return fn(*args, **kwargs)
    return __wrapped
