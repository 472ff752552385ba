import asyncio
import logging
import time
from functools import wraps
from typing import Callable, Optional

ROOT_LOGGER_NAME = "adtraffic"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Returns the named logger, attaching the console handler on first use.
    Loggers outside the adtraffic tree get their own handler.
    """
    logger = logging.getLogger(name)
    owner = logging.getLogger(ROOT_LOGGER_NAME) if name.startswith(ROOT_LOGGER_NAME) else logger
    if not owner.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        owner.addHandler(handler)
        owner.setLevel(logging.INFO)
    if level is not None:
        logger.setLevel(level)
    return logger

def set_log_level(level: str):
    """
    Applies a textual level (DEBUG, INFO, ...) to the adtraffic logger tree.
    """
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    setup_logger(ROOT_LOGGER_NAME).setLevel(numeric)

def log_execution_time(logger: logging.Logger):
    """
    Decorator logging how long a report call took, for plain and async functions.
    Failures are logged with the call name and re-raised.
    """
    def decorator(func: Callable):
        if asyncio.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                start = time.perf_counter()
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    logger.error(f"{func.__name__} failed: {e}")
                    raise
                finally:
                    logger.debug(f"{func.__name__} took {time.perf_counter() - start:.3f}s")
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__name__} failed: {e}")
                raise
            finally:
                logger.debug(f"{func.__name__} took {time.perf_counter() - start:.3f}s")
        return wrapper
    return decorator
