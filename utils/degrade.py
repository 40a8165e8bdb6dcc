"""Graceful-degradation helper for non-critical side calls."""

import logging
import functools

logger = logging.getLogger("utils.degrade")


def graceful_degrade(fallback_value=None):
    """Decorator: catch exceptions and return a fallback instead of failing.

    Logs a warning so operators can see the side call did not go through.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                logger.warning(
                    "%s failed (degraded mode): %s - returning fallback",
                    func.__name__, exc,
                )
                return fallback_value
        return wrapper
    return decorator
