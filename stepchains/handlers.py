"""
Handlers - Reusable callbacks for Step.on_error() and Step.recover().

The chain never logs or translates failures by itself; these helpers are
the common choices a call site makes explicitly.

Example:
    user = (step(lambda: repo.find(user_id))
            .on_error(ConnectionError, translate(ServiceUnavailable))
            .on_error(log_and_swallow(logger))
            .or_else(ANONYMOUS))
"""

import logging

from .errors import build_failure

logger = logging.getLogger(__name__)


def translate(failure):
    """
    Build an on_error handler raising a domain failure instead.

    Args:
        failure: Exception class, instance or zero-argument callable

    Returns:
        Handler raising the built failure, chained from the original one
    """
    def handler(error):
        raise build_failure(failure) from error
    return handler


def reraise():
    """Build an on_error handler raising the original failure unchanged."""
    def handler(error):
        raise error
    return handler


def log_and_swallow(log=None, level=logging.WARNING, message="Step failed"):
    """
    Build an on_error handler that logs the failure and returns.

    Args:
        log: Logger to write to (default: the stepchains.handlers logger)
        level: Logging level (default: WARNING)
        message: Log message; the exception is attached with its traceback

    Returns:
        Handler logging the failure
    """
    log = log or logger

    def handler(error):
        log.log(level, "%s: %s", message, error, exc_info=error)
    return handler


def log_and_recover(value, log=None, level=logging.WARNING, message="Step recovered"):
    """
    Build a recover function that logs the failure and returns value.

    Args:
        value: Value stored on the step instead of the failure
        log: Logger to write to (default: the stepchains.handlers logger)
        level: Logging level (default: WARNING)
        message: Log message; the exception is attached with its traceback
    """
    swallow = log_and_swallow(log, level, message)

    def recovery(error):
        swallow(error)
        return value
    return recovery


def constant(value):
    """Build a recover function that always returns value."""
    def recovery(error):
        return value
    return recovery
