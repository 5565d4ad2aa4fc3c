"""
Errors raised by the library itself, as opposed to failures built by callers.
"""


class ScenarioError(Exception):
    """Base class for failures owned by stepchains."""


class EmptyStepError(ScenarioError, LookupError):
    """
    Raised when a value is requested from a step that has none.

    A step has no value when it was never executed, when its action failed
    and the failure was not recovered, or when its action produced None.
    """

    def __init__(self, message="Step holds no value"):
        super().__init__(message)


def build_failure(factory):
    """
    Turn a caller-supplied failure factory into an exception instance.

    An exception instance is returned as is, so raising it again rebinds
    its __cause__ and __traceback__. Pass a class or a callable when the
    same factory is used more than once.

    Args:
        factory: An exception class, an exception instance, or a
            zero-argument callable returning an exception

    Returns:
        The exception instance to raise

    Raises:
        TypeError: If the factory does not produce an exception
    """
    if isinstance(factory, BaseException):
        return factory
    error = factory()
    if not isinstance(error, BaseException):
        raise TypeError(
            f"Failure factory {factory!r} returned {type(error).__name__}, "
            f"expected an exception"
        )
    return error
