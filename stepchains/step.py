"""
Step - A single stage of a scenario: the outcome of an action plus the
combinators that build the next stage from it.
"""

from .errors import EmptyStepError, build_failure
from .result import Result


class Step:
    """
    Immutable chain object holding the outcome of an action.

    A step carries:
    - a Result (empty, a value, or a captured failure)
    - the executable flag inherited from the scenario that created it
    - the exception types its actions capture instead of raising

    Every combinator returns a step and never modifies the one it is
    called on, so a step can be shared, reused as a branch point or built
    inside another step's callback without side effects on other chains.

    On a non-executable step every combinator returns the step unchanged
    and no supplied callable is ever invoked.
    """

    __slots__ = ('_result', '_executable', '_capture')

    def __init__(self, executable=True, result=None, capture=Exception):
        """
        Initialize a Step.

        Args:
            executable: Whether combinators should run at all (default: True)
            result: Initial Result (default: empty)
            capture: Exception class or tuple of classes captured by actions
        """
        self._executable = bool(executable)
        self._result = result if result is not None else Result.empty()
        self._capture = capture

    def _derive(self, result):
        return Step(self._executable, result, self._capture)

    # Action

    def action(self, action, failure=None):
        """
        Run an action and store its outcome in a new step.

        Without a failure factory, an exception raised by the action is
        captured and kept on the step until recover(), on_error() or a
        terminal operation deals with it.

        With a failure factory, an exception raised by the action is
        replaced immediately: the failure built by the factory is raised,
        chained from the original exception.

        Args:
            action: Zero-argument callable producing the step's value
            failure: Optional exception class, instance or zero-argument
                callable building the exception to raise instead; a shared
                instance is re-raised as is, so prefer a class or callable
                for a factory used more than once

        Returns:
            New Step holding the value or the captured failure
        """
        if not self._executable:
            return self

        if failure is None:
            try:
                value = action()
            except self._capture as e:
                return self._derive(Result.fail(e))
            return self._derive(Result.ok(value))

        try:
            value = action()
        except Exception as e:
            raise build_failure(failure) from e
        return self._derive(Result.ok(value))

    # Combinators

    def validate(self, predicate, failure):
        """
        Check the step's value, raising a failure when the check does not hold.

        Args:
            predicate: One-argument callable receiving the value
            failure: Exception class, instance or zero-argument callable
                building the exception raised when predicate returns False

        Returns:
            This step, unchanged

        Raises:
            The exception built by failure, immediately
        """
        if not self._runnable():
            return self

        if predicate(self._result.value):
            return self

        raise build_failure(failure)

    def apply(self, consumer):
        """
        Pass the step's value to a side-effect callable.

        Exceptions raised by the consumer are not captured. The consumer
        cannot replace the value, though it may mutate a mutable value.

        Args:
            consumer: One-argument callable receiving the value

        Returns:
            This step, unchanged
        """
        if not self._runnable():
            return self

        consumer(self._result.value)
        return self

    def when(self, predicate, consumer):
        """
        Pass the step's value to a side-effect callable if predicate holds.

        Args:
            predicate: One-argument callable receiving the value
            consumer: One-argument callable receiving the value

        Returns:
            This step, unchanged
        """
        if not self._runnable():
            return self

        value = self._result.value
        if predicate(value):
            consumer(value)
        return self

    def map(self, transformer):
        """
        Build a new step from the value of this one.

        The transformer runs like an action: an exception it raises is
        captured on the new step. A pending failure or an empty step is
        carried over without calling the transformer.

        Args:
            transformer: One-argument callable receiving the value

        Returns:
            New Step holding the transformed value or the captured failure
        """
        if not self._runnable():
            return self

        value = self._result.value
        return self.action(lambda: transformer(value))

    def recover(self, recovery):
        """
        Replace a pending failure with a value.

        Args:
            recovery: One-argument callable receiving the captured
                exception and returning the value to store

        Returns:
            New Step holding the recovered value, or this step when no
            failure is pending
        """
        if not self._executable or not self._result.is_failure():
            return self

        return self._derive(Result.ok(recovery(self._result.error)))

    def on_error(self, matcher, handler=None):
        """
        Hand a pending failure to a handler.

        Called as on_error(handler) the handler receives any failure.
        Called as on_error(matcher, handler) it only receives failures the
        matcher accepts; others stay pending for later calls.

        A handler usually raises a translated exception, which propagates,
        or logs and returns. When it returns, the failure is cleared and
        the new step is empty. recover() has nothing left to act on then,
        so resolve the chain with or_else(), or_else_get() or or_none().
        The first matching handler wins.

        Args:
            matcher: Exception class, tuple of classes, or one-argument
                predicate over the exception
            handler: One-argument callable receiving the exception

        Returns:
            New empty Step if the failure was handled, otherwise this step

        Raises:
            TypeError: If a matcher is given without a handler, or the
                matcher is a class that is not an exception
        """
        if handler is None:
            if isinstance(matcher, tuple) or _is_exception_class(matcher):
                raise TypeError(f"on_error({matcher!r}) is missing a handler")
            matcher, handler = None, matcher

        if not self._executable or not self._result.is_failure():
            return self

        error = self._result.error
        if matcher is not None and not _matches(matcher, error):
            return self

        handler(error)
        return self._derive(Result.empty())

    # Terminal operations

    def get(self):
        """
        Return the step's value.

        Raises:
            EmptyStepError: If the step holds no value; a pending failure
                is attached as the cause
        """
        if self._result.has_value():
            return self._result.value

        error = EmptyStepError()
        if self._result.is_failure():
            raise error from self._result.error
        raise error

    def or_none(self):
        """Return the step's value, or None if it has none."""
        if self._result.has_value():
            return self._result.value
        return None

    def or_else(self, fallback):
        """Return the step's value, or fallback if it has none."""
        if self._result.has_value():
            return self._result.value
        return fallback

    def or_else_get(self, producer):
        """
        Return the step's value, or the result of producer() if it has none.

        The producer is only called when there is no value.
        """
        if self._result.has_value():
            return self._result.value
        return producer()

    def or_throw(self, failure):
        """
        Return the step's value, or raise the failure built by the factory.

        Args:
            failure: Exception class, instance or zero-argument callable
                building the exception to raise

        Raises:
            The exception built by failure, if the step has no value
        """
        if self._result.has_value():
            return self._result.value
        raise build_failure(failure)

    # Inspection

    @property
    def executable(self):
        return self._executable

    @property
    def result(self):
        """The underlying Result."""
        return self._result

    @property
    def failure(self):
        """The pending exception, or None."""
        return self._result.error

    def is_empty(self):
        return self._result.is_empty()

    def is_success(self):
        return self._result.is_success()

    def is_failure(self):
        return self._result.is_failure()

    def _runnable(self):
        # Value combinators only run on a step holding a value.
        return self._executable and self._result.is_success()

    def __repr__(self):
        return f"Step(executable={self._executable}, result={self._result!r})"


def _is_exception_class(obj):
    return isinstance(obj, type) and issubclass(obj, BaseException)


def _matches(matcher, error):
    if isinstance(matcher, tuple):
        if not all(_is_exception_class(item) for item in matcher):
            raise TypeError(f"on_error matcher tuple must hold exception classes, got {matcher!r}")
        return isinstance(error, matcher)
    if _is_exception_class(matcher):
        return isinstance(error, matcher)
    # Classes are callable, so reject non-exception ones before the predicate branch
    if not isinstance(matcher, type) and callable(matcher):
        return bool(matcher(error))
    raise TypeError(
        f"on_error matcher must be an exception class, a tuple of classes "
        f"or a predicate, got {matcher!r}"
    )
