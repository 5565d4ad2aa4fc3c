"""
Scenario - Gate deciding whether a chain of steps executes at all.
"""

from .step import Step


class Scenario:
    """
    Entry point of a step chain.

    A scenario is either executable or not, decided once when it is
    created. Every step derived from it inherits that decision: on a
    non-executable scenario no action, predicate or handler ever runs.
    """

    __slots__ = ('_executable', '_capture')

    def __init__(self, executable=True, capture=Exception):
        """
        Initialize a Scenario.

        Args:
            executable: Whether steps should execute (default: True)
            capture: Exception class or tuple of classes that plain actions
                capture instead of raising (default: Exception)
        """
        self._executable = bool(executable)
        self._capture = capture

    @classmethod
    def when(cls, condition, capture=Exception):
        """
        Create a scenario from a condition.

        Args:
            condition: A boolean, or a zero-argument callable returning one;
                the callable is invoked exactly once, right away
            capture: Exception types captured by plain actions

        Returns:
            Scenario that is executable if the condition holds
        """
        if callable(condition):
            condition = condition()
        return cls(bool(condition), capture)

    @property
    def executable(self):
        return self._executable

    def step(self, action, failure=None):
        """
        Start a chain with an action producing a value.

        Args:
            action: Zero-argument callable producing the step's value
            failure: Optional exception class, instance or zero-argument
                callable; when given, an exception from the action is
                replaced by this failure and raised immediately

        Returns:
            Step holding the value, or the captured failure
        """
        return Step(self._executable, capture=self._capture).action(action, failure)

    def run(self, action, failure=None):
        """
        Start a chain with an action run only for its effect.

        The action's return value is discarded; the resulting step holds
        None on success, or the captured failure.
        """
        def effect():
            action()

        return self.step(effect, failure)

    def __repr__(self):
        return f"Scenario(executable={self._executable})"


def when(condition, capture=Exception):
    """Create a Scenario from a boolean or a zero-argument condition."""
    return Scenario.when(condition, capture)


def step(action, failure=None):
    """Start an always-executable chain with an action producing a value."""
    return Scenario().step(action, failure)


def run(action, failure=None):
    """Start an always-executable chain with an effect-only action."""
    return Scenario().run(action, failure)


def raise_(error):
    """
    Raise an exception from an expression, e.g. inside a lambda.

    Args:
        error: Exception instance or exception class to raise

    Example:
        step(lambda: lookup(key) or raise_(KeyError(key)))
    """
    raise error
