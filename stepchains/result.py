"""
Result - The state slot carried by a step: empty, a value, or a failure.
"""

EMPTY = "empty"
SUCCESS = "success"
FAILURE = "failure"


class Result:
    """
    Represents the outcome of a step action.

    A Result is always in exactly one of three states:
    - empty: nothing ran, or a failure was handled without a value
    - success: the action produced a value (which may be None)
    - failure: the action raised and the exception was captured

    Results are immutable; steps replace them rather than modify them.
    """

    __slots__ = ('_state', '_value', '_error')

    def __init__(self, state, value=None, error=None):
        """
        Initialize a Result.

        Args:
            state: One of EMPTY, SUCCESS or FAILURE
            value: Value produced by the action (SUCCESS only)
            error: Captured exception (FAILURE only)
        """
        if state not in (EMPTY, SUCCESS, FAILURE):
            raise ValueError(f"Unknown result state: {state!r}")
        self._state = state
        self._value = value
        self._error = error

    @staticmethod
    def empty():
        """Create a result that holds neither a value nor a failure."""
        return _EMPTY_RESULT

    @staticmethod
    def ok(value=None):
        """
        Create a successful result.

        Args:
            value: Value produced by the action

        Returns:
            Result instance holding the value
        """
        return Result(SUCCESS, value=value)

    @staticmethod
    def fail(error):
        """
        Create a failed result.

        Args:
            error: The exception captured from the action

        Returns:
            Result instance holding the failure
        """
        return Result(FAILURE, error=error)

    @property
    def value(self):
        """The stored value, or None unless the result is a success."""
        return self._value

    @property
    def error(self):
        """The captured exception, or None unless the result is a failure."""
        return self._error

    def is_empty(self):
        """Return True if the result holds neither a value nor a failure."""
        return self._state == EMPTY

    def is_success(self):
        """Return True if the result holds a value."""
        return self._state == SUCCESS

    def is_failure(self):
        """Return True if the result holds a captured failure."""
        return self._state == FAILURE

    def has_value(self):
        """Return True if the result holds a value other than None."""
        return self._state == SUCCESS and self._value is not None

    def __bool__(self):
        """Allow Result to be used in boolean context (if result: ...)"""
        return self._state == SUCCESS

    def __repr__(self):
        if self._state == SUCCESS:
            return f"Result.ok({self._value!r})"
        elif self._state == FAILURE:
            return f"Result.fail({self._error!r})"
        else:
            return "Result.empty()"

    def __str__(self):
        if self._state == SUCCESS:
            return "Success"
        elif self._state == FAILURE:
            return f"Failure: {self._error}"
        else:
            return "Empty"


_EMPTY_RESULT = Result(EMPTY)
