"""
Outcome - What a branch of a conditional chain evaluates to once it wins.
"""

import logging

logger = logging.getLogger(__name__)


class Outcome:
    """
    Base class for branch outcomes.

    An outcome is either a literal value (Value) or a zero-argument callable
    whose return value becomes the outcome (Producer). The chain calls
    resolve() once, at the moment the branch wins.
    """

    def resolve(self):
        """
        Compute the outcome value.

        Returns:
            The value bound to the winning branch

        Raises:
            NotImplementedError: This method must be implemented by subclasses
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement resolve()")

    def __str__(self):
        return self.__class__.__name__


class Value(Outcome):
    """
    A literal outcome. Returned as is, even when the value is callable.
    """

    def __init__(self, value):
        self.value = value

    def resolve(self):
        return self.value

    def __repr__(self):
        return f"Value({self.value!r})"


class Producer(Outcome):
    """
    A lazily computed outcome.

    The wrapped callable takes no arguments. It is invoked only if its branch
    wins, and any exception it raises propagates to the caller unchanged.
    """

    def __init__(self, func):
        """
        Initialize a Producer.

        Args:
            func: Zero-argument callable producing the outcome value

        Raises:
            TypeError: If func is not callable
        """
        if not callable(func):
            raise TypeError(f"Producer expects a callable, got {type(func).__name__}")
        self.func = func

    def resolve(self):
        logger.debug("Invoking producer %r", self.func)
        return self.func()

    def __repr__(self):
        return f"Producer({self.func!r})"


def as_outcome(obj):
    """
    Wrap a plain object as a Value. Outcome instances are returned unchanged.

    Callables are not special-cased here; use lazy() or Producer to defer a
    computation.
    """
    if isinstance(obj, Outcome):
        return obj
    return Value(obj)


def lazy(func):
    """Shorthand for Producer(func)."""
    return Producer(func)
