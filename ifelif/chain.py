"""
Chain - A fluent if/elif/else that can be used inside expressions.
"""

import logging

from .outcome import as_outcome
from .result import Result

logger = logging.getLogger(__name__)

_MISSING = object()


class ChainState:
    """Enumeration of the states a conditional chain can be in."""
    PENDING = "pending"                     # Searching for a true branch
    RESOLVED = "resolved"                   # A branch won, outcome is fixed
    FALLBACK_PENDING = "fallback_pending"   # else_() called, awaiting then()

    ALL = (PENDING, RESOLVED, FALLBACK_PENDING)


class ChainStateError(TypeError):
    """Raised when a chain method is called in a state where it has no meaning."""


class Chain:
    """
    An immutable step of a conditional chain.

    The chain tracks which branch matched so the caller does not have to:
    - PENDING holds the condition of the current branch
    - RESOLVED holds the fixed outcome; further branches are ignored
    - FALLBACK_PENDING waits for the then() that completes an else_();
      after a win it carries the fixed outcome and passes every call through

    Every call returns a new Chain, the same Chain (passthrough), or, for the
    terminal calls end(), else_(value) and else_().then(value), a plain value.
    """

    def __init__(self, state, condition=False, outcome=None):
        """
        Initialize a Chain step. Use if_() or Chain.start() to begin a chain.

        Args:
            state: One of the ChainState constants
            condition: Branch condition, read once for its truthiness (PENDING only)
            outcome: Result holding the fixed outcome (default: no match)

        Raises:
            ValueError: If state is unknown or does not agree with outcome
        """
        if state not in ChainState.ALL:
            raise ValueError(f"Unknown chain state: {state!r}")
        outcome = outcome if outcome is not None else Result.no_match()
        if state == ChainState.PENDING and outcome.is_match():
            raise ValueError("A pending chain cannot hold a fixed outcome")
        if state == ChainState.RESOLVED and outcome.is_no_match():
            raise ValueError("A resolved chain requires a matched outcome")
        self._state = state
        self._condition = bool(condition) if state == ChainState.PENDING else False
        self._outcome = outcome

    @staticmethod
    def start(condition):
        """
        Start a new chain.

        Args:
            condition: Condition of the first branch

        Returns:
            Chain in PENDING state
        """
        return Chain(ChainState.PENDING, condition)

    @property
    def state(self):
        """The current ChainState constant."""
        return self._state

    def is_resolved(self):
        """Return True if a branch has already won."""
        return self._state == ChainState.RESOLVED

    def then(self, outcome):
        """
        Bind an outcome to the current branch.

        Plain values are used as is. Wrap a zero-argument callable with
        lazy() (or Producer) to have it invoked only if this branch wins.

        Args:
            outcome: Value or Outcome for this branch

        Returns:
            RESOLVED Chain if the condition is true, otherwise this Chain.
            After else_(), the final value of the chain.

        Example:
            if_(False).then('Hi').else_().then('Bye')  # 'Bye'
        """
        if self._state == ChainState.PENDING:
            if self._condition:
                return self._resolve(outcome, "branch")
            return self
        elif self._state == ChainState.RESOLVED:
            return self
        else:
            # Carried over from a resolved chain; the new outcome is never evaluated
            if self._outcome.is_match():
                return self._outcome.value
            return self._resolve(outcome, "fallback").end()

    def elif_(self, condition):
        """
        Open the next branch.

        Args:
            condition: Condition of the next branch

        Returns:
            New PENDING Chain, or a RESOLVED Chain if a branch already won

        Raises:
            ChainStateError: If called right after else_() with no branch won
        """
        if self._state == ChainState.PENDING:
            return Chain(ChainState.PENDING, condition)
        elif self._state == ChainState.RESOLVED:
            return self
        elif self._outcome.is_match():
            return Chain(ChainState.RESOLVED, outcome=self._outcome)
        else:
            raise self._invalid("elif_")

    def else_if(self, condition):
        """Alias for elif_()."""
        return self.elif_(condition)

    def else_(self, outcome=_MISSING):
        """
        Close the chain with a default branch.

        With an outcome, ends the chain and returns its final value: the
        outcome if no branch matched, otherwise the winning branch's value.
        Without one, returns a FALLBACK_PENDING Chain to be completed by then().

        Args:
            outcome: Optional value or Outcome for the default branch

        Returns:
            Final value of the chain, or FALLBACK_PENDING Chain

        Raises:
            ChainStateError: If called right after else_() with no branch won
        """
        if self._state == ChainState.PENDING:
            if outcome is _MISSING:
                return Chain(ChainState.FALLBACK_PENDING)
            return self._resolve(outcome, "fallback").end()
        elif self._state == ChainState.RESOLVED or self._outcome.is_match():
            if outcome is _MISSING:
                if self._state == ChainState.FALLBACK_PENDING:
                    return self
                return Chain(ChainState.FALLBACK_PENDING, outcome=self._outcome)
            return self._outcome.value
        else:
            raise self._invalid("else_")

    def end(self):
        """
        End the chain.

        Not needed after else_(value) or else_().then(value).

        Returns:
            The winning branch's value, or None if no branch matched
        """
        return self._outcome.value

    def result(self):
        """
        End the chain with an explicit option.

        Returns:
            Result.match(value) if a branch won, otherwise Result.no_match()
        """
        return self._outcome

    def _resolve(self, outcome, kind):
        value = as_outcome(outcome).resolve()
        logger.debug("Chain resolved by %s to %r", kind, value)
        return Chain(ChainState.RESOLVED, outcome=Result.match(value))

    def _invalid(self, method):
        return ChainStateError(
            f"{method}() cannot be called in state {self._state!r}; "
            f"complete else_() with then() or end()"
        )

    def __repr__(self):
        if self._state == ChainState.PENDING:
            return f"Chain(state={self._state!r}, condition={self._condition})"
        return f"Chain(state={self._state!r}, outcome={self._outcome!r})"


def if_(condition):
    """
    Start a new conditional chain.

    Can be used like:
    - if_(cond).then(...).elif_(cond).then(...).else_(...)
    - if_(cond).then(...).elif_(cond).then(...).else_().then(...)
    - if_(cond).then(...).end()

    Args:
        condition: Condition of the first branch

    Returns:
        Chain in PENDING state

    Example:
        if_(False).then('Hi').elif_(True).then('Hello').else_('Bye')  # 'Hello'
    """
    return Chain.start(condition)


_if = if_
