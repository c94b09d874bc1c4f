"""
Result - Represents the final outcome of a conditional chain.
"""


class NoMatchError(LookupError):
    """Raised when unwrapping a Result that holds no match."""


class Result:
    """
    Represents the final outcome of a conditional chain.
    Either holds the value of the winning branch or records that no branch matched.

    A matched value may itself be None or any other falsy value; whether the
    chain matched is tracked separately in ``matched``. Results are
    read-only, so an outcome handed out by a chain cannot be altered.
    """

    __slots__ = ("_matched", "_value")

    def __init__(self, matched, value=None):
        """
        Initialize a Result.

        Args:
            matched: Boolean indicating if a branch of the chain matched
            value: The outcome of the winning branch (ignored when not matched)
        """
        self._matched = bool(matched)
        self._value = value if matched else None

    @property
    def matched(self):
        """True if a branch of the chain matched."""
        return self._matched

    @property
    def value(self):
        """The matched value, or None when nothing matched."""
        return self._value

    @staticmethod
    def match(value):
        """
        Create a matched result.

        Args:
            value: The outcome of the winning branch

        Returns:
            Result instance holding the value
        """
        return Result(True, value)

    @staticmethod
    def no_match():
        """
        Create a result for a chain where no branch matched.

        Returns:
            Result instance holding no value
        """
        return Result(False)

    def is_match(self):
        """Return True if a branch matched."""
        return self.matched

    def is_no_match(self):
        """Return True if no branch matched."""
        return not self.matched

    def value_or(self, default):
        """Return the matched value, or ``default`` when nothing matched."""
        return self.value if self.matched else default

    def unwrap(self):
        """
        Return the matched value.

        Raises:
            NoMatchError: If no branch matched
        """
        if not self.matched:
            raise NoMatchError("conditional chain finished without a match")
        return self.value

    def __bool__(self):
        """Allow Result to be used in boolean context (if result: ...)"""
        return self.matched

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        if self.matched != other.matched:
            return False
        return not self.matched or self.value == other.value

    def __hash__(self):
        return hash((self.matched, self.value)) if self.matched else hash(False)

    def __repr__(self):
        if self.matched:
            return f"Result.match({self.value!r})"
        else:
            return "Result.no_match()"

    def __str__(self):
        if self.matched:
            return f"Match: {self.value}"
        else:
            return "No match"
