"""
ifelif - A chainable if/elif/else for expression contexts

ifelif replaces nested conditional expressions with a readable method chain.
It returns the outcome of the first branch whose condition is true:
- if_() starts a chain with the first condition
- then() binds an outcome to the current branch
- elif_() / else_if() open the next branch
- else_() supplies the default, end() finishes a chain without one

Example:
    from ifelif import if_, lazy

    grade = 75
    letter = (
        if_(grade >= 90).then('A')
        .elif_(grade >= 80).then('B')
        .elif_(grade >= 70).then('C')
        .else_('F')
    )
    print(letter)  # C

    # Producers run only if their branch wins
    report = if_(grade < 50).then(lazy(build_report)).end()  # None
"""

__version__ = "1.0.0"
__author__ = "ifelif Contributors"

from .chain import Chain, ChainState, ChainStateError, if_, _if
from .outcome import Outcome, Value, Producer, lazy
from .result import Result, NoMatchError

__all__ = [
    'if_',
    '_if',
    'Chain',
    'ChainState',
    'ChainStateError',
    'Outcome',
    'Value',
    'Producer',
    'lazy',
    'Result',
    'NoMatchError',
]
