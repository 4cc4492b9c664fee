# coding: utf-8
"""
Public subclasses of different Exceptions
"""


class TermUnifyException(Exception):
    """Base class for termunify exceptions"""

    pass


class InputError(TermUnifyException):
    """Raised when the equation input cannot be read or is too short to unify.

    This is the only fatal condition: per-set unification failures are
    recorded on the set itself and never raised.
    """

    pass
