"""Shared utilities: exceptions and parallel execution helpers."""

from .exceptions import TermUnifyException, InputError

__all__ = ["TermUnifyException", "InputError"]
