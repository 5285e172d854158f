"""Exceptions raised when compiling glob patterns"""

from typing import Optional


class GlobreError(Exception):
    """Base class for all exceptions in globre"""

    def __init__(self, message: str):
        super().__init__(message)


class PatternError(GlobreError, ValueError):
    """Exception raised when the regex translated from a glob is rejected by :mod:`re`

    Inherits from ValueError, since a malformed glob is a user input error.

    Args:
        pattern: the original glob pattern
        regex: the regex string it was translated to
        reason: the diagnostic message of the regex engine
        position: offset into ``regex`` where compilation failed, if known
    """

    def __init__(self, pattern: str, regex: str, reason: str, position: Optional[int] = None):
        self.pattern = pattern
        self.regex = regex
        self.reason = reason
        self.position = position
        super().__init__(f'Invalid glob pattern {pattern!r} (translated to {regex!r}): {reason}')
