"""High-level convenience functions for matching glob patterns."""

import functools
import re

from .core.matcher import Matcher

_CACHE_SIZE = 512


@functools.lru_cache(maxsize=_CACHE_SIZE)
def _compile(pattern, flags):
    return Matcher(pattern, flags)


def compile(pattern, ignore_case=False):
    """Compile a glob pattern into a :class:`Matcher`.

    Matchers are cached, so compiling the same pattern repeatedly is cheap.

    Args:
        pattern: Glob pattern.
        ignore_case: Match case-insensitively (as far as :data:`re.IGNORECASE` goes).

    Returns:
        Matcher: The compiled pattern.

    Raises:
        PatternError: If the glob translates to an invalid regex.
    """
    flags = re.IGNORECASE if ignore_case else 0
    return _compile(pattern, flags)


def fullmatch(pattern, candidate, ignore_case=False):
    """Return whether ``candidate`` matches the glob ``pattern`` in its entirety."""
    return compile(pattern, ignore_case=ignore_case).matches(candidate)


def filter(candidates, pattern, ignore_case=False):
    """Return the list of ``candidates`` that match the glob ``pattern``.

    Analogous to :func:`fnmatch.filter`.
    """
    return list(compile(pattern, ignore_case=ignore_case).filter(candidates))


def purge():
    """Clear the cache of compiled patterns."""
    _compile.cache_clear()
