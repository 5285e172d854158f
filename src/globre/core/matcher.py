import logging
import re
from collections.abc import Iterable, Iterator

from ..exceptions import PatternError
from .translator import translate

logger = logging.getLogger(__name__)


class Matcher:
    """A compiled glob pattern.

    The glob is translated with :func:`globre.translate` and compiled with :func:`re.compile`.
    Matching is anchored: :meth:`matches` succeeds only if the whole candidate matches.

    Instances are immutable and can be shared between threads.

    Args:
        pattern: Glob pattern.
        flags: Flags passed on to :func:`re.compile`, e.g. ``re.IGNORECASE``.

    Raises:
        PatternError: If the translated regex is not valid.
    """

    __slots__ = ('_pattern', '_flags', '_regex', '_compiled')

    def __init__(self, pattern: str, flags: int = 0):
        regex = translate(pattern)
        try:
            compiled = re.compile(regex, flags)
        except re.error as e:
            raise PatternError(pattern, regex, e.msg, e.pos) from e
        except (RecursionError, OverflowError) as e:
            # Groups nested too deeply for the regex parser
            raise PatternError(pattern, regex, str(e)) from e

        logger.debug('Compiled glob %r to regex %r', pattern, regex)
        self._pattern = pattern
        self._flags = flags
        self._regex = regex
        self._compiled = compiled

    @property
    def pattern(self) -> str:
        """The source glob pattern."""
        return self._pattern

    @property
    def regex(self) -> str:
        """The translated, unanchored regex string."""
        return self._regex

    @property
    def flags(self) -> int:
        return self._flags

    @property
    def compiled(self) -> re.Pattern:
        """The underlying compiled regex."""
        return self._compiled

    def source_pattern(self) -> str:
        return self._pattern

    def matches(self, candidate: str) -> bool:
        """Whether the entire candidate string matches the glob."""
        return self._compiled.fullmatch(candidate) is not None

    __call__ = matches

    def search(self, candidate: str) -> bool:
        """Whether the glob matches anywhere within the candidate string."""
        return self._compiled.search(candidate) is not None

    def filter(self, candidates: Iterable[str]) -> Iterator[str]:
        """Yield the candidates that match the glob, in input order."""
        fullmatch = self._compiled.fullmatch
        return (c for c in candidates if fullmatch(c) is not None)

    def __repr__(self):
        if self._flags:
            return f'Matcher({self._pattern!r}, flags={self._flags!r})'
        return f'Matcher({self._pattern!r})'

    def __eq__(self, other):
        if not isinstance(other, Matcher):
            return NotImplemented
        return self._pattern == other._pattern and self._flags == other._flags

    def __hash__(self):
        return hash((self._pattern, self._flags))
