"""Globre translates shell-style glob patterns, with character classes and brace alternation,
into regular expressions."""

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.0.0.dev0"

# Core
from .core.translator import translate
from .core.matcher import Matcher

# Exceptions
from .exceptions import GlobreError, PatternError

# Convenience API
from ._api import compile, filter, fullmatch, purge

__all__ = [
    # Version
    "__version__",
    # Core
    "translate",
    "Matcher",
    # Exceptions
    "GlobreError",
    "PatternError",
    # Convenience API
    "compile",
    "filter",
    "fullmatch",
    "purge",
]
