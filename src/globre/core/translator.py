"""Translation of shell-style glob patterns to regular expressions.

The glob dialect understood here:

- ``*`` matches any run of characters, ``?`` matches a single character.
- ``[...]`` is a character class. A leading ``!`` negates it, a leading ``^`` is literal.
- ``{a,b,...}`` is an alternation group. Groups may nest.
- ``\\`` escapes the next character. ``\\,`` is a literal comma, also inside a group.

The regex returned by :func:`translate` is not anchored. Use
:meth:`re.Pattern.fullmatch` (as :class:`globre.Matcher` does) to match whole strings.
"""

# Characters that are regex metacharacters outside a class, but need no escaping inside one
_CLASS_SAFE_METACHARS = frozenset('.()+|^$@%')


class _ScanState:
    """Mutable state of a single left-to-right scan over a glob."""

    __slots__ = ('pos', 'in_class', 'in_group', 'first_index_in_class')

    def __init__(self):
        self.pos = 0
        self.in_class = 0
        self.in_group = 0
        # Index right after the most recently opened '['
        self.first_index_in_class = -1

    def at_class_start(self):
        return self.pos == self.first_index_in_class


def translate(pat: str) -> str:
    r"""Translate a glob pattern to an (unanchored) regular expression string.

    The translation is a single forward pass and never fails. A regex built from a malformed
    glob (e.g. an unclosed ``[`` or ``{``) is rejected only when it is compiled.

    Args:
        pat: Glob pattern.

    Returns:
        The equivalent regular expression, in Python :mod:`re` syntax.

    Examples:
        >>> translate('main{.go,.c}')
        'main(\\.go|\\.c)'
        >>> translate('gl[!a-n]b')
        'gl[^a-n]b'
    """
    if not isinstance(pat, str):
        raise TypeError(f'Glob pattern must be a str, not {type(pat).__name__}')

    res = []
    add = res.append
    state = _ScanState()
    n = len(pat)

    while state.pos < n:
        c = pat[state.pos]

        if c == '\\':
            state.pos += 1
            if state.pos >= n:
                add('\\')
            else:
                nxt = pat[state.pos]
                if nxt == ',':
                    add(',')
                elif nxt in 'QE':
                    add('\\\\' + nxt)
                else:
                    add('\\' + nxt)
        elif c == '*':
            add('.*' if state.in_class == 0 else '*')
        elif c == '?':
            add('.' if state.in_class == 0 else '?')
        elif c == '[':
            state.in_class += 1
            state.first_index_in_class = state.pos + 1
            add('[')
        elif c == ']':
            state.in_class -= 1
            add(']')
        elif c in _CLASS_SAFE_METACHARS:
            if state.in_class == 0 or (c == '^' and state.at_class_start()):
                add('\\' + c)
            else:
                add(c)
        elif c == '!':
            add('^' if state.at_class_start() else '!')
        elif c == '{':
            state.in_group += 1
            add('(')
        elif c == '}':
            state.in_group -= 1
            add(')')
        elif c == ',':
            add('|' if state.in_group > 0 else ',')
        else:
            add(c)

        state.pos += 1

    return ''.join(res)
