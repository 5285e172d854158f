"""Tests for the glob to regex translation."""

import pytest

from globre import translate


class TestWildcards:
    def test_star_becomes_dot_star(self):
        assert translate('gl*b') == 'gl.*b'
        assert translate('*') == '.*'

    def test_question_mark_becomes_dot(self):
        assert translate('gl?b') == 'gl.b'
        assert translate('?') == '.'

    def test_escaped_star_is_unchanged(self):
        assert translate('gl\\*b') == 'gl\\*b'

    def test_escaped_question_mark_is_unchanged(self):
        assert translate('gl\\?b') == 'gl\\?b'

    def test_wildcards_inside_class_are_literal(self):
        assert translate('[*?]') == '[*?]'


class TestCharacterClasses:
    def test_classes_dont_need_conversion(self):
        assert translate('gl[-o]b') == 'gl[-o]b'

    def test_escaped_brackets_are_unchanged(self):
        assert translate('gl\\[-o\\]b') == 'gl\\[-o\\]b'

    def test_negation(self):
        assert translate('gl[!a-n!p-z]b') == 'gl[^a-n!p-z]b'

    def test_negation_applies_to_each_class(self):
        assert translate('[!a][!b]') == '[^a][^b]'

    def test_bang_outside_class_is_literal(self):
        assert translate('!abc') == '!abc'
        assert translate('[a!]') == '[a!]'

    def test_caret_escaped_if_first_in_class(self):
        assert translate('gl[^o]b') == 'gl[\\^o]b'

    def test_caret_not_escaped_later_in_class(self):
        assert translate('[a^]') == '[a^]'
        assert translate('[!^]') == '[^^]'

    def test_metachars_in_class_dont_need_escaping(self):
        assert translate('gl[?*.()+|^$@%]b') == 'gl[?*.()+|^$@%]b'

    def test_nested_open_bracket_resets_class_start(self):
        """A '[' inside a class starts a new class position for '!' and '^'."""
        assert translate('gl[[!a-n]!p-z]b') == 'gl[[^a-n]!p-z]b'
        assert translate('[a[^b]') == '[a[\\^b]'

    def test_escaped_bracket_inside_class(self):
        assert translate('[\\]]') == '[\\]]'


class TestBraces:
    def test_braces_become_groups(self):
        assert translate('{glob,regex}') == '(glob|regex)'

    def test_escaped_braces_are_unchanged(self):
        assert translate('\\{glob\\}') == '\\{glob\\}'

    def test_commas_outside_groups_are_literal(self):
        assert translate('a,b') == 'a,b'
        assert translate('{a,b},c') == '(a|b),c'

    def test_escaped_comma_is_literal(self):
        assert translate('{glob\\,regex},') == '(glob,regex),'

    def test_nested_groups(self):
        assert translate('{a,{b,c}d}') == '(a|(b|c)d)'

    def test_metachars_in_groups_are_escaped(self):
        assert translate('main{.go,.c}') == 'main(\\.go|\\.c)'


class TestEscaping:
    def test_metachars_are_escaped(self):
        assert translate('gl?*.()+|^$@%b') == r'gl..*\.\(\)\+\|\^\$\@\%b'

    def test_escaped_backslash_is_unchanged(self):
        assert translate('gl\\\\b') == 'gl\\\\b'

    def test_slash_q_and_slash_e_are_escaped(self):
        assert translate('\\Qglob\\E') == '\\\\Qglob\\\\E'

    def test_trailing_backslash_is_kept(self):
        assert translate('abc\\') == 'abc\\'
        assert translate('\\') == '\\'


class TestLiterals:
    @pytest.mark.parametrize('s', ['', 'hello', 'file_name-2', 'a/b/c', 'grüße'])
    def test_plain_text_is_unchanged(self, s):
        assert translate(s) == s

    def test_stray_closers_do_not_fail(self):
        assert translate('a]b') == 'a]b'
        assert translate('a}b') == 'a)b'

    def test_non_str_rejected(self):
        with pytest.raises(TypeError):
            translate(b'*.txt')
