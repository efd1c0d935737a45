"""Tests for glob translation and CompiledPattern predicates."""

import re

import pytest

from phylo import CompiledPattern, GlobSyntaxError, InvalidOptionError, Node, Platform, compile_pattern
from phylo._common.pattern import translate


POSIX = Platform.POSIX
WINDOWS = Platform.WINDOWS
MAC = Platform.MAC


def glob(pattern, options=None, platform=POSIX):
    return compile_pattern(pattern, options, platform=platform)


class TestWildcards:
    """Star, question mark and globstar behavior."""

    def test_star_suffix(self):
        match = glob('*.txt')
        assert match('a.txt')
        assert match('.txt')
        assert not match('a/b.txt')
        assert not match('a.txt.bak')

    def test_star_case_follows_platform(self):
        assert glob('*.txt', platform=MAC)('A.TXT')
        assert glob('*.txt', platform=WINDOWS)('A.TXT')
        assert not glob('*.txt', platform=POSIX)('A.TXT')

    def test_globstar_prefix(self):
        match = glob('**/*.js')
        assert match('a/b/c.js')
        assert match('c.js')
        assert not match('c.js.map')

    def test_globstar_suffix_matches_directory_itself(self):
        match = glob('src/**')
        assert match('src')
        assert match('src/a')
        assert match('src/a/b.py')
        assert not match('srcs/a')

    def test_globstar_in_middle(self):
        match = glob('a/**/z')
        assert match('a/z')
        assert match('a/b/c/z')
        assert not match('a/bz')

    def test_lone_globstar_matches_anything(self):
        assert glob('**')('a/b/c')

    def test_extra_stars_fold_into_globstar(self):
        match = glob('***/x')
        assert match('x')
        assert match('a/b/x')

    def test_double_star_inside_segment_is_plain_star(self):
        match = glob('a**b')
        assert match('axyb')
        assert not match('a/b')

    def test_question_mark(self):
        match = glob('?.py')
        assert match('a.py')
        assert not match('ab.py')
        assert not match('/.py')

    def test_greedy_star_crosses_separators(self):
        assert glob('*', 'G')('a/b/c')
        assert glob('a*z', 'G')('a/m/z')

    @pytest.mark.parametrize('pattern', ['*', '?', 'a*', '*b*', '[!x]', '[^a]', '{a,*}', 'a?c',
                                         '[+-0]', '[.-0]'])
    @pytest.mark.parametrize('name', ['/', 'a/b', 'a/c', 'ab/', '/x'])
    def test_separator_free_patterns_never_match_separators(self, pattern, name):
        assert not glob(pattern)(name)


class TestClassesAndGroups:
    """Character classes, alternation and simple mode."""

    def test_character_class(self):
        match = glob('file[0-9].log')
        assert match('file3.log')
        assert not match('filex.log')

    def test_negated_class(self):
        match = glob('[!abc]x')
        assert match('dx')
        assert not match('ax')

    def test_range_spanning_separator_keeps_other_characters(self):
        match = glob('[+-0]')
        assert match('.')
        assert match('0')
        assert not match('/')

    def test_range_spanning_backslash_on_windows(self):
        match = glob('[Z-a]', platform=WINDOWS)
        assert match('_')
        assert not match('\\')

    def test_unclosed_class_is_literal(self):
        assert glob('a[b')('a[b')

    def test_class_with_leading_bracket(self):
        match = glob('[]a]')
        assert match(']')
        assert match('a')

    def test_alternation(self):
        match = glob('*.{js,ts}')
        assert match('x.js')
        assert match('x.ts')
        assert not match('x.py')

    def test_nested_alternation(self):
        match = glob('{a,b{c,d}}')
        assert match('a')
        assert match('bd')
        assert not match('b')

    def test_comma_outside_group_is_literal(self):
        assert glob('a,b')('a,b')

    def test_unclosed_group(self):
        with pytest.raises(GlobSyntaxError) as info:
            glob('{a,b')
        assert info.value.pattern == '{a,b'

    def test_simple_mode_literals(self):
        assert glob('a?', 'S')('a?')
        assert not glob('a?', 'S')('ab')
        assert glob('[ab]', 'S')('[ab]')
        assert glob('{a,b}', 'S')('{a,b}')
        assert glob('*.txt', 'S')('x.txt')

    def test_simple_mode_tolerates_open_brace(self):
        assert glob('{a', 'S')('{a')


class TestEscapingAndAnchoring:
    """Metacharacter escaping, anchors and engine flags."""

    def test_regex_metacharacters_are_literal(self):
        match = glob('a+b(c)$^=!|.txt')
        assert match('a+b(c)$^=!|.txt')
        assert not match('aab(c)$^=!|xtxt')

    def test_backslash_escapes(self):
        match = glob(r'\*.txt')
        assert match('*.txt')
        assert not match('a.txt')

    def test_trailing_backslash_is_literal(self):
        assert glob('a\\')('a\\')

    def test_empty_pattern_matches_only_empty_string(self):
        match = glob('')
        assert match('')
        assert not match('a')

    def test_separator_only_pattern(self):
        match = glob('/')
        assert match('/')
        assert not match('//')

    def test_fragment_search(self):
        match = glob('foo', 'g')
        assert match('xfooy')
        assert not glob('foo')('xfooy')

    def test_manual_case(self):
        assert not glob('*.txt', 'C', platform=MAC)('A.TXT')
        assert glob('*.txt', 'Ci', platform=POSIX)('A.TXT')

    def test_translate_anchors(self):
        assert translate('a', platform=POSIX) == r'\Aa\Z'
        assert translate('a', 'g', platform=POSIX) == 'a'

    def test_invalid_option(self):
        with pytest.raises(InvalidOptionError):
            glob('*', 'x')


class TestWindowsSeparators:
    """Patterns compiled for Windows accept both separators."""

    def test_separator_matches_both(self):
        match = glob('a/b', platform=WINDOWS)
        assert match('a/b')
        assert match('a\\b')

    def test_star_stops_at_backslash(self):
        assert not glob('*', platform=WINDOWS)('a\\b')

    def test_globstar(self):
        match = glob('**/*.js', platform=WINDOWS)
        assert match('a\\b\\c.js')
        assert match('c.js')

    def test_negated_class_excludes_backslash(self):
        assert not glob('[!a]', platform=WINDOWS)('\\')


class TestCompiledPattern:
    """compile_pattern inputs other than glob strings."""

    def test_glob_patterns_are_cached(self):
        assert glob('*.md') is glob('*.md')
        assert glob('*.md') is not glob('*.md', platform=MAC)

    def test_native_regex_is_searched(self):
        match = compile_pattern(re.compile(r'ab'))
        assert match('xaby')
        assert match.regex.pattern == 'ab'

    def test_predicate_receives_name_and_node(self):
        seen = []

        def keep(name, node):
            seen.append((name, node))
            return name.startswith('k')

        match = compile_pattern(keep)
        node = Node('/tmp/keep')
        assert match('keep', node)
        assert not match('drop', node)
        assert seen[0] == ('keep', node)
        assert match.source == 'keep'

    def test_compiled_pattern_passes_through(self):
        compiled = glob('*')
        assert compile_pattern(compiled) is compiled

    def test_result_is_bool(self):
        assert compile_pattern(lambda name, node: 'x')('a') is True

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            compile_pattern(42)

    def test_repr(self):
        assert repr(glob('*.py')) == "CompiledPattern('*.py')"
        assert isinstance(glob('*.py'), CompiledPattern)
