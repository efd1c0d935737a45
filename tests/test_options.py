"""Tests for mode-string parsing into ListOptions and GlobOptions."""

import pytest

from phylo import GlobOptions, InvalidOptionError, ListOptions
from phylo.config import parse_flags


class TestParseFlags:
    """The shared flag-string parser."""

    def test_plain_letter_enables(self):
        assert parse_flags('a', {'a': False, 'b': True}) == {'a': True, 'b': True}

    def test_minus_disables_next_letter_only(self):
        assert parse_flags('-ba', {'a': False, 'b': True}) == {'a': True, 'b': False}

    def test_plus_is_explicit_enable(self):
        assert parse_flags('+a', {'a': False}) == {'a': True}

    def test_defaults_are_not_mutated(self):
        defaults = {'a': False}
        parse_flags('a', defaults)
        assert defaults == {'a': False}

    def test_two_modifiers_in_a_row(self):
        with pytest.raises(InvalidOptionError) as info:
            parse_flags('a+-b', {'a': False, 'b': False})
        assert info.value.position == 2
        assert info.value.mode == 'a+-b'

    def test_unknown_letter_is_an_error(self):
        with pytest.raises(InvalidOptionError, match='Invalid mode flag "z"'):
            parse_flags('az', {'a': False})

    def test_unknown_letter_handler(self):
        seen = []
        parse_flags('x-y', {}, lambda char, enable, index: seen.append((char, enable, index)))
        assert seen == [('x', True, 0), ('y', False, 2)]

    def test_dangling_modifier_is_ignored(self):
        assert parse_flags('a-', {'a': False}) == {'a': True}


class TestListOptions:
    """ListOptions letters and derived properties."""

    def test_defaults(self):
        options = ListOptions.parse('')
        assert options.sort is True
        assert not options.show_all
        assert not options.stat
        assert not options.strict

    def test_none_is_default(self):
        assert ListOptions.parse(None) is ListOptions.parse('')

    def test_parse_is_interned(self):
        assert ListOptions.parse('As-o') is ListOptions.parse('As-o')

    def test_letters(self):
        options = ListOptions.parse('AdflOswT-o')
        assert options.show_all
        assert options.dirs_only
        assert options.files_only
        assert options.link_stat
        assert options.files_first
        assert options.stat
        assert options.platform_hidden_only
        assert options.strict
        assert options.sort is False

    def test_equal_settings_compare_equal(self):
        assert ListOptions.parse('A+') == ListOptions.parse('A')
        assert ListOptions.parse('sA') == ListOptions.parse('As')

    def test_instance_passes_through(self):
        options = ListOptions.parse('A')
        assert ListOptions.parse(options) is options

    def test_str_is_source(self):
        assert str(ListOptions.parse('A-o')) == 'A-o'

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            ListOptions.parse(42)

    def test_rejects_unknown_letter(self):
        with pytest.raises(InvalidOptionError):
            ListOptions.parse('q')

    def test_invalid_option_is_value_error(self):
        with pytest.raises(ValueError):
            ListOptions.parse('++A')

    def test_ordering_and_stat_needs(self):
        from phylo import Platform

        unsorted = ListOptions.parse('-o')
        assert not unsorted.ordered
        assert not unsorted.needs_stat(Platform.POSIX)
        assert unsorted.needs_stat(Platform.WINDOWS)
        assert not ListOptions.parse('A-o').needs_stat(Platform.WINDOWS)
        assert ListOptions.parse('-oO').ordered
        assert ListOptions.parse('l').retains_stat

    def test_hides_dots(self):
        from phylo import Platform

        options = ListOptions.parse('w')
        assert options.hides_dots(Platform.POSIX)
        assert not options.hides_dots(Platform.WINDOWS)


class TestGlobOptions:
    """GlobOptions letters and engine flag forwarding."""

    def test_own_letters(self):
        options = GlobOptions.parse('CGS')
        assert options.manual_case
        assert options.greedy
        assert options.simple

    def test_engine_letters_are_forwarded(self):
        options = GlobOptions.parse('igms')
        assert options.ignore_case is True
        assert options.fragment
        assert options.multiline
        assert options.dotall

    def test_disabled_engine_letter(self):
        assert GlobOptions.parse('-i').ignore_case is False
        assert GlobOptions.parse('').ignore_case is None

    def test_unicode_letter_is_accepted(self):
        assert GlobOptions.parse('u') == GlobOptions.parse('')

    def test_unknown_letter(self):
        with pytest.raises(InvalidOptionError, match='Invalid glob flag "x"'):
            GlobOptions.parse('x')

    def test_interned(self):
        assert GlobOptions.parse('Ci') is GlobOptions.parse('Ci')

    def test_case_rules(self):
        from phylo import Platform

        assert GlobOptions.parse('').case_insensitive(Platform.MAC)
        assert not GlobOptions.parse('').case_insensitive(Platform.POSIX)
        assert not GlobOptions.parse('C').case_insensitive(Platform.WINDOWS)
        assert GlobOptions.parse('Ci').case_insensitive(Platform.POSIX)
        assert not GlobOptions.parse('i').case_insensitive(Platform.POSIX)
