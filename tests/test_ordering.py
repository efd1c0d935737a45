"""Tests for node comparison and listing sort keys."""

from phylo import Node, Platform, compare, equals
from phylo._common.ordering import sort_key
from phylo.sync import stat_of


class TestCompare:
    """Three-way comparison of nodes."""

    def test_alphabetical(self):
        assert compare('/a/apple', '/a/banana', platform=Platform.POSIX) == -1
        assert compare('/a/banana', '/a/apple', platform=Platform.POSIX) == 1
        assert compare('/a/x', '/a/x/', platform=Platform.POSIX) == 0

    def test_case_rules(self):
        assert compare('/a/B', '/a/a', platform=Platform.POSIX) == -1
        assert compare('/a/B', '/a/a', platform=Platform.MAC) == 1

    def test_none_sorts_first(self):
        assert compare('/a', None) == 1

    def test_directories_first_with_cached_stats(self, tmp_path):
        (tmp_path / 'zdir').mkdir()
        (tmp_path / 'afile').write_text('x')
        root = Node(tmp_path)
        directory = root.child('zdir')
        regular = root.child('afile')

        assert compare(directory, regular, platform=Platform.POSIX) == 1

        stat_of(directory)
        stat_of(regular)
        assert compare(directory, regular, platform=Platform.POSIX) == -1
        assert compare(regular, directory, platform=Platform.POSIX) == 1

    def test_equals(self):
        assert equals('/a/B', '/a/b', platform=Platform.WINDOWS)
        assert not equals('/a/B', '/a/b', platform=Platform.POSIX)
        assert not equals('/a', None)


class TestSortKey:
    """Grouping used by the lister."""

    def test_groups(self, tmp_path):
        (tmp_path / 'd').mkdir()
        (tmp_path / 'f').write_text('x')
        root = Node(tmp_path)
        d, f = root.child('d'), root.child('f')
        st_d, st_f = stat_of(d), stat_of(f)

        assert sort_key(d, st_d, platform=Platform.POSIX)[0] == 0
        assert sort_key(f, st_f, platform=Platform.POSIX)[0] == 1
        assert sort_key(d, st_d, platform=Platform.POSIX, files_first=True)[0] == 1
        assert sort_key(f, None, platform=Platform.POSIX)[0] == 1
