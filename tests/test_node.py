"""Tests for Node path handling."""

import os

import pytest

from phylo import Node
from phylo._common.node import as_node


class TestNodeNames:
    """Name, extension and trailing separators."""

    def test_name_and_extension(self):
        node = Node('/srv', 'app', 'config.json')
        assert node.name == 'config.json'
        assert node.extension == 'json'

    def test_dot_file_extension(self):
        assert Node('/home/.bashrc').extension == 'bashrc'

    def test_no_extension(self):
        assert Node('/usr/bin/env').extension == ''

    def test_trailing_separator(self):
        node = Node('/srv/app/')
        assert node.name == 'app'
        assert node.unterminated_path() == '/srv/app'
        assert node.path == '/srv/app/'

    def test_root_unterminated_path(self):
        assert Node('/').unterminated_path() == '/'


class TestNodeRelations:
    """Parent, join, child and relative paths."""

    def test_parent(self):
        assert Node('/srv/app/x.txt').parent == Node('/srv/app')
        assert Node('/srv/app/').parent == Node('/srv')

    def test_root_has_no_parent(self):
        assert Node('/').parent is None

    def test_bare_name_parent_uses_cwd(self):
        assert Node('foo').parent == Node(os.getcwd())

    def test_child_has_parent_preassigned(self):
        root = Node('/srv')
        child = root.child('app')
        assert child.parent is root
        assert child.path == os.path.join('/srv', 'app')

    def test_join(self):
        assert Node('/srv').join('a', 'b') == Node(os.path.join('/srv', 'a', 'b'))

    def test_relative_to(self, tmp_path):
        root = Node(tmp_path)
        assert root.join('a', 'b').relative_to(root) == 'a/b'
        assert root.relative_to(tmp_path) == ''

    def test_absolute(self):
        node = Node('rel')
        assert not node.is_absolute()
        assert node.absolute().is_absolute()


class TestNodeValue:
    """Equality, hashing, coercion and immutability."""

    def test_equality_ignores_trailing_separator(self):
        assert Node('/srv/app/') == Node('/srv/app')
        assert hash(Node('/srv/app/')) == hash(Node('/srv/app'))
        assert Node('/srv/app') != Node('/srv/other')

    def test_fspath(self, tmp_path):
        (tmp_path / 'f.txt').write_text('hello')
        with open(Node(tmp_path, 'f.txt')) as handle:
            assert handle.read() == 'hello'

    def test_from_(self):
        node = Node('/a')
        assert Node.from_(node) is node
        assert Node.from_('/a') == node
        assert Node.from_('') is None
        assert Node.from_(None) is None

    def test_as_node_rejects_empty(self):
        with pytest.raises(ValueError):
            as_node('')

    def test_requires_parts(self):
        with pytest.raises(TypeError):
            Node()

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Node('/a').stats = None

    def test_str_and_repr(self):
        assert str(Node('/a/b')) == '/a/b'
        assert repr(Node('/a/b')) == "Node('/a/b')"

    def test_cwd(self):
        assert Node.cwd() == Node(os.getcwd())
