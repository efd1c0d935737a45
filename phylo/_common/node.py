"""Node: a cheap handle to a filesystem location.

The Node is intentionally kept simple - it holds a path string, lazily
derived name/parent/extension, and a private stat cache. Acquiring metadata
and enumerating children is done by the sync and async packages, which
operate on the same Node type.
"""

import os
from typing import Optional, Union

from .stats import StatCache


PathLike = Union[str, os.PathLike, 'Node']

_UNSET = object()


class Node:
    """Immutable reference to a path.

    Two Nodes for the same path compare equal but do not share cached
    metadata: each Node owns its ``stats`` cache.

    Example:
        root = Node('/srv/app')
        config = root.join('etc', 'app.toml')
        config.name        # 'app.toml'
        config.extension   # 'toml'
    """

    __slots__ = ('_path', '_name', '_parent', '_extension', 'stats', '__weakref__')

    def __init__(self, *parts: PathLike, parent: Optional['Node'] = None):
        """Initialize by joining path fragments.

        Args:
            *parts: Path fragments (strings, path-like objects or Nodes)
            parent: Parent node, when already known (e.g. from a listing)
        """
        if not parts:
            raise TypeError("Node requires at least one path fragment")

        path = os.path.join(*(os.fspath(p) for p in parts))
        object.__setattr__(self, '_path', path)
        object.__setattr__(self, '_name', None)
        object.__setattr__(self, '_extension', None)
        object.__setattr__(self, '_parent', _UNSET if parent is None else parent)
        object.__setattr__(self, 'stats', StatCache())

    @classmethod
    def from_(cls, value: Optional[PathLike]) -> Optional['Node']:
        """Return ``value`` as a Node, or None for empty input."""
        if value is None or value == '':
            return None
        if isinstance(value, Node):
            return value
        return cls(value)

    @classmethod
    def cwd(cls) -> 'Node':
        """The current working directory."""
        return cls(os.getcwd())

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Path properties

    @property
    def path(self) -> str:
        return self._path

    def __fspath__(self) -> str:
        return self._path

    def unterminated_path(self) -> str:
        """The path without trailing separators (a bare root is kept)."""
        path = self._path
        stripped = path.rstrip('/' + os.sep)
        if not stripped:
            return path[:1]
        if stripped.endswith(':') and os.sep == '\\':
            return stripped + os.sep
        return stripped

    @property
    def name(self) -> str:
        """Last path segment, ignoring trailing separators."""
        if self._name is None:
            object.__setattr__(self, '_name', os.path.basename(self.unterminated_path()))
        return self._name

    @property
    def extension(self) -> str:
        """Text after the last dot of ``name`` (``''`` when there is none).

        Dot-files count as extensions: ``.json`` has extension ``json``.
        """
        if self._extension is None:
            name = self.name
            index = name.rfind('.')
            object.__setattr__(self, '_extension', name[index + 1:] if index > -1 else '')
        return self._extension

    @property
    def parent(self) -> Optional['Node']:
        """The containing directory, or None at a filesystem root.

        A bare relative name such as ``foo`` resolves its parent through the
        current working directory.
        """
        if self._parent is _UNSET:
            path = self.unterminated_path()
            head = os.path.dirname(path)

            if not head:
                absolute = os.path.abspath(path)
                head = os.path.dirname(absolute)
                parent = None if head == absolute else Node(head)
            elif head == path:
                parent = None
            else:
                parent = Node(head)

            object.__setattr__(self, '_parent', parent)
        return self._parent

    def join(self, *parts: PathLike) -> 'Node':
        """Return a Node for ``parts`` joined beneath this one."""
        return Node(self._path, *parts)

    def child(self, name: str) -> 'Node':
        """Return a child Node with its parent pre-assigned."""
        return Node(self._path, name, parent=self)

    def absolute(self) -> 'Node':
        return Node(os.path.abspath(self._path))

    def is_absolute(self) -> bool:
        return os.path.isabs(self._path)

    def relative_to(self, other: PathLike) -> str:
        """Path of this node relative to ``other``, using ``/`` separators."""
        relative = os.path.relpath(self._path, os.fspath(other))
        if relative == os.curdir:
            return ''
        return relative.replace(os.sep, '/')

    # Dunder methods

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Node):
            return self.unterminated_path() == other.unterminated_path()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.unterminated_path())

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Node({self._path!r})"


def as_node(value: PathLike) -> Node:
    """Coerce a path or Node argument, rejecting empty input."""
    node = Node.from_(value)
    if node is None:
        raise ValueError("A non-empty path is required")
    return node
