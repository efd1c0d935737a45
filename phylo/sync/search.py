"""Relative existence checks and upward searches.

    has(root, 'package.json')          # root/package.json exists
    up(Node.cwd(), '.git')             # nearest ancestor containing .git
    up_to_file(here, 'pyproject.toml') # the pyproject.toml itself
"""

from typing import Callable, Optional, Union

from .._common.node import Node, PathLike, as_node
from .._common.platform import Platform
from .stat import exists, is_dir, is_file


UpTest = Union[str, Callable[[Node], bool]]


def has(node: PathLike, relative: str, *, platform: Optional[Platform] = None) -> bool:
    """True when ``relative`` exists beneath ``node``."""
    return exists(as_node(node).join(relative), platform=platform)


def has_dir(node: PathLike, relative: str, *, platform: Optional[Platform] = None) -> bool:
    return is_dir(as_node(node).join(relative), platform=platform)


def has_file(node: PathLike, relative: str, *, platform: Optional[Platform] = None) -> bool:
    return is_file(as_node(node).join(relative), platform=platform)


def up(node: PathLike, test: UpTest, *, platform: Optional[Platform] = None) -> Optional[Node]:
    """Search ``node`` and its ancestors for the first one passing ``test``.

    Args:
        node: Starting location (checked first)
        test: Name of an entry the location must contain, or a predicate
            called with each candidate Node
        platform: Platform used for stat calls

    Returns:
        The matching Node, or None when the filesystem root is passed
    """
    if isinstance(test, str):
        name = test
        test = lambda candidate: has(candidate, name, platform=platform)

    candidate: Optional[Node] = as_node(node)
    while candidate is not None:
        if test(candidate):
            return candidate
        candidate = candidate.parent
    return None


def up_dir(node: PathLike, name: str, *, platform: Optional[Platform] = None) -> Optional[Node]:
    """Nearest location containing a directory called ``name``."""
    return up(node, lambda candidate: has_dir(candidate, name, platform=platform))


def up_file(node: PathLike, name: str, *, platform: Optional[Platform] = None) -> Optional[Node]:
    """Nearest location containing a file called ``name``."""
    return up(node, lambda candidate: has_file(candidate, name, platform=platform))


def _joined(found: Optional[Node], name: str) -> Optional[Node]:
    return found.join(name) if found is not None else None


def up_to(node: PathLike, name: str, *, platform: Optional[Platform] = None) -> Optional[Node]:
    """Like ``up`` but returns the matching entry instead of its container."""
    return _joined(up(node, name, platform=platform), name)


def up_to_dir(node: PathLike, name: str, *, platform: Optional[Platform] = None) -> Optional[Node]:
    return _joined(up_dir(node, name, platform=platform), name)


def up_to_file(node: PathLike, name: str, *, platform: Optional[Platform] = None) -> Optional[Node]:
    return _joined(up_file(node, name, platform=platform), name)
