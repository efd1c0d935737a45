"""Blocking stat acquisition and single-node classification queries.

Stats are cached on the Node per ``follow_links`` kind::

    node = Node('setup.py')
    stat_of(node).size          # one os.stat call
    stat_of(node).modified      # served from node.stats
    refresh(node)               # forces a new os.stat

A missing path or a denied stat returns the shared ``StatError`` for that
condition; every other ``OSError`` propagates.
"""

import functools
import os
from typing import Callable, Optional

from .._common.node import Node, PathLike, as_node
from .._common.platform import Platform
from .._common.stats import StatError, StatKind, StatResult, StatSnapshot


def _capture(call: Callable[..., os.stat_result], follow_links: bool, platform: Platform) -> StatResult:
    try:
        st = call(follow_symlinks=follow_links)
    except OSError as exc:
        result = StatError.from_os_error(exc)
        if result is None:
            raise
        return result
    return StatSnapshot.from_os(st, platform)


def _acquire(path: str, follow_links: bool, platform: Platform) -> StatResult:
    return _capture(functools.partial(os.stat, path), follow_links, platform)


def stat_of(node: PathLike,
            follow_links: bool = True,
            *,
            platform: Optional[Platform] = None) -> StatResult:
    """Return the cached stat result for ``node``, acquiring it if needed.

    Args:
        node: Node or path
        follow_links: Stat the link target (True) or the link itself (False)
        platform: Platform deciding whether native attributes are read

    Returns:
        StatSnapshot, or the shared StatError for a missing/denied path

    Raises:
        OSError: For failures other than absence or denied access
    """
    node = as_node(node)
    cached = node.stats.get(follow_links)
    if cached is not None:
        return cached
    result = _acquire(node.path, follow_links, Platform.resolve(platform))
    return node.stats.put(follow_links, result)


def stat_entry(node: Node,
               entry: os.DirEntry,
               follow_links: bool = True,
               *,
               platform: Optional[Platform] = None) -> StatResult:
    """Like ``stat_of`` but acquired through a ``DirEntry`` from ``os.scandir``.

    The entry caches its own stat (and on Windows carries it from the
    directory scan), so listing does not pay a second lookup per child.
    """
    cached = node.stats.get(follow_links)
    if cached is not None:
        return cached
    result = _capture(entry.stat, follow_links, Platform.resolve(platform))
    return node.stats.put(follow_links, result)


def refresh(node: PathLike,
            follow_links: bool = True,
            *,
            platform: Optional[Platform] = None) -> StatResult:
    """Re-acquire the stat for ``node`` and replace its cache entry."""
    node = as_node(node)
    result = _acquire(node.path, follow_links, Platform.resolve(platform))
    return node.stats.put(follow_links, result)


def exists(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return stat_of(node, platform=platform).ok


def is_dir(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return stat_of(node, platform=platform).is_dir


def is_file(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return stat_of(node, platform=platform).is_file


def is_symlink(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return stat_of(node, follow_links=False, platform=platform).is_symlink


def is_block_device(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return stat_of(node, platform=platform).kind is StatKind.BLOCK_DEVICE


def is_char_device(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return stat_of(node, platform=platform).kind is StatKind.CHARACTER_DEVICE


def is_fifo(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return stat_of(node, platform=platform).kind is StatKind.FIFO


def is_socket(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return stat_of(node, platform=platform).kind is StatKind.SOCKET


def is_hidden(node: PathLike, strict: bool = False, *, platform: Optional[Platform] = None) -> bool:
    """Check whether ``node`` is hidden.

    A leading dot hides a name on every platform. On Windows the hidden
    attribute also counts, and ``strict`` makes it the only criterion to
    match what Explorer shows.
    """
    node = as_node(node)
    platform = Platform.resolve(platform)

    if not (platform.windows and strict) and node.name.startswith('.'):
        return True
    if platform.windows:
        return stat_of(node, platform=platform).attributes.hidden
    return False
