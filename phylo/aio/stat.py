"""Async stat acquisition and single-node classification queries.

System calls run in a worker thread via ``asyncio.to_thread``. Results are
cached on the Node exactly like the sync functions, and concurrent requests
for the same node and kind share one in-flight lookup.
"""

import asyncio
import functools
import os
from typing import Callable, Optional

from .._common.node import Node, PathLike, as_node
from .._common.platform import Platform
from .._common.stats import StatError, StatKind, StatResult, StatSnapshot


async def _capture(call: Callable[..., os.stat_result], follow_links: bool, platform: Platform) -> StatResult:
    try:
        st = await asyncio.to_thread(call, follow_symlinks=follow_links)
    except OSError as exc:
        result = StatError.from_os_error(exc)
        if result is None:
            raise
        return result
    return StatSnapshot.from_os(st, platform)


async def _acquire(path: str, follow_links: bool, platform: Platform) -> StatResult:
    return await _capture(functools.partial(os.stat, path), follow_links, platform)


async def _fetch(node: Node, follow_links: bool, platform: Platform) -> StatResult:
    try:
        result = await _acquire(node.path, follow_links, platform)
        return node.stats.put(follow_links, result)
    finally:
        node.stats.pending.pop(follow_links, None)


async def stat_of_async(node: PathLike,
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

    task = node.stats.pending.get(follow_links)
    if task is None:
        task = asyncio.ensure_future(_fetch(node, follow_links, Platform.resolve(platform)))
        node.stats.pending[follow_links] = task

    # Shielded so one cancelled waiter does not cancel the shared lookup
    return await asyncio.shield(task)


async def stat_entry_async(node: Node,
                           entry: os.DirEntry,
                           follow_links: bool = True,
                           *,
                           platform: Optional[Platform] = None) -> StatResult:
    """Async version of ``phylo.sync.stat.stat_entry``."""
    cached = node.stats.get(follow_links)
    if cached is not None:
        return cached
    result = await _capture(entry.stat, follow_links, Platform.resolve(platform))
    return node.stats.put(follow_links, result)


async def refresh_async(node: PathLike,
                        follow_links: bool = True,
                        *,
                        platform: Optional[Platform] = None) -> StatResult:
    """Re-acquire the stat for ``node`` and replace its cache entry."""
    node = as_node(node)
    result = await _acquire(node.path, follow_links, Platform.resolve(platform))
    return node.stats.put(follow_links, result)


async def exists_async(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return (await stat_of_async(node, platform=platform)).ok


async def is_dir_async(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return (await stat_of_async(node, platform=platform)).is_dir


async def is_file_async(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return (await stat_of_async(node, platform=platform)).is_file


async def is_symlink_async(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return (await stat_of_async(node, follow_links=False, platform=platform)).is_symlink


async def _kind(node: PathLike, platform: Optional[Platform]) -> Optional[StatKind]:
    return (await stat_of_async(node, platform=platform)).kind


async def is_block_device_async(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return await _kind(node, platform) is StatKind.BLOCK_DEVICE


async def is_char_device_async(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return await _kind(node, platform) is StatKind.CHARACTER_DEVICE


async def is_fifo_async(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return await _kind(node, platform) is StatKind.FIFO


async def is_socket_async(node: PathLike, *, platform: Optional[Platform] = None) -> bool:
    return await _kind(node, platform) is StatKind.SOCKET


async def is_hidden_async(node: PathLike,
                          strict: bool = False,
                          *,
                          platform: Optional[Platform] = None) -> bool:
    """Async version of ``phylo.sync.is_hidden``."""
    node = as_node(node)
    platform = Platform.resolve(platform)

    if not (platform.windows and strict) and node.name.startswith('.'):
        return True
    if platform.windows:
        return (await stat_of_async(node, platform=platform)).attributes.hidden
    return False
