"""Async directory listing.

Enumeration runs in a worker thread; per-child stats are requested
concurrently (bounded by a semaphore) since they are independent. The
result is filtered and ordered by the same rules as the sync lister.
"""

import asyncio
import logging
import os
from typing import List, Optional, Union

from .._common.listing import select_children
from .._common.node import Node, PathLike, as_node
from .._common.options import ListOptions
from .._common.pattern import PatternLike, compile_pattern
from .._common.platform import Platform
from .._common.stats import StatError, StatResult
from .stat import stat_entry_async

logger = logging.getLogger(__name__)


def _scan(path: str) -> List[os.DirEntry]:
    with os.scandir(path) as scan:
        return list(scan)


async def list_dir_async(node: PathLike,
                         mode: Union[str, ListOptions, None] = None,
                         matcher: Optional[PatternLike] = None,
                         *,
                         platform: Optional[Platform] = None,
                         max_concurrent: int = 100) -> Optional[List[Node]]:
    """List the children of a directory without blocking the event loop.

    Args:
        node: Directory to list
        mode: Listing option letters or parsed ``ListOptions``
        matcher: Glob, regex or predicate ``(name, node)`` applied to each child
        platform: Platform deciding hiding and case rules
        max_concurrent: Maximum concurrent stat calls for this listing

    Returns:
        Child nodes, or None when the directory could not be enumerated

    Raises:
        OSError: Enumeration failed in strict (``T``) mode, or the failure
            was not an absence/permission condition
    """
    options = ListOptions.parse(mode)
    platform = Platform.resolve(platform)
    node = as_node(node)
    test = compile_pattern(matcher, platform=platform) if matcher is not None else None

    try:
        entries = await asyncio.to_thread(_scan, node.path)
    except OSError as exc:
        if options.strict or StatError.from_os_error(exc) is None:
            raise
        logger.debug("Cannot list %s: %s", node.path, exc)
        return None

    children = [node.child(entry.name) for entry in entries]

    if options.needs_stat(platform):
        follow_links = not options.link_stat
        semaphore = asyncio.Semaphore(max_concurrent)

        async def fetch(child: Node, entry: os.DirEntry) -> StatResult:
            async with semaphore:
                return await stat_entry_async(child, entry, follow_links, platform=platform)

        results = await asyncio.gather(*(fetch(child, entry)
                                         for child, entry in zip(children, entries)))
    else:
        results = [None] * len(children)

    return select_children(children, results, options, platform, test)
