"""Blocking directory listing."""

import logging
import os
from typing import List, Optional, Union

from .._common.listing import select_children
from .._common.node import Node, PathLike, as_node
from .._common.options import ListOptions
from .._common.pattern import PatternLike, compile_pattern
from .._common.platform import Platform
from .._common.stats import StatError
from .stat import stat_entry

logger = logging.getLogger(__name__)


def list_dir(node: PathLike,
             mode: Union[str, ListOptions, None] = None,
             matcher: Optional[PatternLike] = None,
             *,
             platform: Optional[Platform] = None) -> Optional[List[Node]]:
    """List the children of a directory.

    The ``mode`` string adjusts what is reported (see ``ListOptions``)::

        list_dir(root)           # non-hidden entries, directories first
        list_dir(root, 'A')      # include hidden entries
        list_dir(root, 'As-o')   # include hidden, keep stats, unsorted
        list_dir(root, 'f', '*.py')

    Args:
        node: Directory to list
        mode: Listing option letters or parsed ``ListOptions``
        matcher: Glob, regex or predicate ``(name, node)`` applied to each child
        platform: Platform deciding hiding and case rules

    Returns:
        Child nodes with their parent pre-assigned, or None when the
        directory could not be enumerated (missing or access denied)

    Raises:
        OSError: Enumeration failed and ``T`` (strict) was given, or the
            failure was not an absence/permission condition
    """
    options = ListOptions.parse(mode)
    platform = Platform.resolve(platform)
    node = as_node(node)
    test = compile_pattern(matcher, platform=platform) if matcher is not None else None

    try:
        with os.scandir(node.path) as scan:
            entries = list(scan)
    except OSError as exc:
        if options.strict or StatError.from_os_error(exc) is None:
            raise
        logger.debug("Cannot list %s: %s", node.path, exc)
        return None

    children = [node.child(entry.name) for entry in entries]

    if options.needs_stat(platform):
        follow_links = not options.link_stat
        results = [stat_entry(child, entry, follow_links, platform=platform)
                   for child, entry in zip(children, entries)]
    else:
        results = [None] * len(children)

    return select_children(children, results, options, platform, test)
