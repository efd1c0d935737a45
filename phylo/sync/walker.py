"""Blocking depth-first walk over a directory tree.

Visits the starting node, then (for directories) each listed child in
order, calling ``before`` on the way down and ``after`` on the way up::

    def show(node, state):
        print('    ' * state.depth + node.name)

    walk(root, show, mode='A')

``before`` returning ``False`` prunes descent into that node. Setting
``state.stop`` from either hook ends the walk without error.
"""

import logging
from typing import List, Optional, Union

from .._common.node import Node, PathLike, as_node
from .._common.options import ListOptions
from .._common.pattern import PatternLike
from .._common.platform import Platform
from .._common.state import (
    AfterHook,
    BeforeHook,
    TipTest,
    TraversalState,
    walk_matcher,
    walk_options,
)
from .lister import list_dir
from .search import has
from .stat import stat_of

logger = logging.getLogger(__name__)


def walk(root: PathLike,
         before: Optional[BeforeHook] = None,
         after: Optional[AfterHook] = None,
         *,
         mode: Union[str, ListOptions, None] = None,
         matcher: Optional[PatternLike] = None,
         platform: Optional[Platform] = None) -> TraversalState:
    """Walk the tree rooted at ``root`` in pre-order.

    Args:
        root: Starting node or path
        before: ``before(node, state)`` called when a node is entered.
            Returning ``False`` skips that node's children.
        after: ``after(node, state)`` called once a node's children are done
        mode: Listing option letters used for every directory
        matcher: Glob, regex or predicate ``(name, node)``, the same form
            ``list_dir`` takes. Hooks only fire for matching nodes;
            directories are descended regardless.
        platform: Platform deciding hiding, case and separator rules

    Returns:
        The TraversalState after the walk completed or was stopped

    Raises:
        OSError: A directory could not be listed in strict (``T``) mode, or
            an unexpected I/O failure occurred
    """
    platform = Platform.resolve(platform)
    root = as_node(root)
    options = walk_options(mode)
    test = walk_matcher(matcher, platform)
    follow_links = not options.link_stat
    state = TraversalState(root=root)

    def visit(node: Node) -> None:
        if state.stop:
            return

        state.enter(node)
        matched = test is None or test(node.name, node)

        descend = True
        if matched and before is not None:
            descend = before(node, state) is not False
        if state.stop:
            return

        # The root is always resolved through links; l mode applies to listed entries
        follow = follow_links or node is root
        if descend and stat_of(node, follow, platform=platform).is_dir:
            state.stack.append(node)
            for child in list_dir(node, options, platform=platform) or ():
                if state.stop:
                    break
                visit(child)
            state.stack.pop()

            if state.stop:
                return

        if matched and after is not None:
            after(node, state)

    logger.debug("Walking %s (mode=%r)", root, options.source)
    visit(root)
    if state.stop:
        logger.debug("Walk of %s stopped at %s", root, state.at)
    return state


def tips(root: PathLike,
         test: TipTest,
         *,
         mode: Union[str, ListOptions, None] = None,
         platform: Optional[Platform] = None) -> List[Node]:
    """Find the shallowest nodes under ``root`` that pass ``test``.

    Descent stops at each match, so nested matches are never visited::

        tips(workspace, 'package.json')   # package roots, not node_modules

    Args:
        root: Starting node or path
        test: Entry name the node must contain, or ``test(node, state)``
        mode: Listing option letters used for the walk
        platform: Platform used for listing and stat calls

    Returns:
        Matching nodes in walk order
    """
    if isinstance(test, str):
        name = test
        test = lambda node, state: has(node, name, platform=platform)

    found: List[Node] = []

    def before(node: Node, state: TraversalState) -> bool:
        if test(node, state):
            found.append(node)
            return False
        return True

    walk(root, before, mode=mode, platform=platform)
    return found
