"""Async depth-first walk over a directory tree.

Same visiting order and hook contract as ``phylo.sync.walk``. Hooks may be
plain functions or coroutines; awaitable results are awaited before the
walk continues. Siblings are visited one at a time so hooks observe the
same order as the sync walker.
"""

import inspect
import logging
from typing import Any, List, Optional, Union

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
from .lister import list_dir_async
from .search import has_async
from .stat import stat_of_async

logger = logging.getLogger(__name__)


async def _resolve(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


async def walk_async(root: PathLike,
                     before: Optional[BeforeHook] = None,
                     after: Optional[AfterHook] = None,
                     *,
                     mode: Union[str, ListOptions, None] = None,
                     matcher: Optional[PatternLike] = None,
                     platform: Optional[Platform] = None,
                     max_concurrent: int = 100) -> TraversalState:
    """Walk the tree rooted at ``root`` in pre-order.

    Args:
        root: Starting node or path
        before: ``before(node, state)``, sync or async. Returning ``False``
            skips that node's children.
        after: ``after(node, state)``, sync or async
        mode: Listing option letters used for every directory
        matcher: Glob, regex or predicate ``(name, node)``. Hooks only fire
            for matching nodes; directories are descended regardless.
        platform: Platform deciding hiding, case and separator rules
        max_concurrent: Maximum concurrent stat calls per listing

    Returns:
        The TraversalState after the walk completed or was stopped
    """
    platform = Platform.resolve(platform)
    root = as_node(root)
    options = walk_options(mode)
    test = walk_matcher(matcher, platform)
    follow_links = not options.link_stat
    state = TraversalState(root=root)

    async def visit(node: Node) -> None:
        if state.stop:
            return

        state.enter(node)
        matched = test is None or test(node.name, node)

        descend = True
        if matched and before is not None:
            descend = await _resolve(before(node, state)) is not False
        if state.stop:
            return

        # The root is always resolved through links; l mode applies to listed entries
        follow = follow_links or node is root
        if descend and (await stat_of_async(node, follow, platform=platform)).is_dir:
            children = await list_dir_async(node, options, platform=platform,
                                            max_concurrent=max_concurrent)
            state.stack.append(node)
            for child in children or ():
                if state.stop:
                    break
                await visit(child)
            state.stack.pop()

            if state.stop:
                return

        if matched and after is not None:
            await _resolve(after(node, state))

    logger.debug("Walking %s (mode=%r)", root, options.source)
    await visit(root)
    if state.stop:
        logger.debug("Walk of %s stopped at %s", root, state.at)
    return state


async def tips_async(root: PathLike,
                     test: TipTest,
                     *,
                     mode: Union[str, ListOptions, None] = None,
                     platform: Optional[Platform] = None) -> List[Node]:
    """Async version of ``phylo.sync.tips``; ``test`` may be a coroutine."""
    if isinstance(test, str):
        name = test
        test = lambda node, state: has_async(node, name, platform=platform)

    found: List[Node] = []

    async def before(node: Node, state: TraversalState) -> bool:
        if await _resolve(test(node, state)):
            found.append(node)
            return False
        return True

    await walk_async(root, before, mode=mode, platform=platform)
    return found
