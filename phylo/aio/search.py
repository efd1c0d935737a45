"""Async relative existence checks and upward searches."""

import inspect
from typing import Any, Callable, Optional, Union

from .._common.node import Node, PathLike, as_node
from .._common.platform import Platform
from .stat import exists_async, is_dir_async, is_file_async


UpTest = Union[str, Callable[[Node], Any]]


async def has_async(node: PathLike, relative: str, *, platform: Optional[Platform] = None) -> bool:
    return await exists_async(as_node(node).join(relative), platform=platform)


async def has_dir_async(node: PathLike, relative: str, *, platform: Optional[Platform] = None) -> bool:
    return await is_dir_async(as_node(node).join(relative), platform=platform)


async def has_file_async(node: PathLike, relative: str, *, platform: Optional[Platform] = None) -> bool:
    return await is_file_async(as_node(node).join(relative), platform=platform)


async def up_async(node: PathLike,
                   test: UpTest,
                   *,
                   platform: Optional[Platform] = None) -> Optional[Node]:
    """Search ``node`` and its ancestors for the first one passing ``test``.

    ``test`` is an entry name or a predicate that may return an awaitable.
    """
    if isinstance(test, str):
        name = test
        test = lambda candidate: has_async(candidate, name, platform=platform)

    candidate: Optional[Node] = as_node(node)
    while candidate is not None:
        result = test(candidate)
        if inspect.isawaitable(result):
            result = await result
        if result:
            return candidate
        candidate = candidate.parent
    return None


async def up_dir_async(node: PathLike, name: str, *, platform: Optional[Platform] = None) -> Optional[Node]:
    return await up_async(node, lambda candidate: has_dir_async(candidate, name, platform=platform))


async def up_file_async(node: PathLike, name: str, *, platform: Optional[Platform] = None) -> Optional[Node]:
    return await up_async(node, lambda candidate: has_file_async(candidate, name, platform=platform))


def _joined(found: Optional[Node], name: str) -> Optional[Node]:
    return found.join(name) if found is not None else None


async def up_to_async(node: PathLike, name: str, *, platform: Optional[Platform] = None) -> Optional[Node]:
    return _joined(await up_async(node, name, platform=platform), name)


async def up_to_dir_async(node: PathLike, name: str, *, platform: Optional[Platform] = None) -> Optional[Node]:
    return _joined(await up_dir_async(node, name, platform=platform), name)


async def up_to_file_async(node: PathLike, name: str, *, platform: Optional[Platform] = None) -> Optional[Node]:
    return _joined(await up_file_async(node, name, platform=platform), name)
