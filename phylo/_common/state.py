"""Per-walk traversal state and hook plumbing shared by sync and aio walkers."""

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Union

from .node import Node
from .options import ListOptions
from .pattern import CompiledPattern, PatternLike, compile_pattern
from .platform import Platform


@dataclass
class TraversalState:
    """Mutable state for one walk.

    Hooks receive this object and may set ``stop`` to end the walk; no
    further listing, descent or hook call starts once it is set.

    Attributes:
        root: Node the walk started from
        at: Node most recently passed to a hook
        previous: Node passed to the hook before ``at``
        stack: Directories being descended, ordered from the root down
        stop: Cancellation flag
    """

    root: Node
    at: Optional[Node] = None
    previous: Optional[Node] = None
    stack: List[Node] = field(default_factory=list)
    stop: bool = False

    @property
    def depth(self) -> int:
        """Number of directories between the root and ``at`` (root is 0)."""
        return len(self.stack)

    def enter(self, node: Node) -> None:
        self.previous = self.at
        self.at = node


BeforeHook = Callable[[Node, TraversalState], Any]
AfterHook = Callable[[Node, TraversalState], Any]
TipTest = Union[str, Callable[[Node, TraversalState], Any]]


def walk_options(mode: Union[str, ListOptions, None]) -> ListOptions:
    """Listing options for a walk: the caller's mode with stats cached.

    Stats are needed on every child to decide whether to descend, so the
    walk always lists in ``s`` mode.
    """
    if isinstance(mode, ListOptions):
        return mode if mode.stat else dataclasses.replace(mode, stat=True)
    return ListOptions.parse('s' + (mode or ''))


def walk_matcher(matcher: Optional[PatternLike],
                 platform: Platform) -> Optional[CompiledPattern]:
    if matcher is None:
        return None
    return compile_pattern(matcher, platform=platform)
