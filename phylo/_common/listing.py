"""Filtering and ordering of directory listings.

Both listers enumerate names and acquire stats in their own execution
model, then hand the results here so the selection rules are identical.
"""

from typing import List, Optional, Sequence

from .node import Node
from .options import ListOptions
from .ordering import sort_key
from .pattern import CompiledPattern
from .platform import Platform
from .stats import StatResult


def select_children(children: Sequence[Node],
                    results: Sequence[Optional[StatResult]],
                    options: ListOptions,
                    platform: Platform,
                    matcher: Optional[CompiledPattern] = None) -> List[Node]:
    """Apply kind, hidden and matcher filters, then sort.

    Args:
        children: Child nodes in enumeration order
        results: Stat result per child (None entries when no stat was
            needed), acquired link-aware when ``options.link_stat`` is set
        options: Parsed listing options
        platform: Platform deciding dot-hiding and case folding
        matcher: Optional predicate over ``(name, node)``

    Returns:
        The selected children. Stats stay cached on them only when the
        options ask for it.
    """
    hide_dots = options.hides_dots(platform)
    kept = []

    for child, st in zip(children, results):
        if options.files_only and st.is_dir:
            continue
        if options.dirs_only and not st.is_dir:
            continue

        if not options.show_all:
            if hide_dots and child.name.startswith('.'):
                continue
            if st is not None and st.attributes.hidden:
                continue

        if matcher is not None and not matcher(child.name, child):
            continue

        kept.append((child, st))

    if options.ordered:
        kept.sort(key=lambda pair: sort_key(pair[0], pair[1],
                                            platform=platform,
                                            files_first=options.files_first))

    if not options.retains_stat:
        follow_links = not options.link_stat
        for child in children:
            child.stats.discard(follow_links)

    return [child for child, _ in kept]
