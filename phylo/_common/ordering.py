"""Node comparison and listing sort order."""

from typing import Optional, Tuple

from .node import Node, PathLike
from .platform import Platform
from .stats import StatResult


def _name_key(node: Node, platform: Platform) -> str:
    return platform.fold(node.unterminated_path())


def compare(a: PathLike, b: Optional[PathLike], *, platform: Optional[Platform] = None) -> int:
    """Three-way comparison of two paths.

    Trailing separators are ignored and names are case-folded on
    case-insensitive platforms. When both nodes carry a cached stat and
    share a parent, directories sort before files.

    Returns:
        -1, 0 or 1
    """
    platform = Platform.resolve(platform)
    a = Node.from_(a)
    b = Node.from_(b)
    if b is None:
        return 1

    st_a = a.stats.get(True) or a.stats.get(False)
    st_b = b.stats.get(True) or b.stats.get(False)
    if st_a is not None and st_b is not None and st_a.is_dir != st_b.is_dir:
        if a.parent is not None and a.parent == b.parent:
            return -1 if st_a.is_dir else 1

    key_a = _name_key(a, platform)
    key_b = _name_key(b, platform)
    return (key_a > key_b) - (key_a < key_b)


def equals(a: PathLike, b: Optional[PathLike], *, platform: Optional[Platform] = None) -> bool:
    """True when ``a`` and ``b`` name the same path under ``platform`` rules."""
    return compare(a, b, platform=platform) == 0


def sort_key(node: Node,
             st: Optional[StatResult],
             *,
             platform: Platform,
             files_first: bool = False) -> Tuple[int, str]:
    """Key that groups directories and files, then orders by folded name.

    Args:
        node: Node being sorted
        st: The stat result used for grouping (None groups as a file)
        platform: Platform deciding case folding
        files_first: Put non-directories before directories
    """
    is_dir = st is not None and st.is_dir
    group = int(is_dir) if files_first else int(not is_dir)
    return group, _name_key(node, platform)
