"""phylo - Filesystem tree walking with cached metadata.

phylo lists and walks directory trees, caching stat results on lightweight
Node handles and filtering entries with globs, regexes or predicates.
Platform rules (case folding, hidden files, separators) come from an
explicit ``Platform`` value that defaults to the running host.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from phylo.sync import walk, list_dir

Asynchronous:
    from phylo.aio import walk_async, list_dir_async
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both implementations share the same Node, option and stat types and visit
nodes in the same order.
"""

__version__ = "0.1.0"

from ._common import (
    Platform,
    PhyloError,
    InvalidOptionError,
    GlobSyntaxError,
    OptionSet,
    ListOptions,
    GlobOptions,
    CompiledPattern,
    compile_pattern,
    Attribute,
    AttributeSet,
    StatKind,
    StatErrorCode,
    StatSnapshot,
    StatError,
    StatResult,
    Node,
    compare,
    equals,
    TraversalState,
)

# Re-export submodules for convenient access
from . import sync
from . import aio

__all__ = [
    "__version__",
    "Platform",
    "PhyloError",
    "InvalidOptionError",
    "GlobSyntaxError",
    "OptionSet",
    "ListOptions",
    "GlobOptions",
    "CompiledPattern",
    "compile_pattern",
    "Attribute",
    "AttributeSet",
    "StatKind",
    "StatErrorCode",
    "StatSnapshot",
    "StatError",
    "StatResult",
    "Node",
    "compare",
    "equals",
    "TraversalState",
    "sync",
    "aio",
]
