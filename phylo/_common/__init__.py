"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Platform description and mode-string option sets
- Glob pattern compilation
- Immutable stat snapshots, errors and attribute sets
- The Node handle, comparator and per-walk traversal state

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .platform import Platform
from .errors import PhyloError, InvalidOptionError, GlobSyntaxError
from .options import OptionSet, ListOptions, GlobOptions, parse_flags
from .pattern import CompiledPattern, compile_pattern, translate
from .stats import (
    Attribute,
    AttributeSet,
    StatKind,
    StatErrorCode,
    StatSnapshot,
    StatError,
    StatResult,
    StatCache,
)
from .node import Node
from .ordering import compare, equals, sort_key
from .state import TraversalState

__all__ = [
    'Platform',
    'PhyloError',
    'InvalidOptionError',
    'GlobSyntaxError',
    'OptionSet',
    'ListOptions',
    'GlobOptions',
    'parse_flags',
    'CompiledPattern',
    'compile_pattern',
    'translate',
    'Attribute',
    'AttributeSet',
    'StatKind',
    'StatErrorCode',
    'StatSnapshot',
    'StatError',
    'StatResult',
    'StatCache',
    'Node',
    'compare',
    'equals',
    'sort_key',
    'TraversalState',
]
