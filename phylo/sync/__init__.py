"""Synchronous implementation of phylo.

All components here operate in a blocking, synchronous manner.
"""

# Stat acquisition and classification
from .stat import (
    stat_of,
    refresh,
    exists,
    is_dir,
    is_file,
    is_symlink,
    is_block_device,
    is_char_device,
    is_fifo,
    is_socket,
    is_hidden,
)

# Relative checks and upward search
from .search import (
    has,
    has_dir,
    has_file,
    up,
    up_dir,
    up_file,
    up_to,
    up_to_dir,
    up_to_file,
)

# Listing and traversal
from .lister import list_dir
from .walker import walk, tips

__all__ = [
    # Stat
    'stat_of',
    'refresh',
    'exists',
    'is_dir',
    'is_file',
    'is_symlink',
    'is_block_device',
    'is_char_device',
    'is_fifo',
    'is_socket',
    'is_hidden',
    # Search
    'has',
    'has_dir',
    'has_file',
    'up',
    'up_dir',
    'up_file',
    'up_to',
    'up_to_dir',
    'up_to_file',
    # Traversal
    'list_dir',
    'walk',
    'tips',
]
