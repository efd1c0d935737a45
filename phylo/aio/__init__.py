"""Asynchronous implementation of phylo.

All components here use async/await. Filesystem calls run in worker
threads so the event loop is never blocked.
"""

# Stat acquisition and classification
from .stat import (
    stat_of_async,
    refresh_async,
    exists_async,
    is_dir_async,
    is_file_async,
    is_symlink_async,
    is_block_device_async,
    is_char_device_async,
    is_fifo_async,
    is_socket_async,
    is_hidden_async,
)

# Relative checks and upward search
from .search import (
    has_async,
    has_dir_async,
    has_file_async,
    up_async,
    up_dir_async,
    up_file_async,
    up_to_async,
    up_to_dir_async,
    up_to_file_async,
)

# Listing and traversal
from .lister import list_dir_async
from .walker import walk_async, tips_async

__all__ = [
    # Stat
    'stat_of_async',
    'refresh_async',
    'exists_async',
    'is_dir_async',
    'is_file_async',
    'is_symlink_async',
    'is_block_device_async',
    'is_char_device_async',
    'is_fifo_async',
    'is_socket_async',
    'is_hidden_async',
    # Search
    'has_async',
    'has_dir_async',
    'has_file_async',
    'up_async',
    'up_dir_async',
    'up_file_async',
    'up_to_async',
    'up_to_dir_async',
    'up_to_file_async',
    # Traversal
    'list_dir_async',
    'walk_async',
    'tips_async',
]
