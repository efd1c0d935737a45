"""Configuration re-export.

Platform presets and the parsed option types live in the _common package;
this module gives them a stable public import path.
"""

from ._common.platform import Platform
from ._common.options import OptionSet, ListOptions, GlobOptions, parse_flags

__all__ = [
    'Platform',
    'OptionSet',
    'ListOptions',
    'GlobOptions',
    'parse_flags',
]
