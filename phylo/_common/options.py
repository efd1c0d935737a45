"""Compact mode-string parsing.

Listing, walking and glob compilation are configured with short flag
strings such as ``"As-o"``. Each letter toggles one boolean, optionally
preceded by ``+`` (enable, the default) or ``-`` (disable)::

    ListOptions.parse('A')      # show hidden entries
    ListOptions.parse('As-o')   # show hidden, cache stat, do not sort

The string syntax only exists at this boundary. Parsing produces a frozen
dataclass with named fields, and parsed instances are interned per exact
mode string so repeated parses share one object.
"""

import threading
from dataclasses import dataclass, field, fields
from typing import Callable, ClassVar, Dict, Mapping, Optional, Union

from cachetools import cached

from .errors import InvalidOptionError
from .platform import Platform


UnknownFlagHandler = Callable[[str, bool, int], None]


def parse_flags(mode: str,
                defaults: Mapping[str, bool],
                on_unknown: Optional[UnknownFlagHandler] = None) -> Dict[str, bool]:
    """Apply the flags in ``mode`` on top of ``defaults``.

    Args:
        mode: Flag string, e.g. ``"A-o"``
        defaults: Map of recognized flag letters to their default values
        on_unknown: Called as ``on_unknown(char, enable, index)`` for letters
            not in ``defaults``. When None, unknown letters are an error.

    Returns:
        New dictionary of flag letter to boolean

    Raises:
        InvalidOptionError: Two modifiers in a row, or an unknown letter
            with no handler
    """
    flags = dict(defaults)
    enable: Optional[bool] = None

    for index, char in enumerate(mode):
        if char in '+-':
            if enable is not None:
                raise InvalidOptionError(
                    f'Invalid mode modifier "{mode[index - 1:]}"', mode, index)
            enable = char == '+'
            continue

        value = enable is not False
        enable = None

        if char in flags:
            flags[char] = value
        elif on_unknown is None:
            raise InvalidOptionError(f'Invalid mode flag "{char}"', mode, index)
        else:
            on_unknown(char, value, index)

    return flags


_intern_lock = threading.Lock()


@cached(cache={}, lock=_intern_lock)
def _intern(cls, mode: str) -> 'OptionSet':
    return cls._build(mode)


@dataclass(frozen=True)
class OptionSet:
    """Base class for parsed mode strings.

    Subclasses declare their boolean fields (with defaults) and a ``FLAGS``
    map from flag letter to field name.
    """

    FLAGS: ClassVar[Mapping[str, str]] = {}

    source: str = field(default='', compare=False)

    @classmethod
    def parse(cls, mode: Union[str, 'OptionSet', None] = None) -> 'OptionSet':
        """Parse ``mode`` into a shared, frozen instance of ``cls``.

        An instance of ``cls`` is returned unchanged so callers can pass
        either form.
        """
        if isinstance(mode, cls):
            return mode
        if mode is None:
            mode = ''
        if not isinstance(mode, str):
            raise TypeError(f"mode must be a string, not {type(mode).__name__}")
        return _intern(cls, mode)

    @classmethod
    def defaults(cls) -> Dict[str, bool]:
        """Map of flag letter to the field's default value."""
        by_name = {f.name: f.default for f in fields(cls)}
        return {letter: by_name[name] for letter, name in cls.FLAGS.items()}

    @classmethod
    def _build(cls, mode: str) -> 'OptionSet':
        values = parse_flags(mode, cls.defaults())
        return cls(source=mode, **cls._named(values))

    @classmethod
    def _named(cls, values: Mapping[str, bool]) -> Dict[str, bool]:
        return {cls.FLAGS[letter]: value for letter, value in values.items()}

    def __str__(self) -> str:
        return self.source


@dataclass(frozen=True)
class ListOptions(OptionSet):
    """Directory listing options.

    Letters:
        A: list all entries, including hidden ones
        d: list only directories
        f: list only non-directories
        l: acquire and keep link-aware stats (lstat)
        o: sort directories first (on by default)
        O: sort files first
        s: acquire and keep stats
        w: on Windows, the hidden attribute alone decides hidden status
        T: raise when the directory cannot be enumerated
    """

    FLAGS: ClassVar[Mapping[str, str]] = {
        'A': 'show_all',
        'd': 'dirs_only',
        'f': 'files_only',
        'l': 'link_stat',
        'o': 'sort',
        'O': 'files_first',
        's': 'stat',
        'w': 'platform_hidden_only',
        'T': 'strict',
    }

    show_all: bool = False
    dirs_only: bool = False
    files_only: bool = False
    link_stat: bool = False
    sort: bool = True
    files_first: bool = False
    stat: bool = False
    platform_hidden_only: bool = False
    strict: bool = False

    @property
    def retains_stat(self) -> bool:
        """True when acquired stats stay cached on the listed nodes."""
        return self.link_stat or self.stat

    @property
    def ordered(self) -> bool:
        return self.sort or self.files_first

    def hides_dots(self, platform: Platform) -> bool:
        """True when names starting with ``.`` are treated as hidden."""
        return not (platform.windows and self.platform_hidden_only)

    def needs_stat(self, platform: Platform) -> bool:
        """True when listing must stat every child to filter or sort."""
        return (self.retains_stat or self.files_only or self.dirs_only or self.ordered
                or (platform.windows and not self.show_all))


ENGINE_FLAGS: Mapping[str, Optional[str]] = {
    'i': 'ignore_case',
    'g': 'fragment',
    'm': 'multiline',
    's': 'dotall',
    'u': None,  # str patterns are always unicode
}


@dataclass(frozen=True)
class GlobOptions(OptionSet):
    """Glob compilation options.

    Letters:
        C: honor the explicit ``i`` flag instead of the platform's case rules
        G: every ``*`` run matches anything, separators included
        S: simple mode; ``?``, ``[...]`` and ``{...}`` are literals

    Any other letter is forwarded to the regular expression engine:
    ``i`` (ignore case), ``g`` (search for a fragment instead of matching
    the whole name), ``m`` (multiline), ``s`` (dot matches newline) and
    ``u`` (accepted for compatibility).
    """

    FLAGS: ClassVar[Mapping[str, str]] = {
        'C': 'manual_case',
        'G': 'greedy',
        'S': 'simple',
    }

    manual_case: bool = False
    greedy: bool = False
    simple: bool = False

    ignore_case: Optional[bool] = None
    fragment: bool = False
    multiline: bool = False
    dotall: bool = False

    @classmethod
    def _build(cls, mode: str) -> 'GlobOptions':
        engine: Dict[str, bool] = {}

        def forward(char: str, enable: bool, index: int) -> None:
            if char not in ENGINE_FLAGS:
                raise InvalidOptionError(f'Invalid glob flag "{char}"', mode, index)
            name = ENGINE_FLAGS[char]
            if name:
                engine[name] = enable

        values = parse_flags(mode, cls.defaults(), forward)
        return cls(source=mode, **cls._named(values), **engine)

    def case_insensitive(self, platform: Platform) -> bool:
        """Decide case folding for a pattern compiled on ``platform``."""
        if self.manual_case:
            return bool(self.ignore_case)
        return not platform.case_sensitive
