"""Immutable filesystem metadata: attribute sets, stat snapshots and errors.

A stat request yields either a ``StatSnapshot`` (the path exists and could
be examined) or a ``StatError`` (the path is missing or access was denied).
Both expose the same read-only fields so callers can inspect a result
without branching; a ``StatError`` reports zero sizes and timestamps, no
kind and the empty ``AttributeSet``.

Nothing in this module performs I/O. Acquisition lives in ``phylo.sync.stat``
and ``phylo.aio.stat``.
"""

import enum
import errno
import os
import stat as stat_module
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Union

from .platform import Platform


class Attribute(enum.IntFlag):
    """Platform file attribute bits, in canonical rendering order."""
    ARCHIVE = 1
    COMPRESSED = 2
    ENCRYPTED = 4
    HIDDEN = 8
    OFFLINE = 16
    READ_ONLY = 32
    SYSTEM = 64


_LETTERS = (
    (Attribute.ARCHIVE, 'A'),
    (Attribute.COMPRESSED, 'C'),
    (Attribute.ENCRYPTED, 'E'),
    (Attribute.HIDDEN, 'H'),
    (Attribute.OFFLINE, 'O'),
    (Attribute.READ_ONLY, 'R'),
    (Attribute.SYSTEM, 'S'),
)

# Windows FILE_ATTRIBUTE_* bits as reported in ``st_file_attributes``
_NATIVE = (
    (stat_module.FILE_ATTRIBUTE_ARCHIVE, Attribute.ARCHIVE),
    (stat_module.FILE_ATTRIBUTE_COMPRESSED, Attribute.COMPRESSED),
    (stat_module.FILE_ATTRIBUTE_ENCRYPTED, Attribute.ENCRYPTED),
    (stat_module.FILE_ATTRIBUTE_HIDDEN, Attribute.HIDDEN),
    (stat_module.FILE_ATTRIBUTE_OFFLINE, Attribute.OFFLINE),
    (stat_module.FILE_ATTRIBUTE_READONLY, Attribute.READ_ONLY),
    (stat_module.FILE_ATTRIBUTE_SYSTEM, Attribute.SYSTEM),
)

_ALL_BITS = 0x7F


class AttributeSet:
    """Interned, immutable set of ``Attribute`` flags.

    ``AttributeSet(mask)`` always returns the same object for the same mask,
    so identity comparison is valid. ``text`` renders the set bits as
    letters, e.g. ``"AH"`` for archive + hidden.
    """

    __slots__ = ('_mask', '_text')

    _interned: ClassVar[Dict[int, 'AttributeSet']] = {}
    NONE: ClassVar['AttributeSet']

    def __new__(cls, mask: int = 0) -> 'AttributeSet':
        mask = int(mask) & _ALL_BITS
        existing = cls._interned.get(mask)
        if existing is not None:
            return existing

        instance = super().__new__(cls)
        object.__setattr__(instance, '_mask', mask)
        object.__setattr__(instance, '_text',
                           ''.join(letter for bit, letter in _LETTERS if mask & bit))
        return cls._interned.setdefault(mask, instance)

    @classmethod
    def from_native(cls, native: int) -> 'AttributeSet':
        """Build from Windows ``FILE_ATTRIBUTE_*`` bits."""
        mask = 0
        for native_bit, bit in _NATIVE:
            if native & native_bit:
                mask |= bit
        return cls(mask)

    @classmethod
    def from_text(cls, text: str) -> 'AttributeSet':
        """Build from canonical letters such as ``"HR"``."""
        mask = 0
        for bit, letter in _LETTERS:
            if letter in text:
                mask |= bit
        return cls(mask)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (AttributeSet, (self._mask,))

    @property
    def mask(self) -> int:
        return self._mask

    @property
    def text(self) -> str:
        return self._text

    @property
    def archive(self) -> bool:
        return bool(self._mask & Attribute.ARCHIVE)

    @property
    def compressed(self) -> bool:
        return bool(self._mask & Attribute.COMPRESSED)

    @property
    def encrypted(self) -> bool:
        return bool(self._mask & Attribute.ENCRYPTED)

    @property
    def hidden(self) -> bool:
        return bool(self._mask & Attribute.HIDDEN)

    @property
    def offline(self) -> bool:
        return bool(self._mask & Attribute.OFFLINE)

    @property
    def read_only(self) -> bool:
        return bool(self._mask & Attribute.READ_ONLY)

    @property
    def system(self) -> bool:
        return bool(self._mask & Attribute.SYSTEM)

    def __contains__(self, item: Attribute) -> bool:
        return bool(self._mask & item)

    def __bool__(self) -> bool:
        return self._mask != 0

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"AttributeSet({self._text!r})"


AttributeSet.NONE = AttributeSet(0)


class StatKind(enum.Enum):
    """What a path refers to."""
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    BLOCK_DEVICE = "block_device"
    CHARACTER_DEVICE = "character_device"
    FIFO = "fifo"
    SOCKET = "socket"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: int) -> 'StatKind':
        """Classify an ``st_mode`` value."""
        if stat_module.S_ISREG(mode):
            return cls.FILE
        if stat_module.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat_module.S_ISLNK(mode):
            return cls.SYMLINK
        if stat_module.S_ISBLK(mode):
            return cls.BLOCK_DEVICE
        if stat_module.S_ISCHR(mode):
            return cls.CHARACTER_DEVICE
        if stat_module.S_ISFIFO(mode):
            return cls.FIFO
        if stat_module.S_ISSOCK(mode):
            return cls.SOCKET
        return cls.UNKNOWN


class StatErrorCode(enum.Enum):
    """Expected reasons a stat can fail."""
    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"


_ERRNO_CODES = {
    errno.ENOENT: StatErrorCode.NOT_FOUND,
    errno.ENOTDIR: StatErrorCode.NOT_FOUND,
    errno.EACCES: StatErrorCode.ACCESS_DENIED,
    errno.EPERM: StatErrorCode.ACCESS_DENIED,
}


@dataclass(frozen=True)
class StatSnapshot:
    """Successful, point-in-time metadata for one path.

    Times are POSIX timestamps in seconds. ``created`` is the birth time
    where the platform reports one, otherwise ``st_ctime``.
    """

    kind: StatKind
    size: int
    mode: int
    created: float
    accessed: float
    modified: float
    changed: float
    attributes: AttributeSet = AttributeSet.NONE

    ok: ClassVar[bool] = True
    error: ClassVar[Optional[StatErrorCode]] = None

    @classmethod
    def from_os(cls, st: os.stat_result, platform: Platform) -> 'StatSnapshot':
        """Convert an ``os.stat_result``.

        Native attributes are only read on Windows-family platforms; every
        other platform reports ``AttributeSet.NONE``.
        """
        attributes = AttributeSet.NONE
        if platform.windows:
            attributes = AttributeSet.from_native(getattr(st, 'st_file_attributes', 0))

        return cls(
            kind=StatKind.from_mode(st.st_mode),
            size=st.st_size,
            mode=st.st_mode,
            created=getattr(st, 'st_birthtime', st.st_ctime),
            accessed=st.st_atime,
            modified=st.st_mtime,
            changed=st.st_ctime,
            attributes=attributes,
        )

    @property
    def is_dir(self) -> bool:
        return self.kind is StatKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is StatKind.FILE

    @property
    def is_symlink(self) -> bool:
        return self.kind is StatKind.SYMLINK


@dataclass(frozen=True)
class StatError:
    """A stat that failed for an expected reason.

    Instances carry nothing location-specific, so one instance per code is
    shared process-wide (see ``StatError.of``).
    """

    code: StatErrorCode

    kind: ClassVar[Optional[StatKind]] = None
    size: ClassVar[int] = 0
    mode: ClassVar[int] = 0
    created: ClassVar[float] = 0.0
    accessed: ClassVar[float] = 0.0
    modified: ClassVar[float] = 0.0
    changed: ClassVar[float] = 0.0
    attributes: ClassVar[AttributeSet] = AttributeSet.NONE

    ok: ClassVar[bool] = False
    is_dir: ClassVar[bool] = False
    is_file: ClassVar[bool] = False
    is_symlink: ClassVar[bool] = False

    _interned: ClassVar[Dict[StatErrorCode, 'StatError']] = {}

    @classmethod
    def of(cls, code: StatErrorCode) -> 'StatError':
        """Return the shared instance for ``code``."""
        return cls._interned[code]

    @classmethod
    def from_os_error(cls, exc: OSError) -> Optional['StatError']:
        """Map an expected ``OSError`` to its shared instance.

        Returns None when the error is not an expected absence/permission
        condition; the caller should re-raise it.
        """
        code = _ERRNO_CODES.get(exc.errno)
        return None if code is None else cls._interned[code]

    @property
    def error(self) -> StatErrorCode:
        return self.code


StatError._interned.update({code: StatError(code) for code in StatErrorCode})

StatResult = Union[StatSnapshot, StatError]


class StatCache:
    """Per-node store of stat results, keyed by ``follow_links``.

    ``pending`` holds in-flight asynchronous lookups so concurrent requests
    for the same node and kind share one system call.
    """

    __slots__ = ('_results', 'pending')

    def __init__(self):
        self._results: Dict[bool, StatResult] = {}
        self.pending: Dict[bool, Any] = {}

    def get(self, follow_links: bool = True) -> Optional[StatResult]:
        return self._results.get(follow_links)

    def put(self, follow_links: bool, result: StatResult) -> StatResult:
        self._results[follow_links] = result
        return result

    def discard(self, follow_links: Optional[bool] = None) -> None:
        """Forget one cached kind, or both when ``follow_links`` is None."""
        if follow_links is None:
            self._results.clear()
        else:
            self._results.pop(follow_links, None)

    def __contains__(self, follow_links: bool) -> bool:
        return follow_links in self._results

    def __len__(self) -> int:
        return len(self._results)
