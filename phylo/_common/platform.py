"""Platform description for path comparison, matching and hiding rules.

The host operating system influences several traversal decisions: whether
file names compare case-insensitively, which characters separate path
segments in glob patterns, and whether the native "hidden" attribute is
consulted. Rather than reading process-wide flags, every component receives
a ``Platform`` value so behavior can be pinned in tests.
"""

import sys
from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass(frozen=True)
class Platform:
    """Immutable description of a filesystem platform.

    Attributes:
        name: Short platform name ("posix", "windows", "darwin")
        windows: True for the Windows family (native attributes, ``\\`` separators)
        case_sensitive: True when file names differ by case
    """

    name: str
    windows: bool = False
    case_sensitive: bool = True

    POSIX: ClassVar['Platform']
    WINDOWS: ClassVar['Platform']
    MAC: ClassVar['Platform']

    @classmethod
    def host(cls) -> 'Platform':
        """Return the preset matching the running interpreter."""
        if sys.platform.startswith('win'):
            return cls.WINDOWS
        if sys.platform == 'darwin':
            return cls.MAC
        return cls.POSIX

    @classmethod
    def resolve(cls, platform: Optional['Platform']) -> 'Platform':
        """Return ``platform`` or the host platform when None."""
        return cls.host() if platform is None else platform

    def fold(self, text: str) -> str:
        """Normalize ``text`` for name comparison on this platform."""
        return text if self.case_sensitive else text.lower()

    @property
    def separators(self) -> str:
        """Characters treated as path separators."""
        return '/\\' if self.windows else '/'


Platform.POSIX = Platform('posix')
Platform.WINDOWS = Platform('windows', windows=True, case_sensitive=False)
Platform.MAC = Platform('darwin', case_sensitive=False)
