"""Exception types raised by phylo.

Expected filesystem conditions (a missing path, a denied stat) are never
raised; they are reported as ``StatError`` values. The exceptions here
signal programmer errors such as malformed mode strings or glob patterns.
"""


class PhyloError(Exception):
    """Base class for all phylo errors."""


class InvalidOptionError(PhyloError, ValueError):
    """Raised when a mode string contains an unknown flag or a bad modifier.

    Attributes:
        mode: The full mode string being parsed
        position: Index of the offending character
    """

    def __init__(self, message: str, mode: str = '', position: int = -1):
        super().__init__(message)
        self.mode = mode
        self.position = position


class GlobSyntaxError(PhyloError, ValueError):
    """Raised when a glob pattern cannot be translated (e.g. unclosed ``{``)."""

    def __init__(self, message: str, pattern: str = ''):
        super().__init__(message)
        self.pattern = pattern
