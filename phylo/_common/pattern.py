"""Glob pattern compilation.

Translates wildcard expressions into regular expressions and wraps them as
predicates over ``(name, node)``::

    is_source = compile_pattern('**/*.py')
    is_source('pkg/mod.py')    # True
    is_source('pkg/mod.pyc')   # False

Supported syntax:

    ?        one character other than a separator
    *        any run of characters other than a separator
    **       zero or more whole path segments, when it forms its own segment
             (a pattern that is only ``**`` matches anything, separators included)
    [abc]    character class, never matching a separator (``[!abc]`` or
             ``[^abc]`` negates)
    {a,b}    alternation
    \\x       the character ``x`` literally

Option letters (see ``GlobOptions``) switch to greedy stars, literal
"simple" mode, manual case handling or fragment search.
"""

import re
import threading
from typing import Any, Callable, Optional, Pattern, Union

from cachetools import cached

from .errors import GlobSyntaxError
from .options import GlobOptions
from .platform import Platform


Predicate = Callable[[str, Any], Any]
PatternLike = Union[str, Pattern, Predicate, 'CompiledPattern']


class CompiledPattern:
    """Stateless predicate ``(name, node) -> bool``.

    Wraps either a compiled glob, a native regular expression (searched
    against the name) or an arbitrary callable.

    Attributes:
        source: The glob text, regex source or callable name
        regex: The compiled regular expression, None for callables
    """

    __slots__ = ('source', 'regex', '_predicate')

    def __init__(self,
                 predicate: Predicate,
                 source: Optional[str] = None,
                 regex: Optional[Pattern] = None):
        self._predicate = predicate
        self.source = source
        self.regex = regex

    @classmethod
    def from_regex(cls, regex: Pattern, source: Optional[str] = None) -> 'CompiledPattern':
        search = regex.search
        return cls(lambda name, node=None: search(name) is not None,
                   source=regex.pattern if source is None else source,
                   regex=regex)

    def __call__(self, name: str, node: Any = None) -> bool:
        return bool(self._predicate(name, node))

    def __repr__(self) -> str:
        return f"CompiledPattern({self.source!r})"


def _class_body(body: str, separators: str) -> str:
    """Translate the inside of a ``[...]`` class.

    A negated class never matches a separator.
    """
    out = []
    index = 0
    if body[:1] in ('!', '^'):
        out.append('^' + ''.join(re.escape(s) for s in separators))
        index = 1
    start = index
    last = len(body) - 1

    while index <= last:
        char = body[index]
        if char == '\\' and index < last:
            out.append(re.escape(body[index + 1]))
            index += 2
            continue
        if char == '-' and start < index < last:
            out.append('-')
        else:
            out.append(re.escape(char))
        index += 1

    return ''.join(out)


def _class_end(pattern: str, start: int) -> int:
    """Index of the ``]`` closing the class opened at ``start``, or -1."""
    index = start + 1
    n = len(pattern)
    if index < n and pattern[index] in '!^':
        index += 1
    if index < n and pattern[index] == ']':
        index += 1
    while index < n:
        char = pattern[index]
        if char == '\\':
            index += 2
            continue
        if char == ']':
            return index
        index += 1
    return -1


def translate(pattern: str,
              options: Union[str, GlobOptions, None] = None,
              *,
              platform: Optional[Platform] = None) -> str:
    """Translate a glob pattern into regular expression source.

    The result is anchored at both ends unless the fragment flag (``g``) is
    set. Case and other engine flags are not embedded; see
    ``compile_pattern``.

    Raises:
        GlobSyntaxError: An alternation group is left open
    """
    opts = GlobOptions.parse(options)
    platform = Platform.resolve(platform)

    sep = r'[\\/]' if platform.windows else '/'
    not_sep = r'[^\\/]' if platform.windows else '[^/]'

    out = []
    depth = 0
    index = 0
    n = len(pattern)

    while index < n:
        char = pattern[index]

        if char == '\\':
            index += 1
            out.append(re.escape(pattern[index] if index < n else '\\'))
            index += 1

        elif char == '/':
            out.append(sep)
            index += 1

        elif char == '*':
            end = index
            while end < n and pattern[end] == '*':
                end += 1

            if opts.greedy:
                out.append('.*')
            elif (end - index >= 2
                  and (index == 0 or pattern[index - 1] == '/')
                  and (end == n or pattern[end] == '/')):
                if end < n:
                    # "**/" also matches no leading segments at all
                    out.append(f'(?:.*{sep})?')
                    end += 1
                elif out and out[-1] == sep:
                    # "/**" also matches the directory itself
                    out.pop()
                    out.append(f'(?:{sep}.*)?')
                else:
                    out.append('.*')
            else:
                out.append(not_sep + '*')
            index = end

        elif char == '?':
            out.append(re.escape(char) if opts.simple else not_sep)
            index += 1

        elif char == '[' and not opts.simple:
            close = _class_end(pattern, index)
            if close < 0:
                out.append(re.escape(char))
                index += 1
            else:
                body = pattern[index + 1:close]
                if body[:1] not in ('!', '^'):
                    # A range such as [+-0] would otherwise span the separator
                    out.append(f'(?!{sep})')
                out.append('[' + _class_body(body, platform.separators) + ']')
                index = close + 1

        elif char == '{' and not opts.simple:
            out.append('(?:')
            depth += 1
            index += 1

        elif char == ',' and depth and not opts.simple:
            out.append('|')
            index += 1

        elif char == '}' and depth and not opts.simple:
            out.append(')')
            depth -= 1
            index += 1

        else:
            out.append(re.escape(char))
            index += 1

    if depth:
        raise GlobSyntaxError(f'Unclosed "{{" in glob pattern "{pattern}"', pattern)

    body = ''.join(out)
    if opts.fragment:
        return body
    return r'\A' + body + r'\Z'


def _regex_flags(opts: GlobOptions, platform: Platform) -> int:
    flags = 0
    if opts.case_insensitive(platform):
        flags |= re.IGNORECASE
    if opts.multiline:
        flags |= re.MULTILINE
    if opts.dotall:
        flags |= re.DOTALL
    return flags


_compile_lock = threading.Lock()


@cached(cache={}, lock=_compile_lock)
def _compile_glob(pattern: str, opts: GlobOptions, platform: Platform) -> CompiledPattern:
    regex = re.compile(translate(pattern, opts, platform=platform), _regex_flags(opts, platform))
    return CompiledPattern.from_regex(regex, source=pattern)


def compile_pattern(pattern: PatternLike,
                    options: Union[str, GlobOptions, None] = None,
                    *,
                    platform: Optional[Platform] = None) -> CompiledPattern:
    """Compile ``pattern`` into a ``CompiledPattern``.

    Args:
        pattern: Glob string, compiled ``re.Pattern``, predicate
            ``(name, node) -> bool`` or an existing ``CompiledPattern``
        options: Glob option letters or a parsed ``GlobOptions``
        platform: Platform deciding separators and default case rules

    Returns:
        A shared CompiledPattern for glob strings (cached per pattern,
        options and platform); a thin wrapper otherwise.
    """
    if isinstance(pattern, CompiledPattern):
        return pattern
    if isinstance(pattern, str):
        return _compile_glob(pattern, GlobOptions.parse(options), Platform.resolve(platform))
    if isinstance(pattern, re.Pattern):
        return CompiledPattern.from_regex(pattern)
    if callable(pattern):
        return CompiledPattern(pattern, source=getattr(pattern, '__name__', None))
    raise TypeError(f"Cannot compile {type(pattern).__name__} as a pattern")
