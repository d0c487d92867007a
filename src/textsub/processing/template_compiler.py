"""
template_compiler – Parse `$n` replacement templates into segment plans.

Template syntax:

  • `$n`  → text of capture group n (one or more decimal digits, greedy)
  • `\\X` → the character X verbatim, whatever it is
  • any other character is literal

A bare `$` without digits and a trailing lone backslash are rejected with
InvalidTemplate. Templates that reduce to a single literal are returned as
LiteralReplacement so the replace driver can skip per-match rendering.
"""
from __future__ import annotations

import functools
import logging
import re
from typing import List, Optional

from textsub.constants import DEFAULT_TEMPLATE_CACHE_SIZE, ESCAPE_CHAR, GROUP_SIGIL
from textsub.core.interfaces.templating import TemplateCompilerProtocol
from textsub.core.models import (
    GroupRef,
    Literal,
    LiteralReplacement,
    ReplacementSpec,
    Segment,
    Template,
    TemplateReplacement,
)
from textsub.errors import InvalidArguments, InvalidTemplate
from textsub.logging.helpers import get_logger, trace

_LITERAL_RUN_RX = re.compile(r'(?:[^$\\]|\\.)+', re.DOTALL)
_GROUP_REF_RX = re.compile(r'\$([0-9]+)')
_ESCAPE_PAIR_RX = re.compile(r'\\(.)', re.DOTALL)
_SPECIAL_RX = re.compile(r'[$\\]')


def quote_replacement(text: str) -> str:
    """Escape every `$` and backslash so *text* compiles to itself."""
    return _SPECIAL_RX.sub(lambda m: ESCAPE_CHAR + m.group(0), text)


def unquote_replacement(text: str) -> str:
    """Drop backslash escaping pairwise (`\\X` → `X`).

    A trailing lone backslash has nothing to escape and is kept.
    """
    return _ESCAPE_PAIR_RX.sub(lambda m: m.group(1), text)


class TemplateCompiler(TemplateCompilerProtocol):
    """Compile raw replacement strings into ReplacementSpec values.

    Parameters
    ----------
    cache_size:
        Number of compiled templates memoized per instance. ``0`` disables
        the cache.
    logger:
        Optional logger instance.
    trace_enabled:
        Force trace output on or off; ``None`` defers to TEXTSUB_TRACE.
    """

    def __init__(
        self,
        *,
        cache_size: int = DEFAULT_TEMPLATE_CACHE_SIZE,
        logger: Optional[logging.Logger] = None,
        trace_enabled: Optional[bool] = None,
    ) -> None:
        if cache_size < 0:
            raise ValueError('cache_size must be >= 0')
        self._log = logger or get_logger('compiler')
        self._trace = trace_enabled
        self._cache_size = cache_size
        if cache_size:
            self._compile = functools.lru_cache(maxsize=cache_size)(self._compile_uncached)
        else:
            self._compile = self._compile_uncached

    @property
    def cache_size(self) -> int:
        return self._cache_size

    def compile(self, raw: str) -> ReplacementSpec:
        """Compile *raw* into a LiteralReplacement or TemplateReplacement.

        Raises
        ------
        InvalidTemplate
            On a bare `$` or a trailing unescaped backslash.
        InvalidArguments
            If *raw* is not a string.
        """
        if not isinstance(raw, str):
            raise InvalidArguments(f'template must be a str, got {type(raw).__name__}')
        return self._compile(raw)

    def cache_info(self):
        """Return lru_cache statistics, or None when caching is disabled."""
        info = getattr(self._compile, 'cache_info', None)
        return info() if info else None

    def _compile_uncached(self, raw: str) -> ReplacementSpec:
        segments = self.parse(raw)
        trace(self._log, 'compiled template', enabled=self._trace, template=raw, segments=len(segments))
        if not segments:
            return LiteralReplacement('')
        if len(segments) == 1 and isinstance(segments[0], Literal):
            return LiteralReplacement(segments[0].text)
        return TemplateReplacement(Template(tuple(segments)))

    def parse(self, raw: str) -> List[Segment]:
        """Scan *raw* left to right and return the merged segment list."""
        segments: List[Segment] = []
        pending: List[str] = []
        i = 0
        n = len(raw)

        def _flush() -> None:
            if pending:
                segments.append(Literal(''.join(pending)))
                pending.clear()

        while i < n:
            run = _LITERAL_RUN_RX.match(raw, i)
            if run:
                pending.append(unquote_replacement(run.group(0)))
                i = run.end()
                continue

            if raw[i] == GROUP_SIGIL:
                ref = _GROUP_REF_RX.match(raw, i)
                if ref is None:
                    raise InvalidTemplate("'$' is not followed by a group number", template=raw, offset=i)
                _flush()
                segments.append(GroupRef(int(ref.group(1))))
                i = ref.end()
                continue

            # Only a backslash in last position gets here.
            raise InvalidTemplate('trailing unescaped backslash', template=raw, offset=i)

        _flush()
        return segments
