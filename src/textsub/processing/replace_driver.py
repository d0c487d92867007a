"""
replace_driver – Scan a subject string and stitch replacement text in.

The driver resolves the caller's (match, replacement) pair once per call:

    match kind  replacement   → spec
    ----------  -----------     -------------------------------
    LITERAL     str           → LiteralReplacement (verbatim, no `$` syntax)
    PATTERN     str           → compiled template (may be LiteralReplacement)
    PATTERN     callable      → CallbackReplacement
    anything else             → InvalidArguments

and then walks the matches left to right, emitting the gap before each match
followed by its replacement, and finally the tail of the subject.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Tuple, Union

from textsub.core.interfaces.matching import MatchLikeProtocol
from textsub.core.interfaces.templating import TemplateCompilerProtocol
from textsub.core.models import (
    CallbackReplacement,
    LiteralReplacement,
    MatchKind,
    ReplacementSpec,
    TemplateReplacement,
)
from textsub.errors import InvalidArguments
from textsub.logging.helpers import get_logger, trace
from textsub.processing.matchers import _ScanningMatcher, matcher_for
from textsub.processing.template_compiler import TemplateCompiler
from textsub.processing.template_renderer import TemplateRenderer

MatchArg = Union[str, re.Pattern[str]]


class ReplaceDriver:
    """Replace-all, replace-first and split over a subject string."""

    def __init__(
        self,
        *,
        compiler: Optional[TemplateCompilerProtocol] = None,
        renderer: Optional[TemplateRenderer] = None,
        logger: Optional[logging.Logger] = None,
        trace_enabled: Optional[bool] = None,
    ) -> None:
        self._compiler = compiler or TemplateCompiler()
        self._renderer = renderer or TemplateRenderer()
        self._log = logger or get_logger('driver')
        self._trace = trace_enabled

    def resolve(self, kind: MatchKind, replacement: object) -> ReplacementSpec:
        """Map a match kind and a raw replacement value to a ReplacementSpec."""
        if kind is MatchKind.LITERAL:
            if isinstance(replacement, str):
                return LiteralReplacement(replacement)
            if callable(replacement):
                raise InvalidArguments('callback replacements require a compiled pattern, not a plain string match')
        elif kind is MatchKind.PATTERN:
            if isinstance(replacement, str):
                return self._compiler.compile(replacement)
            if callable(replacement):
                return CallbackReplacement(replacement)
        raise InvalidArguments(
            f'unsupported replacement of type {type(replacement).__name__} for a {kind.value} match'
        )

    def render(self, spec: ReplacementSpec, match: MatchLikeProtocol) -> str:
        """Replacement text for one match."""
        if isinstance(spec, LiteralReplacement):
            return spec.text
        if isinstance(spec, TemplateReplacement):
            return self._renderer.render(spec.template, match)
        if isinstance(spec, CallbackReplacement):
            return self._renderer.call(spec, match)
        raise InvalidArguments(f'unknown replacement spec {spec!r}')

    def replace(self, subject: str, match: MatchArg, replacement: object) -> str:
        """Replace every non-overlapping match of *match* in *subject*."""
        self._check_subject(subject)
        matcher = matcher_for(match)
        return self._replace_all(subject, matcher, self.resolve(matcher.kind, replacement))

    def replace_first(self, subject: str, match: MatchArg, replacement: object) -> str:
        """Replace the leftmost match of *match* in *subject*, if any."""
        self._check_subject(subject)
        matcher = matcher_for(match)
        return self._replace_first(subject, matcher, self.resolve(matcher.kind, replacement))

    def apply_spec(self, subject: str, match: MatchArg, spec: ReplacementSpec, *, first: bool = False) -> str:
        """Like replace/replace_first with a ReplacementSpec resolved earlier."""
        self._check_subject(subject)
        matcher = matcher_for(match)
        if isinstance(spec, CallbackReplacement) and matcher.kind is MatchKind.LITERAL:
            raise InvalidArguments('callback replacements require a compiled pattern, not a plain string match')
        if first:
            return self._replace_first(subject, matcher, spec)
        return self._replace_all(subject, matcher, spec)

    def _replace_all(self, subject: str, matcher: _ScanningMatcher, spec: ReplacementSpec) -> str:
        out, count = self._stitch(subject, matcher.find_all(subject), spec)
        trace(self._log, 'replace', enabled=self._trace, matcher=repr(matcher), matches=count)
        return out

    def _replace_first(self, subject: str, matcher: _ScanningMatcher, spec: ReplacementSpec) -> str:
        m = matcher.search(subject, 0)
        if m is None:
            trace(self._log, 'replace_first: no match', enabled=self._trace, matcher=repr(matcher))
            return subject
        return subject[:m.start()] + self.render(spec, m) + subject[m.end():]

    def split(self, subject: str, pattern: MatchArg, limit: Optional[int] = None) -> List[str]:
        """Split *subject* around the matches of *pattern*.

        A positive *limit* yields at most *limit* pieces, the last one holding
        the rest of the subject unsplit. ``None`` or ``limit <= 0`` means no
        limit.
        """
        self._check_subject(subject)
        matcher = matcher_for(pattern)
        if limit is not None and not isinstance(limit, int):
            raise InvalidArguments(f'limit must be an int or None, got {type(limit).__name__}')
        budget = limit - 1 if limit is not None and limit > 0 else None

        pieces: List[str] = []
        cursor = 0
        for m in matcher.find_all(subject):
            if budget is not None and len(pieces) >= budget:
                break
            pieces.append(subject[cursor:m.start()])
            cursor = m.end()
        pieces.append(subject[cursor:])
        trace(self._log, 'split', enabled=self._trace, matcher=repr(matcher), pieces=len(pieces))
        return pieces

    def _stitch(
        self,
        subject: str,
        matches: Iterable[MatchLikeProtocol],
        spec: ReplacementSpec,
    ) -> Tuple[str, int]:
        if isinstance(spec, LiteralReplacement):
            text = spec.text
            render = None
        else:
            text = ''
            render = self.render

        buf: List[str] = []
        cursor = 0
        count = 0
        for m in matches:
            buf.append(subject[cursor:m.start()])
            buf.append(text if render is None else render(spec, m))
            cursor = m.end()
            count += 1
        if not count:
            return subject, 0
        buf.append(subject[cursor:])
        return ''.join(buf), count

    @staticmethod
    def _check_subject(subject: object) -> None:
        if not isinstance(subject, str):
            raise InvalidArguments(f'subject must be a str, got {type(subject).__name__}')


__all__ = ['ReplaceDriver', 'MatchArg']
