"""
matchers – Adapters exposing the matcher contract over `re` and plain `str`.

Both adapters share the scanning rule used by the replace driver: after a
zero-width match the next search starts one character further, and a
zero-width match at the end of the subject ends the scan.

`match_at` completes the matcher contract for callers that need an anchored
attempt; the replace driver and split only scan with `search`/`find_all`.
"""
from __future__ import annotations

import abc
import re
from typing import Iterator, Optional, Union

from textsub.core.interfaces.matching import MatcherProtocol, MatchLikeProtocol
from textsub.core.models import LiteralMatch, MatchKind
from textsub.errors import InvalidArguments


class _ScanningMatcher(MatcherProtocol):
    kind: MatchKind

    @abc.abstractmethod
    def search(self, subject: str, pos: int = 0) -> Optional[MatchLikeProtocol]:
        ...

    @abc.abstractmethod
    def match_at(self, subject: str, offset: int) -> Optional[MatchLikeProtocol]:
        ...

    def find_all(self, subject: str) -> Iterator[MatchLikeProtocol]:
        n = len(subject)
        pos = 0
        while pos <= n:
            m = self.search(subject, pos)
            if m is None:
                return
            yield m
            end = m.end()
            if end == m.start():
                if end >= n:
                    return
                end += 1
            pos = end


class LiteralMatcher(_ScanningMatcher):
    """Locate a fixed substring with ``str.find``."""

    kind = MatchKind.LITERAL

    def __init__(self, needle: str) -> None:
        self.needle = needle

    def search(self, subject: str, pos: int = 0) -> Optional[LiteralMatch]:
        idx = subject.find(self.needle, pos)
        if idx == -1:
            return None
        return LiteralMatch(subject, idx, idx + len(self.needle))

    def match_at(self, subject: str, offset: int) -> Optional[LiteralMatch]:
        if offset > len(subject) or not subject.startswith(self.needle, offset):
            return None
        return LiteralMatch(subject, offset, offset + len(self.needle))

    def __repr__(self) -> str:
        return f'LiteralMatcher({self.needle!r})'


class RegexMatcher(_ScanningMatcher):
    """Locate matches of a compiled regular expression."""

    kind = MatchKind.PATTERN

    def __init__(self, pattern: re.Pattern[str]) -> None:
        self.pattern = pattern

    def search(self, subject: str, pos: int = 0) -> Optional[re.Match[str]]:
        return self.pattern.search(subject, pos)

    def match_at(self, subject: str, offset: int) -> Optional[re.Match[str]]:
        return self.pattern.match(subject, offset)

    def __repr__(self) -> str:
        return f'RegexMatcher({self.pattern.pattern!r})'


def matcher_for(match: Union[str, re.Pattern[str]]) -> _ScanningMatcher:
    """Build the matcher for a replace/split match argument."""
    if isinstance(match, re.Pattern):
        if not isinstance(match.pattern, str):
            raise InvalidArguments('match pattern must be compiled from a str, got a bytes pattern')
        return RegexMatcher(match)
    if isinstance(match, str):
        return LiteralMatcher(match)
    raise InvalidArguments(f'match must be a str or a compiled re.Pattern, got {type(match).__name__}')
