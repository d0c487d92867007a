from __future__ import annotations
"""Matcher protocol definitions.

A matcher locates successive, non-overlapping occurrences of something inside
a subject string. ``re.Match`` objects satisfy :class:`MatchLikeProtocol`.
"""

from typing import Any, Iterator, Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class MatchLikeProtocol(Protocol):
    """Transient handle over one located occurrence."""

    def start(self, index: int = 0) -> int:
        ...

    def end(self, index: int = 0) -> int:
        ...

    def group(self, index: int = 0) -> Any:
        ...

    def groups(self, default: Any = None) -> Tuple[Any, ...]:
        ...


@runtime_checkable
class MatcherProtocol(Protocol):
    """Locates matches in a subject string.

    Methods:
        search: Leftmost match starting at or after ``pos``.
        find_all: Lazy left-to-right sequence of non-overlapping matches.
        match_at: Match anchored exactly at ``offset``.
    """

    def search(self, subject: str, pos: int = 0) -> Optional[MatchLikeProtocol]:
        ...

    def find_all(self, subject: str) -> Iterator[MatchLikeProtocol]:
        ...

    def match_at(self, subject: str, offset: int) -> Optional[MatchLikeProtocol]:
        ...
