from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union


class MatchKind(enum.Enum):
    """How the match argument of a replace call locates its targets."""
    LITERAL = 'literal'
    PATTERN = 'pattern'


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class GroupRef:
    index: int


Segment = Union[Literal, GroupRef]


@dataclass(frozen=True)
class Template:
    """Compiled replacement template: segments rendered in order."""
    segments: Tuple[Segment, ...]


@dataclass(frozen=True)
class LiteralReplacement:
    """Replacement text used verbatim for every match (the fast path)."""
    text: str


@dataclass(frozen=True)
class TemplateReplacement:
    template: Template


@dataclass(frozen=True)
class CallbackReplacement:
    """Replacement computed per match by a caller-supplied function.

    The function receives the tuple of captured groups (group 0 first).
    """
    fn: Callable[[Tuple[Any, ...]], Any]


ReplacementSpec = Union[LiteralReplacement, TemplateReplacement, CallbackReplacement]


@dataclass(frozen=True)
class LiteralMatch:
    """Match handle produced by a fixed-substring search."""
    string: str
    pos: int
    endpos: int

    def start(self, index: int = 0) -> int:
        self._check(index)
        return self.pos

    def end(self, index: int = 0) -> int:
        self._check(index)
        return self.endpos

    def span(self, index: int = 0) -> Tuple[int, int]:
        self._check(index)
        return self.pos, self.endpos

    def group(self, index: int = 0) -> str:
        self._check(index)
        return self.string[self.pos:self.endpos]

    def groups(self, default: Any = None) -> Tuple[Any, ...]:
        return ()

    @staticmethod
    def _check(index: int) -> None:
        if index != 0:
            raise IndexError('no such group')


@dataclass(frozen=True)
class ReplaceRule:
    """One parsed `/pattern/replacement/flags` spec."""
    pattern: re.Pattern[str]
    replacement: str
    is_global: bool = True
    spec: Optional[ReplacementSpec] = None
