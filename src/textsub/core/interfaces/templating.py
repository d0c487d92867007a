from __future__ import annotations
from typing import Protocol, runtime_checkable

from textsub.core.interfaces.matching import MatchLikeProtocol
from textsub.core.models import ReplacementSpec, Template


@runtime_checkable
class TemplateCompilerProtocol(Protocol):
    """Turns a raw replacement string into a ReplacementSpec."""

    def compile(self, raw: str) -> ReplacementSpec:
        ...


@runtime_checkable
class TemplateRendererProtocol(Protocol):
    """Produces the replacement text of one match from a compiled template."""

    def render(self, template: Template, match: MatchLikeProtocol) -> str:
        ...
