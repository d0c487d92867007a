from __future__ import annotations

"""Public surface for textsub.core: data model and protocol types."""

from textsub.core.models import (
    CallbackReplacement,
    GroupRef,
    Literal,
    LiteralMatch,
    LiteralReplacement,
    MatchKind,
    ReplaceRule,
    ReplacementSpec,
    Segment,
    Template,
    TemplateReplacement,
)
from textsub.core.interfaces import (
    MatcherProtocol,
    MatchLikeProtocol,
    TemplateCompilerProtocol,
    TemplateRendererProtocol,
)

__all__ = [
    "CallbackReplacement",
    "GroupRef",
    "Literal",
    "LiteralMatch",
    "LiteralReplacement",
    "MatchKind",
    "ReplaceRule",
    "ReplacementSpec",
    "Segment",
    "Template",
    "TemplateReplacement",
    "MatcherProtocol",
    "MatchLikeProtocol",
    "TemplateCompilerProtocol",
    "TemplateRendererProtocol",
]
