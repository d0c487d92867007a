"""Render compiled templates and callback replacements against one match."""
from __future__ import annotations

from typing import Any, List, Tuple

from textsub.core.interfaces.matching import MatchLikeProtocol
from textsub.core.interfaces.templating import TemplateRendererProtocol
from textsub.core.models import CallbackReplacement, GroupRef, Template
from textsub.errors import InvalidReplacement


def match_groups(match: MatchLikeProtocol) -> Tuple[Any, ...]:
    """Return groups 0..highest participating group of *match*.

    Groups that did not participate but sit below a participating one stay
    in place as ``None``.
    """
    groups = list(match.groups())
    while groups and groups[-1] is None:
        groups.pop()
    return (match.group(0), *groups)


class TemplateRenderer(TemplateRendererProtocol):
    """Concatenate literal segments and captured groups, in segment order.

    Group references that the match cannot satisfy (no such group, or the
    group did not participate) contribute empty text.
    """

    def render(self, template: Template, match: MatchLikeProtocol) -> str:
        out: List[str] = []
        for seg in template.segments:
            if isinstance(seg, GroupRef):
                try:
                    value = match.group(seg.index)
                except IndexError:
                    continue
                if value is not None:
                    out.append(value)
            else:
                out.append(seg.text)
        return ''.join(out)

    def call(self, spec: CallbackReplacement, match: MatchLikeProtocol) -> str:
        """Invoke a callback replacement with the groups of *match*."""
        value = spec.fn(match_groups(match))
        if not isinstance(value, str):
            raise InvalidReplacement(value, callback=spec.fn)
        return value
