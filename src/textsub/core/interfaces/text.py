from __future__ import annotations
"""Text transformer protocol definitions."""

from typing import Optional, Protocol, Sequence

from textsub.core.models import ReplaceRule


class TextTransformerProtocol(Protocol):
    """Protocol for replace-spec driven text transformation helpers.

    Implementations are expected to:
      * Parse a `/pattern/replacement/flags` spec into a ReplaceRule.
      * Apply a sequence of replace/preserve specs to a given text.
    """

    def parse_replace_spec(self, spec: str) -> Optional[ReplaceRule]:
        ...

    def apply_replacements(
        self,
        text: str,
        replace_specs: Sequence[str] | None,
        preserve_specs: Sequence[str] | None,
    ) -> str:
        ...
