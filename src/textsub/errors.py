"""Exceptions raised by textsub.

All errors derive from :class:`TextSubError`, itself a ``ValueError`` so
callers that already guard string operations with ``except ValueError`` keep
working.
"""
from __future__ import annotations

from typing import Optional


class TextSubError(ValueError):
    """Base class for every textsub failure."""


class InvalidTemplate(TextSubError):
    """A replacement template contains a malformed ``$`` or escape sequence."""

    def __init__(self, message: str, *, template: str, offset: int) -> None:
        super().__init__(f'{message} at offset {offset} in template {template!r}')
        self.template = template
        self.offset = offset


class InvalidArguments(TextSubError):
    """The match argument and the replacement argument cannot be combined."""


class InvalidReplacement(TextSubError):
    """A replacement callback returned something other than a string."""

    def __init__(self, value: object, *, callback: Optional[object] = None) -> None:
        name = getattr(callback, '__qualname__', None) or repr(callback)
        super().__init__(f'replacement callback {name} returned {type(value).__name__}, expected str')
        self.value = value
        self.callback = callback
