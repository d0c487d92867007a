from __future__ import annotations

r"""textsub – `$n` template replacement, replace-first and split over strings.

Quick reference::

    >>> import re, textsub
    >>> textsub.replace("Almost Pig Latin", re.compile(r"\b(\w)(\w+)\b"), "$2$1ay")
    'lmostAay igPay atinLay'
    >>> textsub.split("a,b,c,d", ",", 2)
    ['a', 'b,c,d']
"""

from typing import List, Optional

from textsub.core.models import ReplacementSpec
from textsub.errors import InvalidArguments, InvalidReplacement, InvalidTemplate, TextSubError
from textsub.processing.replace_driver import MatchArg
from textsub.processing.template_compiler import quote_replacement, unquote_replacement
from textsub.runtime.config import EngineConfig
from textsub.runtime.engine import EngineBuilder, ReplaceEngine, get_default_engine, reset_default_engine

__version__ = '0.1.0'


def replace(s: str, match: MatchArg, replacement: object) -> str:
    """Replace every match of *match* (a substring or compiled pattern) in *s*.

    With a plain-string *match* the replacement is used verbatim. With a
    compiled pattern it is a `$n` template, or a callable receiving the tuple
    of captured groups.
    """
    return get_default_engine().replace(s, match, replacement)


def replace_first(s: str, match: MatchArg, replacement: object) -> str:
    """Like :func:`replace` but only the leftmost match is replaced."""
    return get_default_engine().replace_first(s, match, replacement)


def split(s: str, pattern: MatchArg, limit: Optional[int] = None) -> List[str]:
    """Split *s* around *pattern*; a positive *limit* caps the number of pieces."""
    return get_default_engine().split(s, pattern, limit)


def compile_template(raw: str) -> ReplacementSpec:
    return get_default_engine().compile_template(raw)


__all__ = [
    '__version__',
    'replace',
    'replace_first',
    'split',
    'compile_template',
    'quote_replacement',
    'unquote_replacement',
    'EngineBuilder',
    'EngineConfig',
    'ReplaceEngine',
    'get_default_engine',
    'reset_default_engine',
    'TextSubError',
    'InvalidTemplate',
    'InvalidArguments',
    'InvalidReplacement',
]
