from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence

from textsub.core.interfaces.text import TextTransformerProtocol
from textsub.core.models import MatchKind, ReplaceRule
from textsub.errors import InvalidTemplate
from textsub.logging.helpers import get_logger
from textsub.processing.replace_driver import ReplaceDriver


class TextTransformer(TextTransformerProtocol):
    """Parse and apply `/pattern/replacement/flags` specs.

    Replacements use the `$n` template syntax and run through the
    ReplaceDriver. Invalid specs are logged at WARNING level and ignored.

    Parameters
    ----------
    driver:
        ReplaceDriver used to compile and apply the rules.
    logger:
        Optional logger instance for consistent log format.
    regex_delim:
        Single-character delimiter used to split /pattern/repl/flags.
    """

    def __init__(
        self,
        *,
        driver: Optional[ReplaceDriver] = None,
        logger: Optional[logging.Logger] = None,
        regex_delim: str = '/',
    ) -> None:
        if not isinstance(regex_delim, str) or len(regex_delim) != 1:
            raise ValueError('regex_delim must be a single character string')
        self._driver = driver or ReplaceDriver()
        self._log = logger or get_logger('textops')
        self._delim = regex_delim

    def parse_replace_spec(self, spec: str) -> Optional[ReplaceRule]:
        """Parse a SPEC and return a ReplaceRule, or None when invalid.

        Syntax
        ------
        `/pattern/`             → delete (replacement = ''), global
        `/pattern/repl/flags`   → replace, flags ∈ {g,i,m,s}

        The delimiter may be escaped inside parts as `\\/`; every other
        backslash sequence is kept for the regex or the template compiler.
        Leading and trailing quotes around the whole spec are stripped.
        """
        if spec.startswith(("'", '"')) and spec.endswith(spec[0]) and len(spec) >= 2:
            spec = spec[1:-1]

        if not spec.startswith(self._delim):
            self._log.warning('⚠  invalid replace spec (missing leading %s): %r', self._delim, spec)
            return None

        parts: List[str] = []
        buf: List[str] = []
        escaped = False
        delim = self._delim

        for ch in spec[1:]:  # skip first delimiter
            if escaped:
                if ch != delim:
                    buf.append('\\')
                buf.append(ch)
                escaped = False
                continue
            if ch == '\\':
                escaped = True
                continue
            if ch == delim:
                parts.append(''.join(buf))
                buf = []
                continue
            buf.append(ch)
        if escaped:
            buf.append('\\')
        parts.append(''.join(buf))

        if len(parts) not in {2, 3}:  # pattern / [replacement] / [flags]
            self._log.warning('⚠  invalid replace spec: %r', spec)
            return None

        pattern_src = parts[0]
        replacement = '' if len(parts) == 2 else parts[1]
        flags_src = parts[-1] if len(parts) == 3 else 'g'

        re_flags = 0
        if 'i' in flags_src:
            re_flags |= re.IGNORECASE
        if 'm' in flags_src:
            re_flags |= re.MULTILINE
        if 's' in flags_src:
            re_flags |= re.DOTALL

        try:
            regex = re.compile(pattern_src, flags=re_flags)
        except re.error as exc:
            self._log.warning('⚠  invalid regex in spec %r: %s', spec, exc)
            return None

        try:
            resolved = self._driver.resolve(MatchKind.PATTERN, replacement)
        except InvalidTemplate as exc:
            self._log.warning('⚠  invalid replacement in spec %r: %s', spec, exc)
            return None

        return ReplaceRule(pattern=regex, replacement=replacement, is_global='g' in flags_src, spec=resolved)

    def apply_replacements(
        self,
        text: str,
        replace_specs: Sequence[str] | None,
        preserve_specs: Sequence[str] | None,
    ) -> str:
        """Apply *replace_specs* to *text*, protecting *preserve_specs* regions.

          1) Parse every replacement spec; invalid ones are ignored.
          2) Shield preserve-spec matches behind sentinel tokens.
          3) Apply each rule: global → replace all, otherwise first match only.
          4) Restore shielded regions.
        """
        if not replace_specs:
            return text

        replace_rules = [r for r in (self.parse_replace_spec(s) for s in replace_specs) if r]
        preserve_rules = [r.pattern for r in (self.parse_replace_spec(s) for s in preserve_specs or []) if r]

        if not replace_rules:
            return text

        placeholders: dict[str, str] = {}

        def _shield(groups: tuple) -> str:
            token = f'\x00TSPRS{len(placeholders)}\x00'
            placeholders[token] = groups[0]
            return token

        for rx in preserve_rules:
            text = self._driver.replace(text, rx, _shield)

        for rule in replace_rules:
            spec = rule.spec or self._driver.resolve(MatchKind.PATTERN, rule.replacement)
            text = self._driver.apply_spec(text, rule.pattern, spec, first=not rule.is_global)

        for token, original in placeholders.items():
            text = self._driver.replace(text, token, original)

        return text
