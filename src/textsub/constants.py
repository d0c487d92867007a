from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates the template syntax characters to reduce cross-module
coupling between the compiler and the quoting helpers.
"""

# Introduces a group reference ("$1", "$12").
GROUP_SIGIL: str = '$'

# Escapes the next character of a template ("\$" is a literal dollar).
ESCAPE_CHAR: str = '\\'

DEFAULT_TEMPLATE_CACHE_SIZE: int = 256
