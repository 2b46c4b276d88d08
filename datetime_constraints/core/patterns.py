"""
strptime(3) pattern helpers.

Python's strptime/strftime only guarantee the C89 directives. The common
POSIX shorthands are expanded here so the same pattern both parses and
formats on every platform.
"""

import re

PATTERN_ALIASES = {
    "D": "%m/%d/%y",
    "F": "%Y-%m-%d",
    "T": "%H:%M:%S",
    "R": "%H:%M",
    "h": "%b",
}

_DIRECTIVE = re.compile(r"%(.)")


def expand_pattern(pattern: str) -> str:
    """
    Replace shorthand directives with their long form.

    >>> expand_pattern("%D %T")
    '%m/%d/%y %H:%M:%S'
    >>> expand_pattern("100%% %F")
    '100%% %Y-%m-%d'
    """
    return _DIRECTIVE.sub(lambda m: PATTERN_ALIASES.get(m.group(1), m.group(0)), pattern)
