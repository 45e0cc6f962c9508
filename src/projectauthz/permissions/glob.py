"""Shell-glob matching used by every project rule.

``*`` matches any run of characters, including none and including ``/``.
Every other character matches itself; ``?`` and ``[...]`` carry no special
meaning. Matching is anchored and case-sensitive.
"""

from __future__ import annotations

import functools
import re

from ..exceptions import PatternError

WILDCARD = "*"


@functools.lru_cache(maxsize=1024)
def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(".*".join(re.escape(part) for part in pattern.split(WILDCARD)), re.DOTALL)


def glob_match(pattern: str, value: str) -> bool:
    """Check whether ``value`` matches the glob ``pattern`` in full.

    Args:
        pattern: Glob pattern, e.g. ``"dev-*"`` or ``"https://github.com/org/*"``.
        value: Candidate string (cluster name, namespace, repo URL, group, kind).

    Returns:
        True if the whole value matches the whole pattern.

    Raises:
        PatternError: If pattern or value is not a string.

    Example::

        glob_match("dev-*", "dev-usw2-cluster")   # True
        glob_match("dev-*", "prod-usw2-cluster")  # False
        glob_match("*", "")                       # True
    """
    if not isinstance(pattern, str):
        raise PatternError(f"glob pattern must be a string, got {type(pattern).__name__}", pattern=pattern)
    if not isinstance(value, str):
        raise PatternError(f"glob candidate must be a string, got {type(value).__name__}", value=value)

    if pattern == WILDCARD:
        return True
    if WILDCARD not in pattern:
        return pattern == value
    return _compile(pattern).fullmatch(value) is not None


__all__ = [
    "WILDCARD",
    "glob_match",
]
