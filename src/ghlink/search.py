"""Resolve multi-line search text to the file lines it matches.

Each search line must be a substring of some file line, and successive search
lines must match successive (not necessarily adjacent) file lines.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from ghlink.errors import NoMatch, ReadFailure


def pattern_lines(text: str) -> list[str]:
    """Split search text into lines; a single trailing newline doesn't add an empty line."""
    if text.endswith('\n'):
        text = text[:-1]
    return [ line.rstrip('\r') for line in text.split('\n') ]


def match_lines(lines: Iterable[str], patterns: Sequence[str]) -> list[int]:
    """Return the 1-based numbers of the lines matching each of ``patterns``, in order.

    Raises ``NoMatch`` if the lines run out before every pattern has matched.
    """
    if not patterns:
        raise NoMatch('')
    matched: list[int] = []
    idx = 0
    for lineno, line in enumerate(lines, 1):
        if patterns[idx] in line:
            matched.append(lineno)
            idx += 1
            if idx == len(patterns):
                break
    if idx < len(patterns):
        raise NoMatch('\n'.join(patterns))
    return matched


def search_lines(path: str, text: str) -> list[int]:
    """Open ``path`` and match ``text`` against its lines."""
    patterns = pattern_lines(text)
    try:
        with open(path, 'r') as fd:
            lines = map(lambda line: line.rstrip('\n').rstrip('\r'), fd)
            try:
                return match_lines(lines, patterns)
            except NoMatch:
                raise NoMatch(text, path) from None
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailure(path, e) from e
