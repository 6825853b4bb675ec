from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

HOST = 'github.com'


@dataclass(frozen=True)
class Anchor:
    """Line fragment of a blob URL: ``#L{start}``, or ``#L{start}-L{end}`` when ``end`` is set.

    ``end`` is not required to be ≥ ``start``; it's emitted as given.
    """
    start: int
    end: Optional[int] = None

    @classmethod
    def from_lines(cls, lines: Sequence[int]) -> Anchor:
        """Anchor spanning the first and last of a search result's line numbers."""
        if not lines:
            raise ValueError('Anchor requires at least one line number')
        return cls(lines[0], lines[-1] if len(lines) > 1 else None)

    def __str__(self):
        if self.end is None:
            return f'#L{self.start}'
        return f'#L{self.start}-L{self.end}'


def format_url(
    repo: str,
    rev: str,
    path: str,
    anchor: Optional[Anchor] = None,
    host: str = HOST,
) -> str:
    url = f'https://{host}/{repo}/blob/{rev}/{path}'
    if anchor is not None:
        url += str(anchor)
    return url
