"""Addressing modes, and the rules for selecting one from the optional CLI inputs."""
from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Optional, Union

from ghlink.errors import MalformedNumber, ModeError

STDIN = '-'


@dataclass(frozen=True)
class WholeFile:
    pass


@dataclass(frozen=True)
class ExplicitLine:
    line: int


@dataclass(frozen=True)
class ExplicitRange:
    start: int
    end: int


@dataclass(frozen=True)
class SearchText:
    text: str


Mode = Union[WholeFile, ExplicitLine, ExplicitRange, SearchText]


def parse_line(value: Optional[str]) -> Optional[int]:
    """Parse a positional line-number argument (a non-negative decimal integer)."""
    if value is None:
        return None
    if not value.isdecimal():
        raise MalformedNumber(value)
    return int(value)


def resolve_mode(
    line1: Optional[int] = None,
    line2: Optional[int] = None,
    search: Optional[str] = None,
    stdin: Optional[IO[str]] = None,
) -> Mode:
    """Select the addressing mode implied by which inputs were supplied.

    ``search == "-"`` reads the search text from ``stdin``, after the exclusivity checks pass.
    """
    if line1 is None and line2 is not None:
        raise ModeError('end line given without start line')
    if search is not None and line1 is not None:
        raise ModeError('line numbers and search text are mutually exclusive')

    if search is not None:
        if search == STDIN:
            if stdin is None:
                raise ModeError('search text "-" requires standard input')
            search = stdin.read()
        if not search.strip():
            raise ModeError('empty search text')
        return SearchText(search)
    if line2 is not None:
        return ExplicitRange(line1, line2)
    if line1 is not None:
        return ExplicitLine(line1)
    return WholeFile()
