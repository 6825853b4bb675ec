from __future__ import annotations

from ghlink.errors import GhlinkError, LookupFailure, MalformedNumber, ModeError, NoMatch, ReadFailure
from ghlink.modes import ExplicitLine, ExplicitRange, Mode, SearchText, WholeFile, parse_line, resolve_mode
from ghlink.repo import Git, Location, Repo, locate, parse_remote
from ghlink.search import match_lines, pattern_lines, search_lines
from ghlink.url import Anchor, format_url


def anchor(path: str, mode: Mode) -> Anchor | None:
    """Line anchor for ``mode``; searches ``path`` in ``SearchText`` mode."""
    if isinstance(mode, ExplicitLine):
        return Anchor(mode.line)
    if isinstance(mode, ExplicitRange):
        return Anchor(mode.start, mode.end)
    if isinstance(mode, SearchText):
        return Anchor.from_lines(search_lines(path, mode.text))
    return None


def blob_url(path: str, mode: Mode, git: Repo) -> str:
    """Permalink to ``path`` at the current commit, anchored per ``mode``."""
    loc = locate(path, git)
    return format_url(loc.repo, loc.rev, loc.path, anchor(path, mode))
