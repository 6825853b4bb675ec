from __future__ import annotations


class GhlinkError(Exception):
    """Base class for fatal, non-usage errors; the CLI prints these and exits 1."""


class LookupFailure(GhlinkError):
    """A repository-metadata query failed, or returned something unusable."""
    def __init__(self, op: str, cause: object):
        self.op = op
        self.cause = cause
        super().__init__(f'cannot get {op}: {cause}')


class ReadFailure(GhlinkError):
    def __init__(self, path: str, cause: object):
        self.path = path
        self.cause = cause
        super().__init__(f'cannot search lines: {cause}')


class NoMatch(GhlinkError):
    """Not every search line matched, in order, before the file ended."""
    def __init__(self, text: str, path: str | None = None):
        self.text = text
        self.path = path
        where = f'file "{path}"' if path is not None else 'input'
        super().__init__(f'cannot search lines: {where} does not contain string "{text}"')


class MalformedNumber(GhlinkError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f'invalid line number: "{value}"')


class ModeError(ValueError):
    """Invalid combination of addressing inputs (a usage error)."""
