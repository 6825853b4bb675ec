from __future__ import annotations

import sys
from typing import Optional

from click import Command, IntRange, UsageError, argument, command, echo, get_current_context, get_text_stream, option
from utz import env, err

from ghlink import GhlinkError, ModeError, Mode, blob_url, parse_line, resolve_mode
from ghlink.repo import DEFAULT_REMOTE, verbose_git

USAGE = 'usage: ghlink [-l1 line1 [-l2 line2] | -s text] file'
USAGE_POS = 'usage: ghlink-pos file [line1 [line2]]'

GHLINK_REMOTE_VAR = 'GHLINK_REMOTE'
GHLINK_VERBOSE_VAR = 'GHLINK_VERBOSE'

remote_opt = option('-r', '--remote', help=f'Git remote to read the repository from; falls back to ${GHLINK_REMOTE_VAR}, then "{DEFAULT_REMOTE}"')
verbose_opt = option('-v', '--verbose', is_flag=True, default=None, help=f'Log git commands to stderr; falls back to ${GHLINK_VERBOSE_VAR}')


class SynopsisCommand(Command):
    """Command whose usage line (shown with every usage error) is a fixed synopsis."""
    def __init__(self, *args, synopsis: str, **kwargs):
        super().__init__(*args, **kwargs)
        self.synopsis = synopsis

    def format_usage(self, ctx, formatter):
        formatter.write(f'{self.synopsis}\n')


def run(path: str, mode: Mode, remote: Optional[str], verbose: Optional[bool]):
    if remote is None:
        remote = env.get(GHLINK_REMOTE_VAR, DEFAULT_REMOTE)
    if verbose is None:
        verbose = bool(env.get(GHLINK_VERBOSE_VAR))
    if verbose:
        err(f'{path}: {mode}')

    git = verbose_git(remote, verbose)
    try:
        url = blob_url(path, mode, git)
    except GhlinkError as e:
        err(f'ghlink: {e}')
        sys.exit(1)
    echo(url)


@command('ghlink', cls=SynopsisCommand, synopsis=USAGE)
@option('-l1', '--line1', type=IntRange(min=0), help='Print link to this start line number')
@option('-l2', '--line2', type=IntRange(min=0), help='Print link to this end line number (requires -l1)')
@option('-s', '--search', help='Print link to the lines matching this text; "-" reads it from stdin')
@remote_opt
@verbose_opt
@argument('path')
def main(
    line1: Optional[int],
    line2: Optional[int],
    search: Optional[str],
    remote: Optional[str],
    verbose: Optional[bool],
    path: str,
):
    """Print a GitHub permalink to a file, a line or range of lines in it, or the lines matching some text."""
    try:
        mode = resolve_mode(line1, line2, search, stdin=get_text_stream('stdin'))
    except ModeError as e:
        raise UsageError(str(e), get_current_context())
    run(path, mode, remote, verbose)


@command('ghlink-pos', cls=SynopsisCommand, synopsis=USAGE_POS)
@remote_opt
@verbose_opt
@argument('path')
@argument('line1', required=False)
@argument('line2', required=False)
def main_pos(
    remote: Optional[str],
    verbose: Optional[bool],
    path: str,
    line1: Optional[str],
    line2: Optional[str],
):
    """Print a GitHub permalink to a file, or a line or range of lines in it."""
    try:
        start, end = parse_line(line1), parse_line(line2)
    except GhlinkError as e:
        err(f'ghlink: {e}')
        sys.exit(1)
    try:
        mode = resolve_mode(start, end)
    except ModeError as e:
        raise UsageError(str(e), get_current_context())
    run(path, mode, remote, verbose)


if __name__ == '__main__':
    main()
