"""Look up the GitHub repository, commit, and repo-relative path of a local file."""
from __future__ import annotations

from dataclasses import dataclass
from os.path import basename, dirname
from posixpath import join
from subprocess import CalledProcessError
from typing import Callable, Optional, Protocol

from utz import cd, err, proc

from ghlink.errors import LookupFailure

REMOTE_PREFIX = 'git@github.com:'
DEFAULT_REMOTE = 'origin'

Log = Optional[Callable[[str], None]]


def parse_remote(url: str) -> str:
    """``git@github.com:owner/name.git`` → ``owner/name``."""
    url = url.strip()
    if not url.startswith(REMOTE_PREFIX):
        raise LookupFailure('repo', f'unexpected prefix for remote "{url}" (want "{REMOTE_PREFIX}")')
    repo = url[len(REMOTE_PREFIX):]
    if repo.endswith('.git'):
        repo = repo[:-len('.git')]
    return repo


class Repo(Protocol):
    """Repository-metadata queries, each run in a working directory."""

    def remote_url(self, cwd: str) -> str: ...

    def revision(self, cwd: str) -> str: ...

    def prefix(self, cwd: str) -> str: ...


class Git:
    """``Repo`` backed by the ``git`` executable."""
    def __init__(self, remote: str = DEFAULT_REMOTE, log: Log = None):
        self.remote = remote
        self.log = log

    def _text(self, op: str, cwd: str, *cmd: str) -> str:
        try:
            with cd(cwd):
                return proc.text(*cmd, log=self.log).strip()
        except (CalledProcessError, OSError) as e:
            raise LookupFailure(op, e) from e

    def remote_url(self, cwd: str) -> str:
        return self._text('repo', cwd, 'git', 'remote', 'get-url', self.remote)

    def revision(self, cwd: str) -> str:
        return self._text('commit', cwd, 'git', 'rev-parse', 'HEAD')

    def prefix(self, cwd: str) -> str:
        return self._text('relative path', cwd, 'git', 'rev-parse', '--show-prefix')


def verbose_git(remote: str, verbose: bool) -> Git:
    return Git(remote=remote, log=err if verbose else None)


@dataclass(frozen=True)
class Location:
    repo: str
    rev: str
    path: str


def locate(path: str, git: Repo) -> Location:
    """Resolve ``path``'s repository (``owner/name``), current commit, and repo-relative path."""
    cwd = dirname(path) or '.'
    repo = parse_remote(git.remote_url(cwd))
    rev = git.revision(cwd)
    if not rev:
        raise LookupFailure('commit', 'empty revision')
    rel_path = join(git.prefix(cwd), basename(path))
    return Location(repo=repo, rev=rev, path=rel_path)
